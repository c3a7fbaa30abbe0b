"""Services package."""

from deeday.services.storage import (
    InMemoryStorage,
    LocalFileStorage,
    RosterStorageInterface,
    StorageError,
    StorageReadError,
    StorageWriteError,
)

__all__ = [
    # Storage services
    "InMemoryStorage",
    "LocalFileStorage",
    "RosterStorageInterface",
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
]
