"""
Storage Services Package

Provides the abstract storage interface and concrete implementations.
Currently implements a local JSON file as the backend, but designed to be swappable.
"""

from deeday.services.storage.interface import (
    RosterStorageInterface,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from deeday.services.storage.local_file import LocalFileStorage
from deeday.services.storage.memory import InMemoryStorage

__all__ = [
    # Interfaces
    "RosterStorageInterface",
    # Exceptions
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    # Implementations
    "InMemoryStorage",
    "LocalFileStorage",
]
