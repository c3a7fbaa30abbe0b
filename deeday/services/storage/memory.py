"""In-memory storage, used by tests and when no data directory is wanted."""

from typing import Optional

from deeday.services.storage.interface import RosterStorageInterface


class InMemoryStorage(RosterStorageInterface):
    """Keeps the serialized roster in a bytes attribute."""

    def __init__(self, data: Optional[bytes] = None):
        self.data = data
        self.write_count = 0

    def read(self) -> Optional[bytes]:
        return self.data

    def write(self, data: bytes) -> None:
        self.data = data
        self.write_count += 1
