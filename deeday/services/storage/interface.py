"""
Abstract Storage Interface

DESIGN DECISION: The roster never talks to a file or a global directly.
It gets one of these injected. This allows us to:
1. Swap the local file for another key-value store later
2. Use in-memory storage for testing
3. Simulate unreadable or full storage in tests

The interface is intentionally tiny: the whole roster lives under a
single key, so read everything or overwrite everything is all we need.
"""

from abc import ABC, abstractmethod
from typing import Optional


class RosterStorageInterface(ABC):
    """
    Abstract interface for the roster's durable storage slot.

    Any storage implementation (local file, in-memory, ...)
    must implement these methods.
    """

    @abstractmethod
    def read(self) -> Optional[bytes]:
        """
        Read the serialized roster.

        Returns:
            The stored bytes, or None if nothing has been stored yet

        Raises:
            StorageReadError: If the slot exists but cannot be read.
                Implementations wrap their own I/O errors (OSError, ...)
                in it; the roster store catches only StorageError.
        """
        pass

    @abstractmethod
    def write(self, data: bytes) -> None:
        """
        Overwrite the serialized roster.

        Args:
            data: The full serialized roster

        Raises:
            StorageWriteError: If the write fails. Implementations wrap
                their own I/O errors (OSError, ...) in it; the roster
                store catches only StorageError, so anything else
                propagates to the caller.
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StorageReadError(StorageError):
    """Stored data exists but could not be read."""
    pass


class StorageWriteError(StorageError):
    """Data could not be written (disk full, permissions, ...)."""
    pass
