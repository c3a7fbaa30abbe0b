"""
Local File Storage Implementation

DESIGN DECISION: The roster is kept in one JSON file on the user's
machine, named after the storage key. It plays the role a browser's
local storage slot would: one key, whole value overwritten each time.

Writes go to a temporary file that is then renamed over the real one,
so a crash mid-write never leaves a half-written roster behind.
"""

import os
import tempfile
from pathlib import Path
from typing import Optional

from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from deeday.config import get_settings
from deeday.services.storage.interface import (
    RosterStorageInterface,
    StorageReadError,
    StorageWriteError,
)


class LocalFileStorage(RosterStorageInterface):
    """
    Stores the serialized roster in a single local file.

    Missing file means "nothing stored yet" and reads back as None.
    """

    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path is not None else get_settings().roster_path

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> Optional[bytes]:
        try:
            return self._path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageReadError(f"Failed to read {self._path}: {e}") from e

    def write(self, data: bytes) -> None:
        try:
            self._write_atomic(data)
        except OSError as e:
            raise StorageWriteError(f"Failed to write {self._path}: {e}") from e

    @retry(
        retry=retry_if_exception_type(PermissionError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.05, max=0.5),
        reraise=True,
    )
    def _write_atomic(self, data: bytes) -> None:
        """
        Write via temp file + rename.

        Retries on PermissionError only, which is what a reader holding
        the file open on Windows looks like.
        """
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent,
            prefix=f".{self._path.name}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
