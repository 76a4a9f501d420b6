# analyzer/errors.py
from __future__ import annotations
import os


class StorageError(Exception):
    """Backing word file could not be read or written."""

    def __init__(self, path: str | os.PathLike, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = str(path)


class StorageReadError(StorageError):
    """Raised by WordStore.load(); fatal at startup."""


class StorageWriteError(StorageError):
    """Raised by WordStore.persist(); only logged on the append path."""
