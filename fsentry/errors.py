"""Exception types raised by fsentry."""

from __future__ import annotations


class FileSystemError(Exception):
    pass


class WriteError(FileSystemError):
    """A mutating operation was rejected or failed in the backend."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class InvalidPathError(FileSystemError, ValueError):
    pass
