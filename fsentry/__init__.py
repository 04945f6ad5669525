"""fsentry: one filesystem entry, with pluggable write backends."""

from fsentry.directory import Directory
from fsentry.errors import FileSystemError, InvalidPathError, WriteError
from fsentry.file import File
from fsentry.interfaces.writer import WriteContext
from fsentry.locations import LocationRegistry, Locations
from fsentry.paths import is_absolute, normalize_path, relative_path, to_absolute_form
from fsentry.writers import DirectWriteContext, RemoteWriteContext, create_write_context

__all__ = [
    "Directory",
    "DirectWriteContext",
    "File",
    "FileSystemError",
    "InvalidPathError",
    "LocationRegistry",
    "Locations",
    "RemoteWriteContext",
    "WriteContext",
    "WriteError",
    "create_write_context",
    "is_absolute",
    "normalize_path",
    "relative_path",
    "to_absolute_form",
]
