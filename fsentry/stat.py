"""Path decomposition and direct metadata reads.

Decomposition (dirname/basename/filename/extension) is memoized per path in
a ``StatCache``. Everything else hits the filesystem on every call.
Metadata reads answer ``None`` rather than raising when the entry cannot be
stat'ed; ``is_readable`` answers ``False``.
"""

from __future__ import annotations

import filecmp
import hashlib
import logging
import os
from dataclasses import dataclass

from fsentry.errors import InvalidPathError

logger = logging.getLogger(__name__)

EMPTY_MD5 = "d41d8cd98f00b204e9800998ecf8427e"


@dataclass(frozen=True)
class PathInfo:
    """Decomposition of a path string."""

    dirname: str
    basename: str
    filename: str
    extension: str

    @classmethod
    def from_path(cls, path: str) -> PathInfo:
        trimmed = path.rstrip("/")
        if not trimmed:
            # "" or a run of slashes
            return cls(dirname="/" if path else "", basename="", filename="", extension="")
        head, sep, basename = trimmed.rpartition("/")
        if not sep:
            dirname = "."
        else:
            dirname = head.rstrip("/") or "/"
        name, dot, extension = basename.rpartition(".")
        if not dot:
            return cls(dirname=dirname, basename=basename, filename=basename, extension="")
        return cls(dirname=dirname, basename=basename, filename=name, extension=extension)

    @property
    def full_extension(self) -> str:
        """Everything after the first dot: ``php.html`` for ``foo.php.html``."""
        _, dot, rest = self.basename.partition(".")
        return rest if dot else ""


class StatCache:
    """Lazily computed decomposition of one path value."""

    def __init__(self, path: str):
        self.path = path
        self._info: PathInfo | None = None

    @property
    def info(self) -> PathInfo:
        if self._info is None:
            self._info = PathInfo.from_path(self.path)
        return self._info

    def reset(self, path: str | None = None) -> None:
        if path is not None:
            self.path = path
        self._info = None

    def invalidate(self) -> None:
        self.reset()
        clear_stat_cache(self.path)


def clear_stat_cache(path: str | None = None) -> None:
    """Drop platform-level stat caches for ``path``, or all of them.

    CPython never caches ``os.stat``; the only process cache of stat
    signatures is ``filecmp``'s, which can only be dropped as a whole. The
    per-path step is therefore a no-op and ``path`` only documents intent.
    """
    filecmp.clear_cache()


def is_readable(path: str) -> bool:
    """Read-permission probe that never raises for restricted paths."""
    if not path or path[0] == ".":
        raise InvalidPathError("Relative paths disallowed")
    try:
        return os.access(path, os.R_OK)
    except (OSError, ValueError) as e:
        logger.debug("Readability probe failed for %s: %s", path, e)
        return False


def path_exists(path: str) -> bool:
    try:
        os.stat(path)
        return True
    except (OSError, ValueError):
        return False


def _stat_or_none(path: str, follow_symlinks: bool = True) -> os.stat_result | None:
    try:
        return os.stat(path, follow_symlinks=follow_symlinks)
    except (OSError, ValueError) as e:
        logger.debug("stat failed for %s: %s", path, e)
        return None


def file_mode(path: str) -> int | None:
    """Full ``st_mode``; a symbolic link reports its own bits, not its target's."""
    try:
        is_link = os.path.islink(path)
    except ValueError:
        return None
    result = _stat_or_none(path, follow_symlinks=not is_link)
    return result.st_mode if result else None


def file_owner(path: str) -> int | None:
    result = _stat_or_none(path)
    return result.st_uid if result else None


def file_group(path: str) -> int | None:
    result = _stat_or_none(path)
    return result.st_gid if result else None


def file_mtime(path: str) -> int | None:
    """Modification time as whole unix seconds."""
    result = _stat_or_none(path)
    return int(result.st_mtime) if result else None


def file_size(path: str) -> int | None:
    result = _stat_or_none(path)
    return result.st_size if result else None


def file_md5(path: str) -> str:
    """Hex digest of the content, or the digest of nothing for a missing file."""
    if not path_exists(path):
        return EMPTY_MD5
    digest = hashlib.md5()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            digest.update(chunk)
    return digest.hexdigest()
