"""File entity.

A ``File`` owns one canonical path, a lazily filled ``StatCache`` and an
exclusively owned ``WriteContext``. Reads and stats go straight to the local
filesystem; every mutation is delegated to the write context and always
invalidates the cache, whether or not the backend succeeded.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from fsentry import permissions
from fsentry.paths import explode_segments, join_segments, relative_path, to_absolute_form
from fsentry.stat import (
    StatCache,
    file_group,
    file_md5,
    file_mode,
    file_mtime,
    file_owner,
    file_size,
    is_readable,
    path_exists,
)

if TYPE_CHECKING:
    from fsentry.directory import Directory
    from fsentry.interfaces.writer import WriteContext
    from fsentry.locations import Locations


class File:
    """A single filesystem entry addressed by path.

    Usage:
        file = File("reports/../reports/2024/summary.po")
        file.normalize("/srv/app")      # "/srv/app/reports/2024/summary.po"
        mo = file.clone_extension("mo")
        if mo.creatable():
            mo.create_parent()
            mo.put_contents(data)
    """

    def __init__(self, path: str | os.PathLike = "", context: WriteContext | None = None):
        self._path = ""
        self._relative = True
        # base last used by normalize(); None until first normalized
        self._base: str | None = None
        self._cache = StatCache("")
        self._writer: WriteContext | None = None
        self._set_path(os.fspath(path))
        if context is not None:
            self.set_write_context(context)

    def _set_path(self, path: str) -> None:
        path = str(path)
        fixed = to_absolute_form(path)
        if fixed:
            path = fixed
            self._relative = False
        else:
            self._relative = True
        if path != self._path:
            self._path = path
            self._base = None
            self._cache.reset(path)

    # ── Identity ──

    @property
    def path(self) -> str:
        return self._path

    @property
    def is_relative(self) -> bool:
        return self._relative

    def is_absolute(self) -> bool:
        return not self._relative

    def equal(self, ref: str | File) -> bool:
        """Check if ``ref`` stringifies to our path."""
        return self._path == str(ref)

    def __str__(self) -> str:
        return self._path

    def __fspath__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path!r})"

    # ── Cloning ──

    def clone(self) -> File:
        """Value copy with its own cache and its own rebound write context."""
        copy = type(self).__new__(type(self))
        copy.__dict__.update(self.__dict__)
        copy._cache = StatCache(self._path)
        copy._clone_write_context(self._writer)
        return copy

    __copy__ = clone

    def _clone_write_context(self, context: WriteContext | None) -> None:
        self._writer = context.clone().bind(self) if context is not None else None

    def clone_basename(self, name: str) -> File:
        """Sibling entity under the same directory with a different name."""
        file = self.clone()
        file._set_path(self.dirname().rstrip("/") + "/" + name)
        return file

    def clone_extension(self, ext: str) -> File:
        """Sibling entity with the final extension replaced."""
        return self.clone_basename(self.filename() + "." + ext.lstrip("."))

    # ── Write context ──

    def get_write_context(self) -> WriteContext:
        """Context for operations that *modify* the filesystem, created on first use."""
        if self._writer is None:
            from fsentry.writers.direct import DirectWriteContext

            self._writer = DirectWriteContext(file=self)
        return self._writer

    def set_write_context(self, context: WriteContext) -> File:
        self._writer = context.bind(self)
        return self

    # ── Path arithmetic ──

    def normalize(self, base: str = "") -> str:
        """Resolve redundant dots and slashes, prefixing ``base`` to a relative path.

        Repeated calls with the same base are no-ops.
        """
        base = str(base)
        fixed = to_absolute_form(base)
        if fixed:
            base = fixed
        if base != self._base:
            if self._path == "":
                self._set_path(base)
            else:
                if self._relative and base:
                    segments = explode_segments(base)
                else:
                    segments = []
                self._set_path(join_segments(explode_segments(self._path, segments)))
            self._base = base
        return self._path

    def relative_to(self, base: str | File) -> str:
        """Path relative to ``base``, unless our path is already relative."""
        path = self.normalize()
        if not to_absolute_form(path):
            return path
        return relative_path(path, File(str(base)).normalize())

    def get_parent(self) -> Directory | None:
        from fsentry.directory import Directory

        path = self.dirname()
        if path == "." or path == self._path:
            return None
        parent = Directory(path)
        parent._clone_write_context(self._writer)
        return parent

    # ── Decomposition ──

    def dirname(self) -> str:
        return self._cache.info.dirname

    def basename(self) -> str:
        return self._cache.info.basename

    def filename(self) -> str:
        return self._cache.info.filename

    def extension(self) -> str:
        """Final extension, e.g. "html" in "foo.php.html"."""
        return self._cache.info.extension

    def full_extension(self) -> str:
        """Extension after the first dot, e.g. "php.html" in "foo.php.html"."""
        return self._cache.info.full_extension

    # ── Reads ──

    def exists(self) -> bool:
        return path_exists(self._path)

    def readable(self) -> bool:
        return is_readable(self._path)

    def is_directory(self) -> bool:
        if self.readable():
            return os.path.isdir(self._path)
        return self.extension() == ""

    def real_path(self) -> str:
        if self.readable():
            return os.path.realpath(self._path)
        return ""

    def contents(self) -> bytes:
        with open(self._path, "rb") as f:
            return f.read()

    def modified(self) -> int | None:
        return file_mtime(self._path)

    def size(self) -> int | None:
        return file_size(self._path)

    def mode(self) -> int | None:
        return file_mode(self._path)

    def uid(self) -> int | None:
        return file_owner(self._path)

    def gid(self) -> int | None:
        return file_group(self._path)

    def md5(self) -> str:
        return file_md5(self._path)

    def clear_stat(self) -> File:
        self._cache.invalidate()
        return self

    # ── Permissions ──

    def writable(self) -> bool:
        return self.get_write_context().writable()

    def deletable(self) -> bool:
        return permissions.is_deletable(self)

    def locked(self) -> bool:
        return permissions.is_locked(self)

    def creatable(self) -> bool:
        return permissions.is_creatable(self)

    # ── Mutation ──

    def chmod(self, mode: int, recursive: bool = False) -> File:
        try:
            self.get_write_context().chmod(mode, recursive)
        finally:
            self.clear_stat()
        return self

    def copy(self, dest: str | File) -> File:
        """Copy this file for real and return the entity for the copy.

        Raises:
            WriteError: If the backend fails
        """
        copy = self.clone()
        copy._set_path(str(dest))
        copy.clear_stat()
        try:
            self.get_write_context().copy(copy)
        finally:
            copy.clear_stat()
        return copy

    def move(self, dest: str | File) -> File:
        """Move/rename this file for real. Returns self, which should no longer exist."""
        if not isinstance(dest, File):
            dest = File(dest)
        try:
            self.get_write_context().move(dest)
        finally:
            self.clear_stat()
            dest.clear_stat()
        return self

    def delete(self) -> File:
        recursive = self.is_directory()
        try:
            self.get_write_context().delete(recursive)
        finally:
            self.clear_stat()
        return self

    unlink = delete

    def put_contents(self, data: bytes | str) -> int:
        """Write ``data`` and return the resulting size in bytes."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        try:
            self.get_write_context().put_contents(data)
        finally:
            self.clear_stat()
        size = self.size()
        return size if size is not None else len(data)

    def create_parent(self) -> Directory | None:
        """Ensure the full parent directory tree exists."""
        parent = self.get_parent()
        if parent is not None and not parent.exists():
            parent.mkdir()
        return parent

    # ── Classification ──

    def update_type(self, locations: Locations) -> str:
        """Which part of the install this is: core, plugin, theme, translation or ""."""
        return locations.update_type(self)
