"""Pre-flight permission predicates.

Each predicate answers whether a mutation *would* succeed, without trying it.
They never raise; an entry that cannot be inspected counts as not permitted.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from fsentry.posix import effective_uid

if TYPE_CHECKING:
    from fsentry.directory import Directory
    from fsentry.file import File

STICKY_BIT = 0o1000


def iter_parents(file: File) -> Iterator[Directory]:
    """Yield ancestors from the immediate parent up to the root."""
    parent = file.get_parent()
    while parent is not None:
        yield parent
        parent = parent.get_parent()


def is_deletable(file: File) -> bool:
    """Check if ``file`` is removable by its write context."""
    parent = file.get_parent()
    if parent is None or not parent.writable():
        return False
    mode = parent.mode()
    if mode is not None and mode & STICKY_BIT:
        # sticky directory: only the file's owner or the directory's owner may delete
        uid = effective_uid()
        if file.get_write_context().is_direct() and uid:
            return uid == file.uid() or uid == parent.uid()
        # TODO compare remote login with file ownership when the provider can report it
    return True


def is_locked(file: File) -> bool:
    """Check if ``file`` can neither be overwritten nor created.

    Ancestors above the parent are not considered, since directory trees are
    not built implicitly on write.
    """
    if file.exists():
        return not file.writable()
    parent = file.get_parent()
    if parent is None:
        return True
    return not parent.writable()


def is_creatable(file: File) -> bool:
    """Check if the full path to a non-existent ``file`` can be built."""
    for parent in iter_parents(file):
        if parent.exists():
            return parent.writable()
    return False
