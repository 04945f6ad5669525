"""Write context abstraction.

Separates how a file is modified (local syscalls vs remote transfer) from the
file entity that decides what to modify. Reads and stats never go through a
write context.
"""

from __future__ import annotations

import copy
import os
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from fsentry.config.schema import WriterConfig
from fsentry.errors import WriteError

if TYPE_CHECKING:
    from fsentry.file import File


class WriteContext(ABC):
    """Abstract backend for mutating one file entity.

    Implementations:
    - DirectWriteContext: direct local filesystem calls
    - RemoteWriteContext: delegates to a TransferProvider

    A context is owned by exactly one entity. ``clone()`` produces an unbound
    copy with its own configuration. Backend handles stay shared.
    """

    def __init__(self, config: WriterConfig | None = None, file: File | None = None):
        self.config = config or WriterConfig()
        self._file = file

    # ── Binding ──

    def bind(self, file: File) -> WriteContext:
        self._file = file
        return self

    def clone(self) -> WriteContext:
        context = copy.copy(self)
        context.config = self.config.model_copy(deep=True)
        context._file = None
        return context

    @property
    def file(self) -> File:
        if self._file is None:
            raise RuntimeError("Write context is not bound to a file")
        return self._file

    @property
    def path(self) -> str:
        return self.file.path

    # ── Shared policy ──

    def disabled(self) -> bool:
        return self.config.disabled

    def authorize(self) -> None:
        """Raise unless file modifications are allowed."""
        if self.disabled():
            raise WriteError("File modifications are disallowed", self.path)

    def _check_put(self) -> None:
        file = self.file
        if self._target_is_dir():
            raise WriteError(f"Directory path cannot be written as a file: {file.path}", file.path)
        if file.exists():
            if not self.writable():
                raise WriteError(f"File is not writable: {file.path}", file.path)
            return
        parent = file.get_parent()
        if parent is None or not parent.exists():
            raise WriteError(f"Parent directory doesn't exist: {file.dirname()}", file.path)

    def _target_is_dir(self) -> bool:
        return os.path.isdir(self.path)

    # ── Backend ──

    @abstractmethod
    def is_direct(self) -> bool:
        """True iff mutations are real local syscalls."""
        ...

    @abstractmethod
    def writable(self) -> bool:
        """Backend-specific writability probe. Never raises."""
        ...

    @abstractmethod
    def chmod(self, mode: int, recursive: bool = False) -> None:
        """Set permission bits.

        Raises:
            WriteError: If the backend rejects the change
        """
        ...

    @abstractmethod
    def copy(self, dest: File) -> None:
        """Copy the bound file to ``dest``'s path."""
        ...

    @abstractmethod
    def move(self, dest: File) -> None:
        """Move/rename the bound file to ``dest``'s path."""
        ...

    @abstractmethod
    def delete(self, recursive: bool = False) -> None:
        """Remove the bound file, or directory tree when ``recursive``."""
        ...

    @abstractmethod
    def put_contents(self, data: bytes) -> None:
        """Write ``data`` to the bound file, creating it if needed."""
        ...

    @abstractmethod
    def mkdir(self, mode: int | None = None) -> None:
        """Create the bound directory and any missing ancestors."""
        ...
