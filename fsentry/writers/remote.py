"""Remote write context.

Delegates all mutations to a TransferProvider.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from fsentry.config.schema import WriterConfig
from fsentry.errors import WriteError
from fsentry.interfaces.writer import WriteContext

if TYPE_CHECKING:
    from fsentry.file import File
    from fsentry.provider import TransferProvider

logger = logging.getLogger(__name__)


class RemoteWriteContext(WriteContext):
    """Write context that delegates to a TransferProvider.

    Args:
        provider: Connected provider, shared by every clone of this context
        config: Writer configuration
    """

    def __init__(
        self,
        provider: TransferProvider,
        config: WriterConfig | None = None,
        file: File | None = None,
    ) -> None:
        super().__init__(config=config, file=file)
        self.provider = provider

    def is_direct(self) -> bool:
        return False

    def writable(self) -> bool:
        if self.disabled():
            return False
        try:
            return self.provider.is_writable(self.path)
        except Exception as e:
            logger.debug("Remote writability probe failed for %s: %s", self.path, e)
            return False

    def _target_is_dir(self) -> bool:
        try:
            return self.provider.is_dir(self.path)
        except Exception as e:
            logger.debug("Remote directory probe failed for %s: %s", self.path, e)
            return False

    def _call(self, action: str, fn: Callable[..., bool], *args) -> None:
        path = self.path
        try:
            ok = fn(*args)
        except Exception as e:
            logger.warning("%s failed for %s: %s", action, path, e)
            raise WriteError(f"Failed to {action} {path}: {e}", path) from e
        if not ok:
            logger.warning("%s rejected by %s for %s", action, getattr(self.provider, "name", "remote"), path)
            raise WriteError(f"Failed to {action} {path}", path)

    def chmod(self, mode: int, recursive: bool = False) -> None:
        self.authorize()
        self._call("chmod", self.provider.chmod, self.path, mode, recursive)

    def copy(self, dest: File) -> None:
        self.authorize()
        self._call("copy", self.provider.copy, self.path, dest.path)

    def move(self, dest: File) -> None:
        self.authorize()
        self._call("move", self.provider.move, self.path, dest.path)

    def delete(self, recursive: bool = False) -> None:
        self.authorize()
        self._call("delete", self.provider.delete, self.path, recursive)

    def put_contents(self, data: bytes) -> None:
        self.authorize()
        self._check_put()
        self._call("save", self.provider.put_contents, self.path, data, self.config.file_mode)

    def mkdir(self, mode: int | None = None) -> None:
        self.authorize()
        mode = self.config.dir_mode if mode is None else mode
        missing: list[str] = []
        entry = self.file
        while entry is not None and not self.provider.exists(entry.path):
            missing.append(entry.path)
            entry = entry.get_parent()
        for path in reversed(missing):
            try:
                ok = self.provider.mkdir(path, mode)
            except Exception as e:
                logger.warning("mkdir failed for %s: %s", path, e)
                raise WriteError(f"Failed to create directory {path}: {e}", path) from e
            if not ok:
                raise WriteError(f"Failed to create directory {path}", path)
