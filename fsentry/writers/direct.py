"""Direct write context.

Local filesystem syscalls, executed as the current process.
"""

from __future__ import annotations

import logging
import os
import shutil
from typing import TYPE_CHECKING

from fsentry.errors import WriteError
from fsentry.interfaces.writer import WriteContext

if TYPE_CHECKING:
    from fsentry.file import File

logger = logging.getLogger(__name__)


class DirectWriteContext(WriteContext):
    """Write context that operates directly on the local filesystem."""

    def is_direct(self) -> bool:
        return True

    def writable(self) -> bool:
        if self.disabled():
            return False
        try:
            return os.access(self.path, os.W_OK)
        except (OSError, ValueError) as e:
            logger.debug("Writability probe failed for %s: %s", self.path, e)
            return False

    def chmod(self, mode: int, recursive: bool = False) -> None:
        self.authorize()
        path = self.path
        try:
            os.chmod(path, mode)
            if recursive and os.path.isdir(path):
                for root, dirs, files in os.walk(path):
                    for name in dirs + files:
                        os.chmod(os.path.join(root, name), mode)
        except OSError as e:
            logger.warning("chmod %o failed for %s: %s", mode, path, e)
            raise WriteError(f"Failed to chmod {path}: {e.strerror or e}", path) from e

    def copy(self, dest: File) -> None:
        self.authorize()
        source, target = self.path, dest.path
        try:
            if os.path.isdir(source):
                shutil.copytree(source, target, dirs_exist_ok=True)
            else:
                shutil.copyfile(source, target)
        except OSError as e:
            logger.warning("copy failed %s -> %s: %s", source, target, e)
            raise WriteError(f"Failed to copy {source} to {target}: {e.strerror or e}", source) from e

    def move(self, dest: File) -> None:
        self.authorize()
        source, target = self.path, dest.path
        try:
            shutil.move(source, target)
        except OSError as e:
            logger.warning("move failed %s -> %s: %s", source, target, e)
            raise WriteError(f"Failed to move {source} to {target}: {e.strerror or e}", source) from e

    def delete(self, recursive: bool = False) -> None:
        self.authorize()
        path = self.path
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                if recursive:
                    shutil.rmtree(path)
                else:
                    os.rmdir(path)
            else:
                os.unlink(path)
        except OSError as e:
            logger.warning("delete failed for %s: %s", path, e)
            raise WriteError(f"Failed to delete {path}: {e.strerror or e}", path) from e

    def put_contents(self, data: bytes) -> None:
        self.authorize()
        self._check_put()
        path = self.path
        created = not os.path.exists(path)
        try:
            with open(path, "wb") as f:
                f.write(data)
            if created:
                os.chmod(path, self.config.file_mode)
        except OSError as e:
            logger.warning("write failed for %s: %s", path, e)
            raise WriteError(f"Failed to save {path}: {e.strerror or e}", path) from e

    def mkdir(self, mode: int | None = None) -> None:
        self.authorize()
        path = self.path
        mode = self.config.dir_mode if mode is None else mode
        try:
            os.makedirs(path, mode=mode, exist_ok=True)
            # makedirs applies the umask
            os.chmod(path, mode)
        except OSError as e:
            logger.warning("mkdir failed for %s: %s", path, e)
            raise WriteError(f"Failed to create directory {path}: {e.strerror or e}", path) from e
