"""Directory entity."""

from __future__ import annotations

from fsentry.file import File


class Directory(File):
    """A ``File`` known to be a directory.

    Parents returned by ``File.get_parent()`` are always directories, so the
    permission walks and ``create_parent()`` go through this type.
    """

    def is_directory(self) -> bool:
        return True

    def mkdir(self, mode: int | None = None) -> Directory:
        """Create this directory and any missing ancestors.

        Raises:
            WriteError: If the backend fails
        """
        try:
            self.get_write_context().mkdir(mode)
        finally:
            self.clear_stat()
        return self
