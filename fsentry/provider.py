"""
Abstract transfer provider interface.

Remote write backends (FTP, SSH, ...) implement this interface. Paths are the
local canonical paths; mapping them onto the remote side is the provider's job.
"""

from abc import ABC, abstractmethod


class TransferProvider(ABC):
    """
    Abstract interface for remote transfer providers.

    Mutators return ``True`` on success and ``False`` when the remote side
    rejected the operation. They may also raise on transport failure.
    """

    name: str  # Provider identifier: 'ftp', 'ssh', ...

    # ==================== Probes ====================

    @abstractmethod
    def is_writable(self, path: str) -> bool:
        """Check if the remote credentials can modify path."""
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check if path exists remotely."""
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Check if path is a remote directory."""
        pass

    # ==================== Mutation ====================

    @abstractmethod
    def chmod(self, path: str, mode: int, recursive: bool = False) -> bool:
        """Set permission bits."""
        pass

    @abstractmethod
    def copy(self, source: str, target: str) -> bool:
        """Copy source to target, overwriting target."""
        pass

    @abstractmethod
    def move(self, source: str, target: str) -> bool:
        """Move source to target, overwriting target."""
        pass

    @abstractmethod
    def delete(self, path: str, recursive: bool = False) -> bool:
        """Delete a file, or a directory tree when recursive."""
        pass

    @abstractmethod
    def put_contents(self, path: str, data: bytes, mode: int) -> bool:
        """Write file content and apply mode."""
        pass

    @abstractmethod
    def mkdir(self, path: str, mode: int) -> bool:
        """Create a single directory."""
        pass
