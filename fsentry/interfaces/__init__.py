"""Backend interfaces."""

from fsentry.interfaces.writer import WriteContext

__all__ = ["WriteContext"]
