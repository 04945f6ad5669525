"""Write context implementations.

Selection: WriterConfig.mode ("direct" | "remote"). Remote contexts need a
connected TransferProvider.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fsentry.config.schema import WriterConfig
from fsentry.interfaces.writer import WriteContext
from fsentry.writers.direct import DirectWriteContext
from fsentry.writers.remote import RemoteWriteContext

if TYPE_CHECKING:
    from fsentry.provider import TransferProvider


def create_write_context(
    config: WriterConfig | None = None,
    provider: TransferProvider | None = None,
) -> WriteContext:
    """Build an unbound write context for the configured mode."""
    config = config or WriterConfig()
    if config.mode == "remote":
        if provider is None:
            raise ValueError("Remote write mode requires a transfer provider")
        return RemoteWriteContext(provider, config=config)
    return DirectWriteContext(config=config)


__all__ = ["DirectWriteContext", "RemoteWriteContext", "create_write_context"]
