"""Process identity lookups that degrade on platforms without POSIX ids."""

from __future__ import annotations

import os


def effective_uid() -> int | None:
    """Effective user id of this process, or ``None`` when unknowable."""
    geteuid = getattr(os, "geteuid", None)
    if geteuid is None:
        return None
    return geteuid()
