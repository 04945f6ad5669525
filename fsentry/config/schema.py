"""Settings schema for fsentry using Pydantic.

Two groups:
- Writer: how mutations are performed (direct syscalls vs remote transfer)
- Locations: configured root directories used for update-type classification
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from fsentry.paths import normalize_path, to_absolute_form

DEFAULT_FILE_MODE = 0o644
DEFAULT_DIR_MODE = 0o755


def _parse_mode(value: Any) -> Any:
    """Accept 0o644 / "0644" / "0o644" / "644" for permission bits."""
    if isinstance(value, str):
        text = value.strip().lower()
        if text.startswith("0o"):
            text = text[2:]
        try:
            return int(text, 8)
        except ValueError:
            raise ValueError(f"Invalid octal mode: {value!r}") from None
    return value


# ============================================================================
# Writer Configuration
# ============================================================================


class RemoteConfig(BaseModel):
    """Credentials for a remote transfer backend."""

    host: str | None = Field(None, description="Remote host name")
    port: int | None = Field(None, gt=0, lt=65536, description="Remote port")
    username: str | None = Field(None, description="Login name")
    password: str | None = Field(None, description="Login password (falls back to env vars)")
    base_path: str = Field("/", description="Remote directory mapped to the local root")


class WriterConfig(BaseModel):
    """How file modifications are carried out."""

    mode: Literal["direct", "remote"] = Field("direct", description="direct syscalls or remote transfer")
    disabled: bool = Field(False, description="Disallow all file modifications")
    file_mode: int = Field(DEFAULT_FILE_MODE, ge=0, le=0o7777, description="Mode for new files")
    dir_mode: int = Field(DEFAULT_DIR_MODE, ge=0, le=0o7777, description="Mode for new directories")
    remote: RemoteConfig = Field(default_factory=RemoteConfig)

    @field_validator("file_mode", "dir_mode", mode="before")
    @classmethod
    def parse_octal(cls, v: Any) -> Any:
        return _parse_mode(v)


# ============================================================================
# Locations Configuration
# ============================================================================


def _absolute(value: str) -> str:
    fixed = to_absolute_form(value)
    if not fixed:
        raise ValueError(f"Location must be an absolute path: {value!r}")
    return normalize_path(fixed)


class LocationsConfig(BaseModel):
    """Root directories used to classify an entry's place in an install."""

    root: str | None = Field(None, description="Install root")
    content: str | None = Field(None, description="Content directory under the install root")
    languages: str | None = Field(None, description="Global languages directory")
    themes: list[str] = Field(default_factory=list, description="Theme roots")
    plugins: list[str] = Field(default_factory=list, description="Plugin roots")

    @field_validator("root", "content", "languages")
    @classmethod
    def absolute_path(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return _absolute(v)

    @field_validator("themes", "plugins")
    @classmethod
    def absolute_paths(cls, v: list[str]) -> list[str]:
        return [_absolute(p) for p in v]


# ============================================================================
# Main Settings
# ============================================================================


class FsSettings(BaseModel):
    """Complete fsentry settings."""

    writer: WriterConfig = Field(default_factory=WriterConfig)
    locations: LocationsConfig = Field(default_factory=LocationsConfig)
