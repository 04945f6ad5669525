"""Settings loader.

Configuration priority (highest to lowest):
1. Explicit overrides
2. Project settings (.fsentry/settings.yaml in workspace)
3. User settings (~/.fsentry/settings.yaml)
4. Packaged defaults (fsentry/config/defaults/settings.yaml)

Each tier may be YAML (.yaml/.yml) or JSON (.json); the first file found per
tier wins.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from fsentry.config.schema import FsSettings

logger = logging.getLogger(__name__)

SETTINGS_NAMES = ("settings.yaml", "settings.yml", "settings.json")
WRITER_ENV = "FSENTRY_WRITER"


class SettingsLoader:
    """Tiered loader for FsSettings."""

    def __init__(self, workspace_root: str | Path | None = None):
        self.workspace_root = Path(workspace_root).resolve() if workspace_root else None
        self._system_defaults_dir = Path(__file__).parent / "defaults"

    def load(self, overrides: dict[str, Any] | None = None) -> FsSettings:
        """Load settings with tiered merge."""
        merged = self._deep_merge(
            self._load_system_defaults(),
            self._load_user_settings(),
            self._load_project_settings(),
        )
        if overrides:
            merged = self._deep_merge(merged, overrides)

        merged = self._expand_env_vars(merged)
        merged = self._remove_none_values(merged)
        return FsSettings(**merged)

    def load_file(self, path: str | Path) -> FsSettings:
        """Load settings from one explicit file, on top of packaged defaults."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")
        merged = self._deep_merge(self._load_system_defaults(), self._read(path))
        return FsSettings(**self._remove_none_values(self._expand_env_vars(merged)))

    # ── Tiers ──

    def _load_system_defaults(self) -> dict[str, Any]:
        return self._load_dir(self._system_defaults_dir)

    def _load_user_settings(self) -> dict[str, Any]:
        return self._load_dir(Path.home() / ".fsentry")

    def _load_project_settings(self) -> dict[str, Any]:
        if not self.workspace_root:
            return {}
        return self._load_dir(self.workspace_root / ".fsentry")

    def _load_dir(self, dir_path: Path) -> dict[str, Any]:
        for name in SETTINGS_NAMES:
            path = dir_path / name
            if path.exists():
                return self._read(path)
        return {}

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        try:
            text = path.read_text(encoding="utf-8")
            if path.suffix == ".json":
                data = json.loads(text)
            else:
                data = yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ValueError(f"Invalid settings file {path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must contain a mapping")
        logger.debug("Loaded settings from %s", path)
        return data

    # ── Merge helpers ──

    def _deep_merge(self, *dicts: dict[str, Any]) -> dict[str, Any]:
        """Deep merge multiple dictionaries. Later dicts override earlier ones."""
        result: dict[str, Any] = {}
        for d in dicts:
            for key, value in d.items():
                if key not in result:
                    result[key] = value
                elif value is None:
                    continue
                elif isinstance(value, dict) and isinstance(result[key], dict):
                    result[key] = self._deep_merge(result[key], value)
                else:
                    result[key] = value
        return result

    def _expand_env_vars(self, obj: Any) -> Any:
        """Recursively expand ${VAR} and ~ in string values."""
        if isinstance(obj, dict):
            return {k: self._expand_env_vars(v) for k, v in obj.items()}
        if isinstance(obj, list):
            return [self._expand_env_vars(v) for v in obj]
        if isinstance(obj, str):
            return os.path.expandvars(os.path.expanduser(obj))
        return obj

    def _remove_none_values(self, obj: Any) -> Any:
        """Recursively remove None values to allow Pydantic defaults."""
        if isinstance(obj, dict):
            return {k: self._remove_none_values(v) for k, v in obj.items() if v is not None}
        if isinstance(obj, list):
            return [self._remove_none_values(v) for v in obj if v is not None]
        return obj


def resolve_writer_mode(cli_arg: str | None) -> str:
    if cli_arg:
        return cli_arg
    return os.getenv(WRITER_ENV, "direct")


def load_settings(
    workspace_root: str | None = None,
    overrides: dict[str, Any] | None = None,
    writer_mode: str | None = None,
) -> FsSettings:
    """Convenience function to load settings."""
    loader = SettingsLoader(workspace_root=workspace_root)
    if writer_mode or os.getenv(WRITER_ENV):
        mode = resolve_writer_mode(writer_mode)
        overrides = loader._deep_merge(overrides or {}, {"writer": {"mode": mode}})
    return loader.load(overrides=overrides)
