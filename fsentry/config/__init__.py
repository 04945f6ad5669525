"""Configuration management for fsentry."""

from .schema import FsSettings, LocationsConfig, RemoteConfig, WriterConfig

__all__ = ["FsSettings", "LocationsConfig", "RemoteConfig", "WriterConfig"]
