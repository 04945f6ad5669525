"""Location registry.

Classifies paths against configured root directories. A ``Locations``
service is built from settings and passed explicitly to whatever needs it.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from fsentry.paths import normalize_path, to_absolute_form

if TYPE_CHECKING:
    from fsentry.config.schema import LocationsConfig
    from fsentry.file import File

TRANSLATION_ROOTS = (".", "themes", "plugins")


class LocationRegistry:
    """A set of root directories."""

    def __init__(self, roots: Iterable[str] = ()):
        self.roots: list[str] = []
        for root in roots:
            self.add(root)

    def add(self, root: str) -> LocationRegistry:
        root = normalize_path(str(root))
        if not to_absolute_form(root):
            raise ValueError(f"Location root must be absolute: {root!r}")
        if root not in self.roots:
            self.roots.append(root)
        return self

    def __len__(self) -> int:
        return len(self.roots)

    def rel(self, path: str | File) -> str | None:
        """Path relative to the first root containing it, "." for a root itself."""
        path = normalize_path(str(path))
        for root in self.roots:
            if path == root:
                return "."
            prefix = root.rstrip("/") + "/"
            if path.startswith(prefix):
                return path[len(prefix):]
        return None

    def check(self, path: str | File) -> bool:
        """Check if path is a root or below one."""
        return self.rel(path) is not None


class Locations:
    """Registries for each configured part of an install."""

    def __init__(
        self,
        root: LocationRegistry | None = None,
        content: LocationRegistry | None = None,
        languages: LocationRegistry | None = None,
        themes: LocationRegistry | None = None,
        plugins: LocationRegistry | None = None,
    ):
        self.root = root or LocationRegistry()
        self.content = content or LocationRegistry()
        self.languages = languages or LocationRegistry()
        self.themes = themes or LocationRegistry()
        self.plugins = plugins or LocationRegistry()

    @classmethod
    def from_config(cls, config: LocationsConfig) -> Locations:
        def registry(*paths: str | None) -> LocationRegistry:
            return LocationRegistry(p for p in paths if p)

        return cls(
            root=registry(config.root),
            content=registry(config.content),
            languages=registry(config.languages),
            themes=registry(*config.themes),
            plugins=registry(*config.plugins),
        )

    def update_type(self, file: File) -> str:
        """Establish what part of the install ``file`` belongs to.

        Returns "translation" for the global languages directory and its
        canonical subdirectories, "theme" or "plugin" for entries under those
        roots at any depth, "core" for entries under the install root but not
        under the content directory, else "".
        """
        if file.is_directory():
            dirpath = file.path
        else:
            parent = file.get_parent()
            dirpath = parent.path if parent is not None else ""
        sub = self.languages.rel(dirpath)
        if sub:
            top = sub.split("/", 1)[0]
            if top in TRANSLATION_ROOTS:
                return "translation"
        elif self.themes.check(file):
            return "theme"
        elif self.plugins.check(file):
            return "plugin"
        elif self.root.check(file) and not self.content.check(file):
            return "core"
        return ""
