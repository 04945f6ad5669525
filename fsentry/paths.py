"""Path classification, normalization and relative-path resolution.

Pure functions, no filesystem access. The canonical internal separator is
``/`` regardless of the input convention:

- ``/...``          unix root, kept as-is
- ``X:\\...``       drive letter, uppercased, backslashes rewritten
- ``\\\\server\\...`` UNC, backslashes rewritten (``//server/...``)
"""

from __future__ import annotations


def is_absolute(path: str) -> bool:
    """True for ``/...``, ``X:...`` and ``\\\\...`` paths. Empty is relative."""
    if not path:
        return False
    if path[0] == "/":
        return True
    if len(path) < 2:
        return False
    return path[1] == ":" or (path[0] == "\\" and path[1] == "\\")


def to_absolute_form(path: str) -> str:
    """Canonical absolute form of ``path``, or ``""`` when it is relative."""
    path = str(path)
    if not is_absolute(path):
        return ""
    if path[0] == "/":
        return path
    if path[1] == ":":
        return path[0].upper() + ":" + path[2:].replace("\\", "/")
    return path.replace("\\", "/")


def explode_segments(path: str, segments: list[str] | None = None) -> list[str]:
    """Split ``path`` on ``/`` onto ``segments``, resolving ``.`` and ``..``.

    An empty leading segment is the root marker and only survives at index 0.
    ``..`` never pops the root marker and never goes above the start.
    """
    stack = list(segments) if segments else []
    for i, segment in enumerate(path.split("/")):
        if segment == "":
            if i != 0:
                continue
        elif segment == ".":
            continue
        elif segment == "..":
            if stack and stack[-1] != "":
                stack.pop()
            continue
        stack.append(segment)
    return stack


def join_segments(segments: list[str]) -> str:
    if segments == [""]:
        return "/"
    return "/".join(segments)


def normalize_path(path: str, base: str = "") -> str:
    """Resolve redundant segments of ``path``, prefixing ``base`` when relative."""
    fixed = to_absolute_form(base)
    if fixed:
        base = fixed
    if path == "":
        return base
    fixed = to_absolute_form(path)
    if fixed:
        path = fixed
        segments: list[str] = []
    elif base:
        segments = explode_segments(base)
    else:
        segments = []
    return join_segments(explode_segments(path, segments))


def relative_path(path: str, base: str) -> str:
    """Shortest path from ``base`` to ``path``.

    Both arguments are normalized first. A relative ``path`` is returned
    unchanged, as is an absolute one sharing nothing but the root with ``base``.
    """
    path = normalize_path(path)
    if not to_absolute_form(path):
        return path
    base = normalize_path(base)
    if path == base:
        return ""
    prefix = base + "/"
    if path.startswith(prefix):
        return path[len(prefix):]
    source = base.split("/")
    target = path.split("/")
    common = 0
    while common < len(source) and common < len(target) and source[common] == target[common]:
        common += 1
    if common > 1:
        return "/".join([".."] * (len(source) - common) + target[common:])
    return path
