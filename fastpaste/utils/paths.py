"""Path argument helpers and filesystem probes."""

import os
from pathlib import Path


QUOTE_CHARS = ('"', "'")

# Separators recognised on this platform ("/" everywhere, plus "\\" on Windows)
SEPARATORS: tuple[str, ...] = tuple(s for s in (os.sep, os.altsep) if s)


def strip_quotes(value: str) -> str:
    """Strip surrounding whitespace and one layer of matching quotes.

    Shell handlers pass paths as ``"%1"`` so they may arrive quoted.
    """
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTE_CHARS:
        return value[1:-1]
    return value


def exists(path: str | Path) -> bool:
    return os.path.lexists(path)


def is_directory(path: str | Path) -> bool:
    """Check whether ``path`` is an existing directory.

    A missing path is not a directory; any other stat failure propagates.
    """
    try:
        return Path(path).is_dir()
    except FileNotFoundError:
        return False


def trim_trailing_separators(path: str) -> str:
    """Remove trailing separators, keeping a bare root intact."""
    trimmed = path.rstrip("".join(SEPARATORS))
    if not trimmed:
        return path[:1]
    # Drive roots such as "C:" need their separator back
    if trimmed.endswith(":") and len(trimmed) == 2:
        return trimmed + os.sep
    return trimmed


def is_within(path: str, base: str) -> bool:
    """Whether ``path`` equals ``base`` or lies underneath it, textually."""
    if path == base:
        return True
    if base.endswith(SEPARATORS):
        return path.startswith(base)
    return any(path.startswith(base + sep) for sep in SEPARATORS)


def make_absolute(path: str) -> str:
    """Absolute form of ``path``, keeping a trailing separator."""
    absolute = os.path.abspath(path)
    if path.endswith(SEPARATORS) and not absolute.endswith(SEPARATORS):
        absolute += os.sep
    return absolute
