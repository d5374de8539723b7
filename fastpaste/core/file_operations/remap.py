"""Mapping of walked source paths onto the destination tree."""

import os

from fastpaste.utils.paths import (
    SEPARATORS,
    is_directory,
    is_within,
    trim_trailing_separators,
)


def remap_path(to: str, from_: str, path: str) -> str:
    """Return the destination of ``path`` when copying ``from_`` to ``to``.

    When ``to`` is not an existing directory it is an explicit target name and
    is returned unchanged. Otherwise ``path`` keeps its position relative to
    ``from_`` under ``to``; remapping the root itself keeps the root's
    basename, so ``/a/b`` copied into ``/c`` lands at ``/c/b``.

    Args:
        to: Destination argument
        from_: Source root of the walk
        path: Path found during the walk, ``from_`` included

    Returns:
        Destination path for ``path``

    Raises:
        ValueError: If ``from_`` is empty or ``path`` lies outside ``from_``
    """
    if not from_:
        raise ValueError("Source root must not be empty")

    if not is_directory(to):
        return to

    return remap_into_directory(to, from_, path)


def remap_into_directory(to: str, from_: str, path: str) -> str:
    """Like ``remap_path`` for a ``to`` already known to be a directory.

    Raises:
        ValueError: If ``from_`` is empty or ``path`` lies outside ``from_``
    """
    if not from_:
        raise ValueError("Source root must not be empty")

    root = trim_trailing_separators(from_)
    if trim_trailing_separators(path) == root:
        path = root
        base = os.path.dirname(root)
    else:
        base = root

    if not is_within(path, base):
        raise ValueError(f"Path {path!r} is not inside {base!r}")

    suffix = path[len(base) :].lstrip("".join(SEPARATORS))

    if to.endswith(SEPARATORS):
        return to + suffix
    return to + os.sep + suffix
