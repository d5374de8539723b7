"""Depth-first walk of a source tree producing copy jobs."""

import logging
import os
import stat
from collections.abc import Iterator

from fastpaste.core.errors import CopyError
from fastpaste.utils.paths import exists, is_directory, is_within, make_absolute

from .models import CopyJob
from .remap import remap_into_directory, remap_path
from .strategies import is_same_file


class TreeWalker:
    """Walk a source path, creating destination directories as they are met.

    Files are never copied here: each one becomes a ``CopyJob`` yielded to the
    caller. Directories are created synchronously, before the walk descends
    into them, so every directory exists before any job inside it is yielded.

    A created directory gets the source directory's permission bits. Bits that
    would stop us writing into it are held back until ``restore_modes`` runs
    once all jobs have finished.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(__name__)
        self.directories_created = 0
        self._deferred_modes: list[tuple[str, int]] = []

    def walk(self, to: str, from_: str) -> Iterator[CopyJob]:
        """Yield the copy jobs needed to copy ``from_`` to ``to``.

        Raises:
            CopyError: If a directory cannot be listed or created
        """
        # Relative roots have no parent to strip when remapping the root
        to, from_ = make_absolute(to), make_absolute(from_)
        if not exists(from_) or is_same_file(to, from_):
            return

        if not is_directory(from_):
            if self._is_copyable_file(from_):
                yield CopyJob(to=remap_path(to, from_, from_), from_=from_)
            return

        root_to = remap_path(to, from_, from_)
        self._check_not_nested(root_to, from_)
        self._ensure_directory(root_to, from_)
        yield from self._walk_directory(root_to, from_, from_)

    def restore_modes(self) -> None:
        """Apply permission bits held back while the tree was being filled."""
        # Deepest first, so a read-only parent never blocks its children
        for path, mode in reversed(self._deferred_modes):
            try:
                os.chmod(path, mode)
            except OSError as e:
                raise CopyError(
                    f"Cannot set permissions on {path}: {e}", path=path
                ) from e
        self._deferred_modes.clear()

    def _walk_directory(
        self, root_to: str, from_root: str, directory: str
    ) -> Iterator[CopyJob]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            raise CopyError(
                f"Cannot list directory {directory}: {e}", path=directory
            ) from e

        for entry in entries:
            destination = remap_into_directory(root_to, from_root, entry.path)
            try:
                if entry.is_symlink() and entry.is_dir():
                    self.logger.warning(
                        "Skipping symbolic link to directory: %s", entry.path
                    )
                    continue
                entry_is_dir = entry.is_dir(follow_symlinks=False)
                entry_is_file = entry.is_file()
            except OSError as e:
                raise CopyError(f"Cannot stat {entry.path}: {e}", path=entry.path) from e

            if entry_is_dir:
                self._ensure_directory(destination, entry.path)
                yield from self._walk_directory(root_to, from_root, entry.path)
            elif entry_is_file:
                yield CopyJob(to=destination, from_=entry.path)
            else:
                self._skip_non_regular(entry.path)

    def _is_copyable_file(self, path: str) -> bool:
        if os.path.isfile(path):
            return True
        self._skip_non_regular(path)
        return False

    def _skip_non_regular(self, path: str) -> None:
        # FIFOs and devices would block or never end when read
        if os.path.islink(path):
            self.logger.warning("Skipping broken symbolic link: %s", path)
        else:
            self.logger.warning("Skipping special file: %s", path)

    def _ensure_directory(self, destination: str, source: str) -> None:
        if exists(destination):
            if not is_directory(destination):
                raise CopyError(
                    f"Destination exists and is not a directory: {destination}",
                    path=destination,
                )
            return

        try:
            mode = stat.S_IMODE(os.stat(source).st_mode)
            writable_mode = mode | stat.S_IRWXU
            os.mkdir(destination, writable_mode)
            # mkdir applies the umask; set the bits explicitly
            os.chmod(destination, writable_mode)
        except OSError as e:
            raise CopyError(
                f"Cannot create directory {destination}: {e}", path=destination
            ) from e

        if writable_mode != mode:
            self._deferred_modes.append((destination, mode))
        self.directories_created += 1
        self.logger.debug("Created directory %s (mode %o)", destination, mode)

    def _check_not_nested(self, root_to: str, from_: str) -> None:
        real_root_to = os.path.realpath(root_to)
        real_from = os.path.realpath(from_)
        if real_root_to != real_from and is_within(real_root_to, real_from):
            raise CopyError(
                f"Cannot copy {from_} into its own subtree {root_to}",
                path=root_to,
            )
