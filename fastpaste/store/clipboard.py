"""DiskCache-backed store remembering the copied path between invocations."""

import logging
from pathlib import Path
from typing import Any

import diskcache  # type: ignore[import-untyped]

from fastpaste.core.errors import StoreError
from fastpaste.utils.paths import strip_quotes
from fastpaste.utils.xdg import get_clipboard_dir


logger = logging.getLogger(__name__)

PATH_KEY = "path"

# Value written by earlier releases to mean "nothing remembered"
LEGACY_EMPTY_VALUE = "nil"


class ClipboardStore:
    """Persistent single-slot clipboard for a source path.

    DiskCache provides SQLite-backed storage that is safe to open from the
    separate "copy" and "paste" processes.
    """

    def __init__(self, store_path: Path | None = None, timeout: float = 5.0) -> None:
        """Initialize the clipboard store.

        Args:
            store_path: Directory of the store (default: XDG data dir)
            timeout: SQLite lock timeout in seconds
        """
        self.store_path = Path(store_path) if store_path else get_clipboard_dir()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        try:
            self.store_path.mkdir(parents=True, exist_ok=True)
            self._cache = diskcache.Cache(directory=str(self.store_path), timeout=timeout)
        except (OSError, diskcache.Timeout) as e:
            raise StoreError(
                f"Cannot open clipboard store at {self.store_path}: {e}"
            ) from e

        self.logger.debug("Clipboard store opened at %s", self.store_path)

    def remember(self, path: str | Path) -> str:
        """Store ``path`` as the copied path, replacing any previous one.

        Returns:
            The path as stored, with surrounding quotes removed
        """
        value = strip_quotes(str(path))
        if not value:
            raise StoreError("Cannot remember an empty path")
        try:
            self._cache.set(PATH_KEY, value)
        except Exception as e:
            raise StoreError(f"Cannot write clipboard store: {e}") from e

        self.logger.debug("Remembered path: %s", value)
        return value

    def recall(self) -> str | None:
        """Return the remembered path, or None when nothing is remembered."""
        try:
            value = self._cache.get(PATH_KEY, default=None)
        except Exception as e:
            raise StoreError(f"Cannot read clipboard store: {e}") from e

        if value is None:
            return None
        value = strip_quotes(str(value))
        if not value or value == LEGACY_EMPTY_VALUE:
            return None
        return value

    def forget(self) -> bool:
        """Remove the remembered path.

        Returns:
            True if a path was remembered
        """
        try:
            existed: bool = self._cache.delete(PATH_KEY)
        except Exception as e:
            raise StoreError(f"Cannot write clipboard store: {e}") from e
        self.logger.debug("Forgot remembered path (existed: %s)", existed)
        return existed

    def close(self) -> None:
        """Close the store and release resources."""
        try:
            self._cache.close()
        except Exception as e:
            self.logger.warning("Error closing clipboard store: %s", e)

    def __enter__(self) -> "ClipboardStore":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


def create_clipboard_store(user_config: Any | None = None) -> ClipboardStore:
    """Factory function to create the clipboard store from user configuration."""
    store_path = None
    if user_config is not None:
        store_path = user_config._config.store_path
    return ClipboardStore(store_path=store_path)
