"""Exception hierarchy for fastpaste."""

from pathlib import Path
from typing import Any


class FastPasteError(Exception):
    """Base exception for all fastpaste errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class CopyError(FastPasteError):
    """A tree or file copy could not be completed."""

    def __init__(
        self,
        message: str,
        path: str | Path | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context)
        self.path = str(path) if path is not None else None


class StoreError(FastPasteError):
    """The remembered-path store could not be read or written."""


class ConfigError(FastPasteError):
    """Invalid or unreadable user configuration."""


class ShellIntegrationError(FastPasteError):
    """Context-menu handlers could not be installed or removed."""
