from .errors import (
    ConfigError,
    CopyError,
    FastPasteError,
    ShellIntegrationError,
    StoreError,
)
from .logging import get_logger, setup_logging


__all__ = [
    "setup_logging",
    "get_logger",
    "FastPasteError",
    "CopyError",
    "StoreError",
    "ConfigError",
    "ShellIntegrationError",
]
