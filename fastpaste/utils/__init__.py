"""Utility helpers for fastpaste."""

from .paths import exists, is_directory, make_absolute, strip_quotes
from .xdg import get_xdg_config_dir, get_xdg_data_dir


__all__ = [
    "exists",
    "get_xdg_config_dir",
    "get_xdg_data_dir",
    "is_directory",
    "make_absolute",
    "strip_quotes",
]
