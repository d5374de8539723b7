"""XDG Base Directory specification helpers."""

import os
from pathlib import Path


def get_xdg_data_dir() -> Path:
    """Get XDG data directory for fastpaste.

    Returns:
        Path to data directory: $XDG_DATA_HOME/fastpaste or ~/.local/share/fastpaste
    """
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data) / "fastpaste"
    return Path.home() / ".local" / "share" / "fastpaste"


def get_xdg_config_dir() -> Path:
    """Get XDG config directory for fastpaste.

    Returns:
        Path to config directory: $XDG_CONFIG_HOME/fastpaste or ~/.config/fastpaste
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "fastpaste"
    return Path.home() / ".config" / "fastpaste"


def get_clipboard_dir() -> Path:
    """Get the directory holding the remembered-path store."""
    return get_xdg_data_dir() / "clipboard"
