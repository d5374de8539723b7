"""Shell context-menu integration."""

from .handlers import install_handlers, uninstall_handlers
from .registry import RegistryAdapterProtocol, WinRegAdapter, split_key_path


__all__ = [
    "install_handlers",
    "RegistryAdapterProtocol",
    "split_key_path",
    "uninstall_handlers",
    "WinRegAdapter",
]
