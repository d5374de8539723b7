"""Windows registry access for context-menu registration."""

import logging
from typing import Protocol, runtime_checkable

from fastpaste.core.errors import ShellIntegrationError


try:
    import winreg

    WINREG_AVAILABLE = True
except ImportError:
    WINREG_AVAILABLE = False


logger = logging.getLogger(__name__)

HIVE_NAMES = (
    "HKEY_CLASSES_ROOT",
    "HKEY_CURRENT_USER",
    "HKEY_LOCAL_MACHINE",
    "HKEY_USERS",
    "HKEY_CURRENT_CONFIG",
)


def split_key_path(path: str) -> tuple[str, str]:
    """Split ``HKEY_...\\sub\\key`` into the hive name and the subkey.

    Raises:
        ShellIntegrationError: If the path does not start with a known hive
    """
    for hive in HIVE_NAMES:
        if path == hive:
            return hive, ""
        if path.startswith(hive + "\\"):
            return hive, path[len(hive) + 1 :]
    raise ShellIntegrationError(f"Unknown registry hive in key path: {path}")


@runtime_checkable
class RegistryAdapterProtocol(Protocol):
    """Protocol for writing and removing registry keys."""

    def set_value(self, key_path: str, name: str, value: str) -> None:
        """Set a string value, creating the key if needed.

        Args:
            key_path: Full key path starting with the hive name
            name: Value name, "" for the key's default value
            value: String data
        """
        ...

    def delete_tree(self, key_path: str) -> bool:
        """Delete a key and all its subkeys.

        Returns:
            False if the key did not exist
        """
        ...


class WinRegAdapter:
    """Registry adapter backed by the ``winreg`` module (Windows only)."""

    def __init__(self) -> None:
        if not WINREG_AVAILABLE:
            raise ShellIntegrationError(
                "Shell integration requires the Windows registry (winreg not available)"
            )

    def _hive(self, name: str) -> int:
        return int(getattr(winreg, name))

    def set_value(self, key_path: str, name: str, value: str) -> None:
        hive, subkey = split_key_path(key_path)
        try:
            with winreg.CreateKeyEx(
                self._hive(hive), subkey, 0, winreg.KEY_SET_VALUE
            ) as key:
                winreg.SetValueEx(key, name, 0, winreg.REG_SZ, value)
        except OSError as e:
            raise ShellIntegrationError(f"Cannot write {key_path}: {e}") from e
        logger.debug("Set %s [%s] = %s", key_path, name or "(default)", value)

    def delete_tree(self, key_path: str) -> bool:
        hive, subkey = split_key_path(key_path)
        try:
            self._delete_subtree(self._hive(hive), subkey)
        except FileNotFoundError:
            return False
        except OSError as e:
            raise ShellIntegrationError(f"Cannot delete {key_path}: {e}") from e
        logger.debug("Deleted %s", key_path)
        return True

    def _delete_subtree(self, hive: int, subkey: str) -> None:
        with winreg.OpenKey(hive, subkey, 0, winreg.KEY_ALL_ACCESS) as key:
            while True:
                try:
                    child = winreg.EnumKey(key, 0)
                except OSError:
                    break
                self._delete_subtree(hive, f"{subkey}\\{child}")
        winreg.DeleteKey(hive, subkey)
