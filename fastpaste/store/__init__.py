"""Persistent storage of the copied path."""

from .clipboard import ClipboardStore, create_clipboard_store


__all__ = ["ClipboardStore", "create_clipboard_store"]
