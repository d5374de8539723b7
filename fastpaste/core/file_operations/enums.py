"""Enums for file operations."""

from enum import Enum


class CopyStrategy(Enum):
    """Available single-file copy strategies."""

    BUFFERED = "buffered"
    SENDFILE = "sendfile"
