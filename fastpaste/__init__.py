"""fastpaste - deferred, concurrent copy and paste of files and directory trees."""

from importlib.metadata import distribution

from .core.file_operations import CopyResult, TreeCopyService, create_copy_service


__version__ = distribution(__package__ or "fastpaste").version

__all__ = [
    "CopyResult",
    "TreeCopyService",
    "create_copy_service",
    "__version__",
]
