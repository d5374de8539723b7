"""Concurrent tree copy engine."""

from .dispatcher import CopyDispatcher, DispatchSummary
from .enums import CopyStrategy
from .job_counter import JobCounter, default_max_jobs
from .models import CopyJob, CopyResult, JobOutcome
from .protocols import CopyStrategyProtocol
from .remap import remap_path
from .service import TreeCopyService, create_copy_service
from .strategies import BufferedCopyStrategy, SendfileCopyStrategy
from .walker import TreeWalker


__all__ = [
    "BufferedCopyStrategy",
    "CopyDispatcher",
    "CopyJob",
    "CopyResult",
    "CopyStrategy",
    "CopyStrategyProtocol",
    "create_copy_service",
    "default_max_jobs",
    "DispatchSummary",
    "JobCounter",
    "JobOutcome",
    "remap_path",
    "SendfileCopyStrategy",
    "TreeCopyService",
    "TreeWalker",
]
