"""Protocol definition for single-file copy strategies."""

from typing import Protocol, runtime_checkable

from .models import CopyJob, JobOutcome


@runtime_checkable
class CopyStrategyProtocol(Protocol):
    """Protocol for copying the bytes of one file to another."""

    @property
    def name(self) -> str:
        """Human readable strategy name."""
        ...

    @property
    def description(self) -> str:
        ...

    def validate_prerequisites(self) -> list[str]:
        """Return the reasons this strategy cannot run, if any."""
        ...

    def copy_file(self, job: CopyJob) -> JobOutcome:
        """Copy ``job.from_`` to ``job.to``.

        A job whose source and destination are equal, or whose source no
        longer exists, is skipped rather than failed.

        Args:
            job: The file to copy

        Returns:
            JobOutcome with bytes copied, skip flag or error message
        """
        ...
