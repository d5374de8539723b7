"""Models for copy jobs and copy operation results."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CopyJob:
    """One file to copy: destination first, then source."""

    to: str
    from_: str


@dataclass
class JobOutcome:
    """Outcome of a single copy job."""

    job: CopyJob
    bytes_copied: int = 0
    skipped: bool = False
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class CopyResult:
    """Result of a copy operation with performance metrics."""

    success: bool
    bytes_copied: int
    elapsed_time: float
    files_copied: int = 0
    files_skipped: int = 0
    directories_created: int = 0
    peak_jobs: int = 0
    error: str | None = None
    strategy_used: str | None = None
    failures: list[JobOutcome] = field(default_factory=list)

    @property
    def speed_mbps(self) -> float:
        """Calculate copy speed in MB/s."""
        if self.elapsed_time > 0 and self.success:
            return (self.bytes_copied / (1024 * 1024)) / self.elapsed_time
        return 0.0

    @property
    def speed_gbps(self) -> float:
        """Calculate copy speed in GB/s."""
        return self.speed_mbps / 1024
