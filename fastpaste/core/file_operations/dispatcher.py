"""Concurrent execution of copy jobs under a ceiling of in-flight jobs."""

import logging
import threading
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

from fastpaste.core.errors import CopyError

from .job_counter import JobCounter
from .models import CopyJob, JobOutcome
from .protocols import CopyStrategyProtocol


@dataclass
class DispatchSummary:
    """Aggregated outcomes of one dispatch run."""

    files_copied: int = 0
    files_skipped: int = 0
    bytes_copied: int = 0
    peak_jobs: int = 0
    failures: list[JobOutcome] = field(default_factory=list)


class CopyDispatcher:
    """Launch copy jobs concurrently and wait for all of them to finish.

    Each job takes a slot on the ``JobCounter`` before it is submitted, so at
    most ``max_jobs`` copies are ever in flight; the launch loop blocks while
    the ceiling is reached. After the last launch the dispatcher blocks until
    the counter drains to zero.
    """

    def __init__(
        self,
        strategy: CopyStrategyProtocol,
        max_jobs: int | None = None,
        fail_fast: bool = True,
    ):
        self.strategy = strategy
        self.counter = JobCounter(max_jobs)
        self.fail_fast = fail_fast
        self.logger = logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._failed = threading.Event()

    @property
    def max_jobs(self) -> int:
        return self.counter.max_jobs

    def run(self, jobs: Iterable[CopyJob]) -> DispatchSummary:
        """Copy every job, returning once all launched jobs have completed.

        ``jobs`` is consumed lazily; exceptions raised while producing it
        (a failed directory walk) propagate after in-flight jobs drain.

        Raises:
            CopyError: In fail-fast mode, when any job fails
        """
        summary = DispatchSummary()
        self._failed.clear()

        with ThreadPoolExecutor(
            max_workers=self.counter.max_jobs, thread_name_prefix="fastpaste-copy"
        ) as executor:
            try:
                for job in jobs:
                    self.counter.acquire()
                    if self.fail_fast and self._failed.is_set():
                        self.counter.release()
                        break
                    try:
                        executor.submit(self._run_job, job, summary)
                    except BaseException:
                        self.counter.release()
                        raise
            finally:
                self.counter.wait_drained()

        summary.peak_jobs = self.counter.peak
        self.logger.debug(
            "Dispatched %d jobs (%d skipped, %d failed, peak %d in flight)",
            summary.files_copied + summary.files_skipped + len(summary.failures),
            summary.files_skipped,
            len(summary.failures),
            summary.peak_jobs,
        )

        if self.fail_fast and summary.failures:
            first = summary.failures[0]
            raise CopyError(
                first.error or "Copy failed",
                path=first.job.from_,
                context={"failures": len(summary.failures)},
            )
        return summary

    def _run_job(self, job: CopyJob, summary: DispatchSummary) -> None:
        try:
            try:
                outcome = self.strategy.copy_file(job)
            except Exception as e:
                outcome = JobOutcome(job=job, error=f"Cannot copy {job.from_}: {e}")

            with self._lock:
                if outcome.error is not None:
                    summary.failures.append(outcome)
                elif outcome.skipped:
                    summary.files_skipped += 1
                else:
                    summary.files_copied += 1
                    summary.bytes_copied += outcome.bytes_copied

            if outcome.error is not None:
                self.logger.error("%s", outcome.error)
                self._failed.set()
        finally:
            self.counter.release()
