"""Counter of in-flight copy jobs, doubling as admission gate and drain barrier."""

import os
import threading


def default_max_jobs() -> int:
    """Ceiling of concurrent copy jobs: four per available processing unit."""
    return (os.cpu_count() or 1) * 4


class JobCounter:
    """Thread-safe count of launched copy jobs that have not yet returned.

    ``acquire`` takes a slot before a job is launched, blocking while the
    ceiling is reached. ``release`` gives it back when the job returns, on
    every exit path. ``wait_drained`` blocks until the count is zero.
    """

    def __init__(self, max_jobs: int | None = None) -> None:
        if max_jobs is None:
            max_jobs = default_max_jobs()
        if max_jobs < 1:
            raise ValueError(f"max_jobs must be at least 1, got {max_jobs}")
        self.max_jobs = max_jobs
        self._value = 0
        self._peak = 0
        self._condition = threading.Condition()

    @property
    def value(self) -> int:
        with self._condition:
            return self._value

    @property
    def peak(self) -> int:
        """Highest number of jobs observed in flight at once."""
        with self._condition:
            return self._peak

    def acquire(self) -> int:
        """Take a slot, waiting while ``max_jobs`` jobs are in flight."""
        with self._condition:
            while self._value >= self.max_jobs:
                self._condition.wait()
            self._value += 1
            self._peak = max(self._peak, self._value)
            return self._value

    def release(self) -> int:
        with self._condition:
            if self._value <= 0:
                raise RuntimeError("JobCounter released more times than acquired")
            self._value -= 1
            self._condition.notify_all()
            return self._value

    def wait_drained(self, timeout: float | None = None) -> bool:
        """Block until no job is in flight.

        Returns:
            False if ``timeout`` expired before the counter reached zero
        """
        with self._condition:
            return self._condition.wait_for(lambda: self._value == 0, timeout)
