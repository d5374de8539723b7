"""Tests for the in-flight job counter."""

import threading
from unittest.mock import patch

import pytest

from fastpaste.core.file_operations.job_counter import JobCounter, default_max_jobs


class TestJobCounter:
    """Test admission ceiling and drain behaviour."""

    def test_default_ceiling_is_four_per_cpu(self):
        """Default ceiling scales with the number of processing units."""
        with patch(
            "fastpaste.core.file_operations.job_counter.os.cpu_count", return_value=3
        ):
            assert default_max_jobs() == 12
            assert JobCounter().max_jobs == 12

    def test_default_ceiling_without_cpu_count(self):
        """An unknown CPU count still allows some concurrency."""
        with patch(
            "fastpaste.core.file_operations.job_counter.os.cpu_count",
            return_value=None,
        ):
            assert default_max_jobs() == 4

    def test_invalid_ceiling(self):
        """A ceiling below one is rejected."""
        with pytest.raises(ValueError):
            JobCounter(0)

    def test_acquire_and_release_track_value(self):
        """Value counts acquired slots; peak remembers the maximum."""
        counter = JobCounter(4)

        assert counter.acquire() == 1
        assert counter.acquire() == 2
        assert counter.release() == 1
        assert counter.acquire() == 2
        assert counter.release() == 1
        assert counter.release() == 0

        assert counter.value == 0
        assert counter.peak == 2

    def test_release_without_acquire_raises(self):
        """The counter never goes negative."""
        counter = JobCounter(1)

        with pytest.raises(RuntimeError):
            counter.release()

    def test_acquire_blocks_at_ceiling(self):
        """A job beyond the ceiling waits until a slot is released."""
        counter = JobCounter(1)
        counter.acquire()
        admitted = threading.Event()

        def launch() -> None:
            counter.acquire()
            admitted.set()

        thread = threading.Thread(target=launch)
        thread.start()

        assert not admitted.wait(0.1)
        assert counter.value == 1

        counter.release()
        assert admitted.wait(2)
        thread.join(2)
        assert counter.value == 1
        assert counter.peak == 1

    def test_wait_drained_when_idle(self):
        """Draining an idle counter returns immediately."""
        assert JobCounter(2).wait_drained(timeout=0) is True

    def test_wait_drained_times_out_with_jobs_in_flight(self):
        """Draining reports a timeout while jobs are still in flight."""
        counter = JobCounter(2)
        counter.acquire()

        assert counter.wait_drained(timeout=0.05) is False

    def test_wait_drained_returns_after_last_release(self):
        """Draining completes once every slot is released."""
        counter = JobCounter(4)
        for _ in range(3):
            counter.acquire()

        def finish() -> None:
            for _ in range(3):
                counter.release()

        timer = threading.Timer(0.05, finish)
        timer.start()

        assert counter.wait_drained(timeout=2) is True
        assert counter.value == 0
        timer.join()
