"""Implementation of single-file copy strategies."""

import logging
import os
from typing import BinaryIO

from .enums import CopyStrategy
from .models import CopyJob, JobOutcome


DEFAULT_BUFFER_SIZE = 128_000


def is_same_file(to: str, from_: str) -> bool:
    """Whether copying ``from_`` onto ``to`` would read and write one file."""
    if to == from_:
        return True
    if os.path.normcase(os.path.abspath(to)) == os.path.normcase(
        os.path.abspath(from_)
    ):
        return True
    try:
        return os.path.samefile(to, from_)
    except OSError:
        return False


class BufferedCopyStrategy:
    """Chunked read/write copy with a fixed buffer size."""

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE):
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self.logger = logging.getLogger(__name__)

    @property
    def name(self) -> str:
        return f"Buffered ({self.buffer_size} bytes)"

    @property
    def description(self) -> str:
        return f"Chunked copy with a {self.buffer_size} byte buffer"

    def validate_prerequisites(self) -> list[str]:
        return []

    def copy_file(self, job: CopyJob) -> JobOutcome:
        """Copy a single file, skipping self-copies and vanished sources."""
        if is_same_file(job.to, job.from_):
            self.logger.debug("Skipping self-copy of %s", job.from_)
            return JobOutcome(job=job, skipped=True)

        try:
            fsrc = open(job.from_, "rb")  # noqa: SIM115
        except FileNotFoundError:
            self.logger.debug("Source vanished before copy, skipping: %s", job.from_)
            return JobOutcome(job=job, skipped=True)
        except OSError as e:
            return JobOutcome(job=job, error=f"Cannot open {job.from_}: {e}")

        with fsrc:
            try:
                with open(job.to, "wb") as fdst:
                    bytes_copied = self._copy_stream(fsrc, fdst)
            except OSError as e:
                return JobOutcome(
                    job=job, error=f"Cannot copy {job.from_} to {job.to}: {e}"
                )

        self.logger.debug("Copied %s to %s (%d bytes)", job.from_, job.to, bytes_copied)
        return JobOutcome(job=job, bytes_copied=bytes_copied)

    def _copy_stream(self, fsrc: BinaryIO, fdst: BinaryIO) -> int:
        total_size = 0
        while True:
            chunk = fsrc.read(self.buffer_size)
            if not chunk:
                break
            fdst.write(chunk)
            total_size += len(chunk)
        return total_size


class SendfileCopyStrategy(BufferedCopyStrategy):
    """Strategy using the sendfile system call for Linux/Unix optimization."""

    @property
    def name(self) -> str:
        return "Sendfile"

    @property
    def description(self) -> str:
        return "Copy using sendfile system call (Linux/Unix only)"

    def validate_prerequisites(self) -> list[str]:
        missing = []
        if not hasattr(os, "sendfile"):
            missing.append("sendfile system call not available")
        return missing

    def _copy_stream(self, fsrc: BinaryIO, fdst: BinaryIO) -> int:
        file_size = os.fstat(fsrc.fileno()).st_size
        offset = 0
        try:
            while offset < file_size:
                sent = os.sendfile(
                    fdst.fileno(), fsrc.fileno(), offset, file_size - offset
                )
                if sent == 0:
                    break
                offset += sent
        except OSError as e:
            # Fallback to regular copy from where sendfile stopped
            self.logger.debug("sendfile refused (%s), using buffered copy", e)
            fsrc.seek(offset)
            fdst.seek(offset)
            return offset + super()._copy_stream(fsrc, fdst)

        # Files that grew after fstat, or report size 0 (procfs), still copy fully
        fsrc.seek(offset)
        fdst.seek(offset)
        return offset + super()._copy_stream(fsrc, fdst)


def create_strategy(
    strategy: str | CopyStrategy, buffer_size: int = DEFAULT_BUFFER_SIZE
) -> BufferedCopyStrategy:
    """Build the named strategy, falling back to buffered when unavailable."""
    selected = CopyStrategy(strategy)
    if selected is CopyStrategy.SENDFILE:
        sendfile_strategy = SendfileCopyStrategy(buffer_size)
        missing = sendfile_strategy.validate_prerequisites()
        if not missing:
            return sendfile_strategy
        logging.getLogger(__name__).warning(
            "Strategy 'sendfile' missing prerequisites: %s, falling back to buffered",
            missing,
        )
    return BufferedCopyStrategy(buffer_size)
