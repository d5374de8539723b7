"""Tree copy service tying together walker, dispatcher and copy strategy."""

import logging
import time
from pathlib import Path
from typing import Any

from fastpaste.core.errors import CopyError

from .dispatcher import CopyDispatcher
from .enums import CopyStrategy
from .job_counter import default_max_jobs
from .models import CopyResult
from .protocols import CopyStrategyProtocol
from .strategies import DEFAULT_BUFFER_SIZE, create_strategy, is_same_file
from .walker import TreeWalker


class TreeCopyService:
    """Service copying a file or a whole directory tree concurrently."""

    def __init__(
        self,
        default_strategy: CopyStrategy = CopyStrategy.BUFFERED,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        max_jobs: int | None = None,
        fail_fast: bool = True,
    ):
        """Initialize the tree copy service.

        Args:
            default_strategy: Single-file copy strategy to use by default
            buffer_size: Chunk size in bytes for streamed copies
            max_jobs: Ceiling of concurrent copy jobs (default: 4 per CPU)
            fail_fast: Raise on the first failed file instead of collecting
        """
        self.default_strategy = default_strategy
        self.buffer_size = buffer_size
        self.max_jobs = max_jobs or default_max_jobs()
        self.fail_fast = fail_fast
        self.logger = logging.getLogger(__name__)

    def copy(
        self,
        to: str | Path,
        from_: str | Path,
        strategy: CopyStrategy | None = None,
        **options: Any,
    ) -> CopyResult:
        """Copy ``from_`` to ``to``.

        A directory copied into an existing directory lands under its own
        basename there; copied to a path that does not exist, it is created
        under that exact name. A file follows the same rule.

        Args:
            to: Destination path
            from_: Source file or directory
            strategy: Specific strategy to use (overrides default)
            **options: ``max_jobs`` and ``fail_fast`` overrides

        Returns:
            CopyResult with operation details

        Raises:
            CopyError: If the walk fails, or a file fails in fail-fast mode
        """
        to, from_ = str(to), str(from_)
        start_time = time.time()

        copy_strategy = self._get_strategy(strategy or self.default_strategy)
        max_jobs = options.get("max_jobs") or self.max_jobs
        fail_fast = options.get("fail_fast", self.fail_fast)

        self.logger.debug(
            "Copying %s to %s using '%s' (max %d jobs)",
            from_,
            to,
            copy_strategy.name,
            max_jobs,
        )

        if is_same_file(to, from_):
            self.logger.debug("Source and destination are the same: %s", from_)
            return self._result(start_time, copy_strategy.name)

        walker = TreeWalker()
        dispatcher = CopyDispatcher(copy_strategy, max_jobs=max_jobs, fail_fast=fail_fast)
        try:
            summary = dispatcher.run(walker.walk(to, from_))
        finally:
            # Directories created before a failure keep their source modes too
            walker.restore_modes()

        result = self._result(
            start_time,
            copy_strategy.name,
            success=not summary.failures,
            bytes_copied=summary.bytes_copied,
            files_copied=summary.files_copied,
            files_skipped=summary.files_skipped,
            directories_created=walker.directories_created,
            peak_jobs=summary.peak_jobs,
            failures=summary.failures,
        )
        if summary.failures:
            result.error = f"{len(summary.failures)} file(s) failed to copy"

        self.logger.info(
            "Copied %s to %s: %d files, %.1f MB in %.2f seconds",
            from_,
            to,
            result.files_copied,
            result.bytes_copied / (1024 * 1024),
            result.elapsed_time,
        )
        return result

    def _get_strategy(self, strategy: CopyStrategy) -> CopyStrategyProtocol:
        try:
            return create_strategy(strategy, self.buffer_size)
        except ValueError as e:
            raise CopyError(f"Unknown copy strategy: {strategy}") from e

    def _result(
        self, start_time: float, strategy_name: str, **fields: Any
    ) -> CopyResult:
        fields.setdefault("success", True)
        fields.setdefault("bytes_copied", 0)
        return CopyResult(
            elapsed_time=time.time() - start_time,
            strategy_used=strategy_name,
            **fields,
        )


def create_copy_service(user_config: Any | None = None) -> TreeCopyService:
    """Factory function to create tree copy service from user configuration.

    Args:
        user_config: UserConfig with copy settings

    Returns:
        Configured TreeCopyService instance
    """
    if user_config is None:
        return TreeCopyService()

    config = user_config._config
    try:
        default_strategy = CopyStrategy(config.copy_strategy)
    except ValueError:
        default_strategy = CopyStrategy.BUFFERED

    return TreeCopyService(
        default_strategy=default_strategy,
        buffer_size=config.buffer_size,
        max_jobs=config.max_jobs,
        fail_fast=config.fail_fast,
    )
