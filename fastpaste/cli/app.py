"""Main CLI application for fastpaste."""

import logging
import sys

# Import version from package metadata directly to avoid circular imports
from importlib.metadata import distribution
from typing import Annotated

import typer

from fastpaste.cli.decorators.error_handling import print_stack_trace_if_verbose
from fastpaste.config.user_config import UserConfig, create_user_config
from fastpaste.core.errors import ConfigError
from fastpaste.core.logging import setup_logging


__all__ = ["app", "main", "__version__", "setup_logging"]


__version__ = distribution("fastpaste").version

logger = logging.getLogger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        verbose: int = 0,
        log_file: str | None = None,
        config_file: str | None = None,
    ):
        """Initialize AppContext.

        Args:
            verbose: Verbosity level
            log_file: Path to log file
            config_file: Path to configuration file
        """
        self.verbose = verbose
        self.log_file = log_file
        self.config_file = config_file
        self.user_config: UserConfig = create_user_config(cli_config_path=config_file)


app = typer.Typer(
    name="fastpaste",
    help=f"""fastpaste v{__version__}

Copy a file or directory now, paste it somewhere else later. Directory trees
are pasted with many files copied concurrently.

Common workflows:
  • Remember a path:  fastpaste copy ~/projects/site
  • Paste it:         fastpaste paste /mnt/backup
  • One shot:         fastpaste transfer ~/projects/site /mnt/backup""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to configuration file"),
    ] = None,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """fastpaste: deferred, concurrent file and directory copying."""
    if version:
        print(f"fastpaste v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    try:
        app_context = AppContext(
            verbose=verbose, log_file=log_file, config_file=config_file
        )
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        raise typer.Exit(1) from e
    ctx.obj = app_context

    # Set log level based on verbosity, debug flag, or config
    if debug or verbose >= 2:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO
    else:
        log_level = app_context.user_config.get_log_level_int()

    setup_logging(level=log_level, log_file=log_file)


def main() -> int:
    """Main CLI entry point."""
    exit_code = 0

    try:
        app()
    except SystemExit as e:
        exit_code = e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        print_stack_trace_if_verbose()
        exit_code = 1

    return exit_code
