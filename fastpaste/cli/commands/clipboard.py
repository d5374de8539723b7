"""Copy, paste and transfer commands."""

import os
from typing import Annotated

import typer

from fastpaste.cli.app import AppContext
from fastpaste.cli.decorators import handle_errors
from fastpaste.cli.helpers import (
    print_copy_result,
    print_success_message,
    print_warning_message,
)
from fastpaste.core.file_operations import CopyResult, CopyStrategy, create_copy_service
from fastpaste.core.logging import get_logger
from fastpaste.store import create_clipboard_store
from fastpaste.utils.paths import exists, make_absolute, strip_quotes


logger = get_logger(__name__)


JobsOption = Annotated[
    int | None,
    typer.Option(
        "--jobs",
        "-j",
        min=1,
        help="Maximum number of files copied at once (default: 4 per CPU)",
    ),
]
StrategyOption = Annotated[
    CopyStrategy | None,
    typer.Option("--strategy", "-s", help="Single-file copy strategy"),
]
KeepGoingOption = Annotated[
    bool,
    typer.Option(
        "--keep-going",
        "-k",
        help="Copy the remaining files when one fails, and report failures at the end",
    ),
]


def _normalize(path: str) -> str:
    """Unquote a path argument and make it absolute, keeping a trailing separator."""
    return make_absolute(os.path.expanduser(strip_quotes(path)))


def _run_copy(
    ctx: typer.Context,
    destination: str,
    source: str,
    jobs: int | None,
    strategy: CopyStrategy | None,
    keep_going: bool,
) -> CopyResult:
    app_ctx: AppContext = ctx.obj
    service = create_copy_service(app_ctx.user_config)

    options: dict[str, object] = {}
    if jobs:
        options["max_jobs"] = jobs
    if keep_going:
        options["fail_fast"] = False

    logger.info("copying", source=source, destination=destination)
    result = service.copy(destination, source, strategy=strategy, **options)
    print_copy_result(result)
    if not result.success:
        raise typer.Exit(1)
    return result


@handle_errors
def copy_command(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="File or directory to remember")],
) -> None:
    """Remember PATH so that a later 'paste' copies it."""
    app_ctx: AppContext = ctx.obj
    source = _normalize(path)
    if not exists(source):
        # Only checked again when pasting
        print_warning_message(f"{source} does not exist yet")

    with create_clipboard_store(app_ctx.user_config) as store:
        remembered = store.remember(source)

    logger.info("remembered_path", path=remembered)
    print_success_message(f"Remembered {remembered}")


@handle_errors
def paste_command(
    ctx: typer.Context,
    destination: Annotated[
        str, typer.Argument(help="Directory to paste into, or the new name")
    ],
    jobs: JobsOption = None,
    strategy: StrategyOption = None,
    keep_going: KeepGoingOption = False,
) -> None:
    """Copy the remembered path to DESTINATION."""
    app_ctx: AppContext = ctx.obj
    with create_clipboard_store(app_ctx.user_config) as store:
        source = store.recall()

    if source is None:
        print_warning_message("Nothing to paste: no path has been copied")
        return
    if not exists(source):
        print_warning_message(f"Nothing to paste: {source} no longer exists")
        return

    _run_copy(ctx, _normalize(destination), source, jobs, strategy, keep_going)

    if app_ctx.user_config._config.clear_after_paste:
        with create_clipboard_store(app_ctx.user_config) as store:
            store.forget()


@handle_errors
def transfer_command(
    ctx: typer.Context,
    source: Annotated[str, typer.Argument(help="File or directory to copy")],
    destination: Annotated[
        str, typer.Argument(help="Directory to copy into, or the new name")
    ],
    jobs: JobsOption = None,
    strategy: StrategyOption = None,
    keep_going: KeepGoingOption = False,
) -> None:
    """Copy SOURCE to DESTINATION directly, without the clipboard."""
    source_path = _normalize(source)
    if not exists(source_path):
        raise FileNotFoundError(f"Source does not exist: {source_path}")

    _run_copy(ctx, _normalize(destination), source_path, jobs, strategy, keep_going)


@handle_errors
def show_command(ctx: typer.Context) -> None:
    """Show the remembered path."""
    app_ctx: AppContext = ctx.obj
    with create_clipboard_store(app_ctx.user_config) as store:
        source = store.recall()

    if source is None:
        print_warning_message("No path has been copied")
        return
    print(source)


@handle_errors
def clear_command(ctx: typer.Context) -> None:
    """Forget the remembered path."""
    app_ctx: AppContext = ctx.obj
    with create_clipboard_store(app_ctx.user_config) as store:
        existed = store.forget()

    if existed:
        print_success_message("Clipboard cleared")
    else:
        print_warning_message("No path has been copied")


def register_commands(app: typer.Typer) -> None:
    """Register clipboard commands with the main app.

    Args:
        app: The main Typer app
    """
    app.command(name="copy")(copy_command)
    app.command(name="paste")(paste_command)
    app.command(name="transfer")(transfer_command)
    app.command(name="show")(show_command)
    app.command(name="clear")(clear_command)
