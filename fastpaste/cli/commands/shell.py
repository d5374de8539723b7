"""Context-menu install and uninstall commands."""

from typing import Annotated

import typer

from fastpaste.cli.decorators import handle_errors
from fastpaste.cli.helpers import print_success_message, print_warning_message
from fastpaste.shell import install_handlers, uninstall_handlers


@handle_errors
def install_command(
    verbose_handlers: Annotated[
        bool,
        typer.Option(
            "--verbose-handlers",
            help="Make pastes started from the context menu verbose",
        ),
    ] = False,
    executable: Annotated[
        str | None,
        typer.Option(
            "--executable",
            help="Command the handlers run (default: the installed fastpaste)",
        ),
    ] = None,
) -> None:
    """Install Explorer context-menu handlers (Windows)."""
    written = install_handlers(executable=executable, verbose=verbose_handlers)
    print_success_message(f"Installed {len(written)} handlers.")


@handle_errors
def uninstall_command() -> None:
    """Remove Explorer context-menu handlers (Windows)."""
    removed = uninstall_handlers()
    if removed:
        print_success_message(f"Removed {len(removed)} handlers.")
    else:
        print_warning_message("No handlers were installed")


def register_commands(app: typer.Typer) -> None:
    """Register shell integration commands with the main app.

    Args:
        app: The main Typer app
    """
    app.command(name="install")(install_command)
    app.command(name="uninstall")(uninstall_command)
