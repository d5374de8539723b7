"""CLI command modules."""

import typer

from fastpaste.cli.commands.clipboard import (
    register_commands as register_clipboard_commands,
)
from fastpaste.cli.commands.shell import register_commands as register_shell_commands


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    register_clipboard_commands(app)
    register_shell_commands(app)
