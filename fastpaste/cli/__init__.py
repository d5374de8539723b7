"""Command line interface for fastpaste."""

from fastpaste.cli.app import app, main
from fastpaste.cli.commands import register_all_commands


register_all_commands(app)

__all__ = ["app", "main"]
