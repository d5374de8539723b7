"""Helper functions for CLI output formatting with Rich integration."""

from rich.console import Console
from rich.markup import escape

from fastpaste.core.file_operations import CopyResult


console = Console()
error_console = Console(stderr=True)


def print_success_message(message: str) -> None:
    console.print(f"[green]✓[/green] {escape(message)}", soft_wrap=True)


def print_warning_message(message: str) -> None:
    error_console.print(f"[yellow]![/yellow] {escape(message)}", soft_wrap=True)


def print_error_message(message: str) -> None:
    error_console.print(f"[red]✗[/red] {escape(message)}", soft_wrap=True)


def format_size(num_bytes: int) -> str:
    """Human readable byte count, e.g. ``1.5 MB``."""
    size = float(num_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024 or unit == "GB":
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"


def print_copy_result(result: CopyResult) -> None:
    """Print a one line summary of a copy, then any failed files."""
    summary = (
        f"Copied {result.files_copied} file(s), {format_size(result.bytes_copied)}"
        f" in {result.elapsed_time:.2f}s"
    )
    if result.files_skipped:
        summary += f" ({result.files_skipped} skipped)"

    if result.success:
        print_success_message(summary)
        return

    print_error_message(summary)
    for failure in result.failures:
        error_console.print(f"  • {escape(failure.error or '')}", soft_wrap=True)
