"""CLI helper functions."""

from .output import (
    print_copy_result,
    print_error_message,
    print_success_message,
    print_warning_message,
)


__all__ = [
    "print_copy_result",
    "print_error_message",
    "print_success_message",
    "print_warning_message",
]
