"""Utility modules for pathentity.

This module exports commonly used utility functions.
"""

from pathentity.utils.formatting import (
    console,
    create_info_table,
    err_console,
    format_info_row,
    format_kind,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_info_table",
    "err_console",
    "format_info_row",
    "format_kind",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
