"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.table import Table

from pathentity.core.models import EntityInfo, EntityKind
from pathentity.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string."""
    if size_bytes is None:
        return "-"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"


def format_kind(kind: EntityKind) -> str:
    """Wrap an entry kind in its theme style."""
    return f"[kind.{kind.value}]{kind.value}[/]"


def create_info_table(title: str = "Path Info") -> Table:
    """Create a pre-configured table for EntityInfo rows.

    Args:
        title: Table title.

    Returns:
        Rich Table with Path, Kind, Size and SHA-256 columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="text", no_wrap=True)
    table.add_column("Kind", width=10)
    table.add_column("Size", style="info", justify="right")
    table.add_column("SHA-256", style="digest", overflow="fold")
    return table


def format_info_row(info: EntityInfo) -> tuple[str, str, str, str]:
    """Format an EntityInfo as a table row with Rich markup."""
    return (
        info.path,
        format_kind(info.kind),
        format_size(info.size_bytes),
        info.digest or "-",
    )


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
