"""Query commands: check, info and hash.

These commands never modify the filesystem.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from pathentity.core.entity import PathEntity
from pathentity.core.models import EntityInfo
from pathentity.utils.formatting import (
    console,
    create_info_table,
    format_info_row,
    print_error,
)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def check(
    path: Annotated[Path, typer.Argument(help="Path to check.")],
) -> None:
    """Print whether PATH is a directory and whether it is a file."""
    entity = PathEntity(path)
    console.print(f"is_directory: {str(entity.is_directory()).lower()}")
    console.print(f"is_file: {str(entity.is_file()).lower()}")


def info(
    paths: Annotated[list[Path], typer.Argument(help="Paths to inspect.")],
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Show kind, size and SHA-256 digest for each PATH."""
    infos = [PathEntity(p).info() for p in paths]

    if output_format == OutputFormat.JSON:
        _print_json(infos)
        return

    table = create_info_table()
    for item in infos:
        table.add_row(*format_info_row(item))
    console.print(table)


def hash_path(
    path: Annotated[Path, typer.Argument(help="File to hash.")],
) -> None:
    """Print the SHA-256 digest of PATH."""
    digest = PathEntity(path).hash()
    if not digest:
        print_error(f"Not a readable regular file: {path}")
        raise typer.Exit(code=1)

    # Plain output so the digest can be piped
    typer.echo(f"{digest}  {path}")


# === Private helper functions ===


def _print_json(infos: list[EntityInfo]) -> None:
    """Display path info as JSON."""
    data = [
        {
            "path": item.path,
            "kind": item.kind.value,
            "size_bytes": item.size_bytes,
            "sha256": item.digest or None,
        }
        for item in infos
    ]
    console.print_json(json.dumps(data))
