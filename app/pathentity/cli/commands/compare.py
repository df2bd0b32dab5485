"""Compare command implementation.

Compares the content of two paths, either by SHA-256 digest (default)
or byte by byte with --deep. The exit code mirrors cmp(1): 0 when the
paths match, 1 when they do not.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from pathentity.core.entity import PathEntity
from pathentity.core.models import EntityKind, MatchResult
from pathentity.utils.formatting import console, format_kind, print_warning

logger = logging.getLogger(__name__)


def compare(
    ctx: typer.Context,
    left: Annotated[Path, typer.Argument(help="First path.")],
    right: Annotated[Path, typer.Argument(help="Second path.")],
    deep: Annotated[
        bool,
        typer.Option(
            "--deep",
            "-d",
            help="Compare raw bytes instead of SHA-256 digests.",
        ),
    ] = False,
) -> None:
    """Compare the content of LEFT and RIGHT."""
    left_entity = PathEntity(left)
    right_entity = PathEntity(right)

    for entity in (left_entity, right_entity):
        kind = entity.kind()
        if kind is not EntityKind.FILE:
            print_warning(f"{entity} is {kind.value}, only regular files can match")

    if deep:
        matched = left_entity.is_deep_match(right_entity)
    else:
        matched = left_entity.is_match(right_entity)
    result = MatchResult(left=str(left_entity), right=str(right_entity), deep=deep, matched=matched)
    logger.debug("Compared %s and %s by %s: %s", result.left, result.right, result.method, matched)

    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    if not quiet:
        _print_result(result, left_entity, right_entity)

    if not result.matched:
        raise typer.Exit(code=1)


# === Private helper functions ===


def _print_result(result: MatchResult, left: PathEntity, right: PathEntity) -> None:
    """Display a comparison result."""
    if result.matched:
        console.print(f"[match]match[/] ({result.method})")
    else:
        console.print(f"[mismatch]differ[/] ({result.method})")

    if not result.deep:
        for entity in (left, right):
            digest = entity.hash() or "-"
            console.print(f"  [digest]{digest}[/]  {entity}  {format_kind(entity.kind())}")
