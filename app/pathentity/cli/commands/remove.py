"""Remove command implementation.

Deletes files and directory trees with dry-run support and a
confirmation prompt. Each path is removed independently, so one
failure does not stop the others.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from pathentity.core.entity import PathEntity
from pathentity.core.errors import PathEntityError
from pathentity.core.models import EntityKind, RemoveResult
from pathentity.utils.formatting import (
    console,
    format_kind,
    print_info,
    print_success,
    print_warning,
)

logger = logging.getLogger(__name__)


def rm(
    ctx: typer.Context,
    paths: Annotated[list[Path], typer.Argument(help="Files or directories to remove.")],
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be removed."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Remove each PATH; directories are removed recursively."""
    entities = [PathEntity(p) for p in paths]
    quiet = bool(ctx.obj and ctx.obj.get("quiet"))

    if not quiet:
        _print_removal_plan(entities, dry_run)

    # Confirm unless --yes or --dry-run
    if not dry_run and not yes:
        confirmed = typer.confirm(
            f"\nProceed with removing {len(entities)} path(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    results = remove_paths(entities, dry_run=dry_run)
    if quiet:
        _print_removal_failures(results)
    else:
        _print_removal_results(results)

    if any(not r.success for r in results):
        raise typer.Exit(code=1)


def remove_paths(entities: list[PathEntity], dry_run: bool = False) -> list[RemoveResult]:
    """Remove multiple paths and return one result per path.

    Failures are isolated per path: a PathEntityError is recorded in the
    result and the next path is processed.

    Args:
        entities: Paths to remove.
        dry_run: If True, report what would be removed without removing.

    Returns:
        List of RemoveResult, in input order.
    """
    results: list[RemoveResult] = []

    for entity in entities:
        existed = entity.exists()

        if dry_run:
            logger.info("Dry-run: would remove %s", entity)
            results.append(
                RemoveResult(path=str(entity), success=True, dry_run=True, existed=existed)
            )
            continue

        try:
            entity.remove()
        except PathEntityError as e:
            logger.warning("Failed to remove %s: %s", entity, e)
            results.append(
                RemoveResult(path=str(entity), success=False, error=str(e), existed=existed)
            )
            continue

        results.append(RemoveResult(path=str(entity), success=True, existed=existed))

    return results


# === Private helper functions ===


def _print_removal_plan(entities: list[PathEntity], dry_run: bool) -> None:
    """Display planned removals."""
    label = "Planned Removals (dry-run)" if dry_run else "Planned Removals"
    table = Table(
        title=label,
        show_lines=False,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="bold")
    table.add_column("Kind", width=10)

    for entity in entities:
        kind = entity.kind()
        table.add_row(str(entity), format_kind(kind))
        if kind is EntityKind.OTHER:
            print_warning(f"Special entry will be left in place: {entity}")

    console.print(table)


def _print_removal_failures(results: list[RemoveResult]) -> None:
    """Display only the paths that could not be removed."""
    for r in results:
        if not r.success:
            print_warning(f"Failed to remove {r.path}: {r.error or 'Unknown error'}")


def _print_removal_results(results: list[RemoveResult]) -> None:
    """Display removal results."""
    table = Table(
        title="Removal Results",
        show_lines=False,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="bold")
    table.add_column("Status", width=10)
    table.add_column("Details", style="dim")

    for r in results:
        if r.dry_run:
            status = "[info]dry-run[/]"
            detail = "Would remove" if r.existed else "Nothing to remove"
        elif r.success:
            status = "[success]removed[/]" if r.existed else "[muted]absent[/]"
            detail = ""
        else:
            status = "[error]failed[/]"
            detail = r.error or "Unknown error"
        table.add_row(r.path, status, detail)

    console.print(table)

    success_count = sum(1 for r in results if r.success)
    fail_count = sum(1 for r in results if not r.success)
    dry_count = sum(1 for r in results if r.dry_run)

    if dry_count:
        print_info(f"Dry-run: {dry_count} path(s) would be removed.")
    elif fail_count:
        print_warning(f"{success_count} succeeded, {fail_count} failed")
    else:
        print_success(f"All {success_count} path(s) processed successfully.")
