"""CLI package for pathentity.

This package contains the Typer application and all commands.
"""

from pathentity.cli.main import app

__all__ = ["app"]
