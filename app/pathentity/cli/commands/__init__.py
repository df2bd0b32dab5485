"""CLI commands for pathentity.

This package contains all command implementations.
"""

from pathentity.cli.commands import compare, query, remove

__all__ = ["compare", "query", "remove"]
