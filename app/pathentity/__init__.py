"""pathentity - file identity queries for a single filesystem path.

Answers existence, type, size and content-hash questions about a path,
compares two paths by digest or by raw bytes, and removes files and
directory trees.
"""

from importlib.metadata import PackageNotFoundError, version

from pathentity.core import (
    EntityInfo,
    EntityKind,
    ErrorKind,
    PathEntity,
    PathEntityError,
    PathIOError,
    PathNotFoundError,
)

try:
    __version__ = version("pathentity")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "EntityInfo",
    "EntityKind",
    "ErrorKind",
    "PathEntity",
    "PathEntityError",
    "PathIOError",
    "PathNotFoundError",
    "__version__",
]
