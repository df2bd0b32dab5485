"""Exceptions raised by fallible path operations.

Only metadata(), size() and remove() raise; every other PathEntity query
collapses filesystem errors into a sentinel value instead.
"""

import errno
import os
from enum import Enum


class ErrorKind(str, Enum):
    """Category of a failed filesystem operation.

    Attributes:
        NOT_FOUND: The path does not resolve to any filesystem entry.
        IO: Any other failure (permissions, I/O fault, busy resource).
    """

    NOT_FOUND = "not_found"
    IO = "io"


class PathEntityError(Exception):
    """Base exception for path operation failures.

    Attributes:
        path: The path the failed operation was applied to.
        kind: Error category callers can branch on.
    """

    kind: ErrorKind = ErrorKind.IO

    def __init__(self, path: str | bytes | os.PathLike[str], message: str) -> None:
        self.path = path
        super().__init__(message)

    @classmethod
    def from_os_error(
        cls,
        path: str | bytes | os.PathLike[str],
        operation: str,
        error: OSError,
    ) -> "PathEntityError":
        """Build the matching subclass for an OSError.

        The caller is expected to chain the original error with ``raise ... from``.

        Args:
            path: Path the operation was applied to.
            operation: Short verb describing the operation (e.g. "stat").
            error: The OSError raised by the filesystem call.

        Returns:
            PathNotFoundError for ENOENT, PathIOError otherwise.
        """
        reason = error.strerror or str(error)
        if isinstance(error, FileNotFoundError) or error.errno == errno.ENOENT:
            return PathNotFoundError(path, f"Cannot {operation} {os.fsdecode(path)}: {reason}")
        return PathIOError(path, f"Cannot {operation} {os.fsdecode(path)}: {reason}")


class PathNotFoundError(PathEntityError):
    """Raised when the path does not exist."""

    kind = ErrorKind.NOT_FOUND


class PathIOError(PathEntityError):
    """Raised when the filesystem call fails for any other reason."""

    kind = ErrorKind.IO
