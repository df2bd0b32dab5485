"""Core path identity module.

This module provides the PathEntity abstraction together with its
error types and result models.
"""

from pathentity.core.entity import PathEntity, PathInput
from pathentity.core.errors import ErrorKind, PathEntityError, PathIOError, PathNotFoundError
from pathentity.core.models import EntityInfo, EntityKind, MatchResult, RemoveResult

__all__ = [
    "EntityInfo",
    "EntityKind",
    "ErrorKind",
    "MatchResult",
    "PathEntity",
    "PathEntityError",
    "PathIOError",
    "PathInput",
    "PathNotFoundError",
    "RemoveResult",
]
