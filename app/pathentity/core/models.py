"""Result models for path queries, comparisons and removals.

These are immutable snapshots taken at a single point in time. They are
produced on demand and never refreshed; the live filesystem stays the
source of truth.
"""

from dataclasses import dataclass
from enum import Enum


class EntityKind(str, Enum):
    """Type of the entry a path resolves to.

    Attributes:
        FILE: Regular file (symlinks are followed).
        DIRECTORY: Directory (symlinks are followed).
        OTHER: Exists but is neither (FIFO, socket, device).
        MISSING: Nothing exists at the path (including dangling symlinks),
            or it could not be inspected.
    """

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"
    MISSING = "missing"


@dataclass(frozen=True, slots=True)
class EntityInfo:
    """Snapshot of a path's type, size and content digest.

    Attributes:
        path: The path as given by the caller.
        kind: Type of the entry at the time of the snapshot.
        size_bytes: Size reported by stat, None if unavailable.
        digest: SHA-256 hex digest, empty unless the path is a regular file.
    """

    path: str
    kind: EntityKind
    size_bytes: int | None
    digest: str

    @property
    def has_digest(self) -> bool:
        """Check if a content digest was computed."""
        return bool(self.digest)


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of comparing two paths.

    Attributes:
        left: First path.
        right: Second path.
        deep: True for a byte-by-byte comparison, False for digest comparison.
        matched: Whether the two paths hold identical content.
    """

    left: str
    right: str
    deep: bool
    matched: bool

    @property
    def method(self) -> str:
        """Human-readable name of the comparison method."""
        return "bytes" if self.deep else "sha256"


@dataclass(frozen=True, slots=True)
class RemoveResult:
    """Result of a single removal.

    Attributes:
        path: Path that was operated on.
        success: Whether the removal completed (absent paths count as success).
        error: Error message if the removal failed, None otherwise.
        dry_run: Whether this was a dry-run (nothing deleted).
        existed: Whether anything was present to delete.
    """

    path: str
    success: bool
    error: str | None = None
    dry_run: bool = False
    existed: bool = True

    def __post_init__(self) -> None:
        """Validate result consistency after initialization."""
        if self.success and self.error is not None:
            msg = "A successful result cannot carry an error"
            raise ValueError(msg)
