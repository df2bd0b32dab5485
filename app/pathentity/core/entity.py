"""File identity abstraction over a single filesystem path.

A PathEntity answers questions about one path: whether it exists, what it
is, how large it is, what its content digest is, and whether its content
equals that of another path. It can also delete whatever the path points to.

Nothing is cached. Every call stats or reads the live filesystem, so two
consecutive calls may disagree if another process changes the path in
between. info() stats the path once and derives kind, size and digest
from that single classification.
"""

import hashlib
import logging
import os
import shutil
import stat

from pathentity.core.errors import PathEntityError, PathIOError
from pathentity.core.models import EntityInfo, EntityKind

logger = logging.getLogger(__name__)

PathInput = str | bytes | os.PathLike[str] | os.PathLike[bytes]


def _kind_from_stat(st: os.stat_result | None) -> EntityKind:
    """Classify a stat result into an EntityKind."""
    if st is None:
        return EntityKind.MISSING
    if stat.S_ISREG(st.st_mode):
        return EntityKind.FILE
    if stat.S_ISDIR(st.st_mode):
        return EntityKind.DIRECTORY
    return EntityKind.OTHER


class PathEntity:
    """A filesystem path with identity and equality queries.

    The path is stored exactly as given. Construction never touches the
    filesystem and never fails, so an entity may describe a path that does
    not exist yet.

    Queries fall into two groups:

    - Sentinel queries (exists, is_file, is_directory, hash, kind, info)
      never raise. A failed stat or read yields False or an empty string.
    - Fallible operations (metadata, size, remove) raise PathNotFoundError
      or PathIOError.

    Symlinks are followed for type checks, so a link to a regular file
    counts as a file. Dangling links count as missing.

    Example:
        >>> a = PathEntity("/tmp/a.txt")  # doctest: +SKIP
        >>> b = PathEntity("/tmp/b.txt")  # doctest: +SKIP
        >>> a.is_match(b)  # doctest: +SKIP
        True
    """

    __slots__ = ("_path",)

    def __init__(self, path: PathInput) -> None:
        self._path = path

    @property
    def path(self) -> PathInput:
        """The path exactly as passed to the constructor."""
        return self._path

    def __fspath__(self) -> str | bytes:
        return os.fspath(self._path)

    def __str__(self) -> str:
        return os.fsdecode(self._path)

    def __repr__(self) -> str:
        return f"PathEntity({self._path!r})"

    # === Fallible operations ===

    def metadata(self) -> os.stat_result:
        """Stat the path, following symlinks.

        Returns:
            The stat result for the path's target.

        Raises:
            PathNotFoundError: If nothing exists at the path.
            PathIOError: If the path cannot be inspected.
        """
        try:
            return os.stat(self._path)
        except OSError as e:
            raise PathEntityError.from_os_error(self._path, "stat", e) from e
        except ValueError as e:
            raise PathIOError(self._path, f"Cannot stat {self}: {e}") from e

    def size(self) -> int:
        """Return the size of the path's target in bytes.

        Raises:
            PathNotFoundError: If nothing exists at the path.
            PathIOError: If the path cannot be inspected.
        """
        return self.metadata().st_size

    def remove(self) -> None:
        """Delete whatever the path points to.

        Regular files are unlinked and directories are removed recursively.
        A symlink is removed as a link; its target is left alone. If the
        path is missing or is a special entry, nothing happens.

        A failure part way through a directory tree leaves the remaining
        entries in place.

        Raises:
            PathNotFoundError: If the entry vanished before it could be deleted.
            PathIOError: If the delete call failed.
        """
        kind = self.kind()
        try:
            if kind is EntityKind.DIRECTORY and not os.path.islink(self._path):
                shutil.rmtree(self._path)
                logger.debug("Removed directory tree %s", self)
            elif kind in (EntityKind.FILE, EntityKind.DIRECTORY):
                os.unlink(self._path)
                logger.debug("Removed %s", self)
            else:
                logger.debug("Nothing to remove at %s (%s)", self, kind.value)
        except OSError as e:
            raise PathEntityError.from_os_error(self._path, "remove", e) from e

    # === Sentinel queries ===

    def exists(self) -> bool:
        """Check if the path resolves to any filesystem entry."""
        return self._stat_or_none() is not None

    def is_file(self) -> bool:
        """Check if the path resolves to a regular file."""
        return self.kind() is EntityKind.FILE

    def is_directory(self) -> bool:
        """Check if the path resolves to a directory."""
        return self.kind() is EntityKind.DIRECTORY

    def kind(self) -> EntityKind:
        """Classify the entry at the path.

        Returns:
            EntityKind.MISSING when the path cannot be stat'ed.
        """
        return _kind_from_stat(self._stat_or_none())

    def hash(self) -> str:
        """Compute the SHA-256 digest of the file content.

        The whole file is read into memory before hashing.

        Returns:
            64-character lowercase hex digest, or an empty string if the path
            is not a regular file or could not be read.
        """
        if not self.is_file():
            return ""
        return self._digest_or_empty()

    def info(self) -> EntityInfo:
        """Take a snapshot of kind, size and digest."""
        st = self._stat_or_none()
        kind = _kind_from_stat(st)
        return EntityInfo(
            path=str(self),
            kind=kind,
            size_bytes=st.st_size if st is not None else None,
            digest=self._digest_or_empty() if kind is EntityKind.FILE else "",
        )

    # === Equality ===

    def is_match(self, other: "PathEntity") -> bool:
        """Compare content by SHA-256 digest.

        Both paths must be regular files. Two missing or non-file paths
        never match, even though both would hash to an empty string.
        """
        if not (self.is_file() and other.is_file()):
            return False

        digest = self.hash()
        return bool(digest) and digest == other.hash()

    def is_deep_match(self, other: "PathEntity") -> bool:
        """Compare content byte by byte.

        Both paths must be regular files. Both contents are held in memory
        at once. Files of different sizes are rejected without reading.
        """
        left_stat = self._stat_or_none()
        right_stat = other._stat_or_none()
        if _kind_from_stat(left_stat) is not EntityKind.FILE:
            return False
        if _kind_from_stat(right_stat) is not EntityKind.FILE:
            return False
        # Both are regular files here, so neither stat is None
        if left_stat.st_size != right_stat.st_size:  # type: ignore[union-attr]
            return False

        left = self._read_or_none()
        if left is None:
            return False
        right = other._read_or_none()
        if right is None:
            return False
        return left == right

    # === Private helpers ===

    def _stat_or_none(self) -> os.stat_result | None:
        try:
            return os.stat(self._path)
        except (OSError, ValueError):
            return None

    def _digest_or_empty(self) -> str:
        content = self._read_or_none()
        if content is None:
            return ""

        digest = hashlib.sha256(content).hexdigest()
        logger.debug("sha256(%s) = %s", self, digest)
        return digest

    def _read_or_none(self) -> bytes | None:
        try:
            with open(self._path, "rb") as f:
                return f.read()
        except OSError as e:
            logger.debug("Failed to read %s: %s", self, e)
            return None
