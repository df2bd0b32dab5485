"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def same_content_files(tmp_path: Path) -> tuple[Path, Path]:
    """Two distinct files holding identical content."""
    first = tmp_path / "file1.txt"
    second = tmp_path / "file2.txt"
    first.write_text("Hello, World!")
    second.write_text("Hello, World!")
    return first, second


@pytest.fixture
def different_file(tmp_path: Path) -> Path:
    """A file whose content differs from same_content_files."""
    path = tmp_path / "file3.txt"
    path.write_text("Different content")
    return path


@pytest.fixture
def populated_dir(tmp_path: Path) -> Path:
    """A directory with nested files and subdirectories."""
    root = tmp_path / "tree"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "top.txt").write_text("top")
    (root / "sub" / "middle.txt").write_text("middle")
    (root / "sub" / "deeper" / "bottom.bin").write_bytes(b"\x00\x01\x02")
    return root


@pytest.fixture
def missing_path(tmp_path: Path) -> Path:
    """A path under tmp_path that does not exist."""
    return tmp_path / "does" / "not" / "exist.tmp"
