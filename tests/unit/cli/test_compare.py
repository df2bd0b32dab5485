"""Unit tests for the compare command."""

from pathlib import Path

import pytest
from pathentity.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestCompare:
    """Tests for pathentity compare."""

    @pytest.mark.parametrize("flags", [[], ["--deep"]])
    def test_identical_files_match(
        self, same_content_files: tuple[Path, Path], flags: list[str]
    ) -> None:
        """Identical files exit 0 under both comparison methods."""
        first, second = same_content_files
        result = runner.invoke(app, ["compare", str(first), str(second), *flags])

        assert result.exit_code == 0
        assert "match" in result.stdout
        assert "differ" not in result.stdout

    @pytest.mark.parametrize("flags", [[], ["-d"]])
    def test_different_files_differ(
        self, same_content_files: tuple[Path, Path], different_file: Path, flags: list[str]
    ) -> None:
        """Different files exit 1."""
        first, _ = same_content_files
        result = runner.invoke(app, ["compare", str(first), str(different_file), *flags])

        assert result.exit_code == 1
        assert "differ" in result.stdout

    def test_reports_method(self, same_content_files: tuple[Path, Path]) -> None:
        """The output names the comparison method."""
        first, second = same_content_files

        shallow = runner.invoke(app, ["compare", str(first), str(second)])
        deep = runner.invoke(app, ["compare", str(first), str(second), "--deep"])

        assert "(sha256)" in shallow.stdout
        assert "(bytes)" in deep.stdout

    def test_missing_paths_never_match(self, tmp_path: Path) -> None:
        """Two missing paths differ and produce a warning."""
        result = runner.invoke(app, ["compare", str(tmp_path / "a"), str(tmp_path / "b")])

        assert result.exit_code == 1
        assert "only regular files can match" in " ".join(result.output.split())

    def test_file_against_directory(self, different_file: Path, tmp_path: Path) -> None:
        """A file never matches a directory."""
        result = runner.invoke(app, ["compare", str(different_file), str(tmp_path), "--deep"])
        assert result.exit_code == 1

    def test_quiet_suppresses_output(self, same_content_files: tuple[Path, Path]) -> None:
        """--quiet keeps only the exit code."""
        first, second = same_content_files
        result = runner.invoke(app, ["--quiet", "compare", str(first), str(second)])

        assert result.exit_code == 0
        assert result.stdout == ""
