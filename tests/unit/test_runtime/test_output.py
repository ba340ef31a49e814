"""Tests for build argument handling."""

from pathlib import Path

import pytest

from ezgo.core.exceptions.errors import BuildOutputError
from ezgo.runtime.output import locate_build_output, strip_no_copy


class TestLocateBuildOutput:
    """Tests for locate_build_output."""

    def test_default_uses_directory_name(self, tmp_path: Path) -> None:
        """Test the <cwd>/<basename>.exe convention."""
        cwd = tmp_path / "mytool"
        assert locate_build_output([".", "-v"], cwd) == cwd / "mytool.exe"

    def test_relative_output_flag(self, tmp_path: Path) -> None:
        """Test -o with a relative path."""
        assert locate_build_output(["-o", "bin/app.exe", "."], tmp_path) == tmp_path / "bin" / "app.exe"

    def test_absolute_output_flag(self, tmp_path: Path) -> None:
        """Test -o with an absolute path."""
        target = tmp_path / "dist" / "app.exe"
        assert locate_build_output(["-o", str(target)], tmp_path / "src") == target

    def test_equals_form(self, tmp_path: Path) -> None:
        """Test -o=path."""
        assert locate_build_output(["-o=app.exe"], tmp_path) == tmp_path / "app.exe"

    def test_flag_without_value(self, tmp_path: Path) -> None:
        """Test a dangling -o."""
        with pytest.raises(BuildOutputError):
            locate_build_output([".", "-o"], tmp_path)


class TestStripNoCopy:
    """Tests for strip_no_copy."""

    def test_flag_removed(self) -> None:
        """Test -no-copy is removed wherever it appears."""
        args, skip = strip_no_copy(["build", "-no-copy", "-o", "app.exe"])
        assert args == ["build", "-o", "app.exe"]
        assert skip is True

    def test_flag_absent(self) -> None:
        """Test arguments are untouched without the flag."""
        args, skip = strip_no_copy(["build", "."])
        assert args == ["build", "."]
        assert skip is False
