"""Tests for micromamba-based toolchain provisioning."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from ezgo.core.config.settings import ToolchainSettings
from ezgo.core.exceptions.errors import ToolchainError
from ezgo.toolchain.environment import (
    MambaEnvironment,
    get_cache_root,
    setup_cgo_environment,
)

MICROMAMBA = "/opt/bin/micromamba"


def _ok(*args, **kwargs) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=0, stdout="", stderr="")


@pytest.fixture
def settings(tmp_path: Path) -> ToolchainSettings:
    """Create toolchain settings rooted in a temporary directory."""
    return ToolchainSettings(cache_root=tmp_path / "cache")


class TestGetCacheRoot:
    """Tests for get_cache_root."""

    def test_configured_root(self, settings: ToolchainSettings, tmp_path: Path) -> None:
        """Test an explicit cache root."""
        assert get_cache_root(settings) == tmp_path / "cache"

    def test_default_root(self) -> None:
        """Test the ~/.cache/ezgo default."""
        assert get_cache_root(ToolchainSettings(cache_root=None)) == Path.home() / ".cache" / "ezgo"


@patch("ezgo.toolchain.environment.shutil.which", return_value=MICROMAMBA)
class TestMambaEnvironment:
    """Tests for MambaEnvironment."""

    @patch("ezgo.toolchain.environment.subprocess.run", side_effect=_ok)
    def test_create_new(self, mock_run: MagicMock, mock_which: MagicMock, tmp_path: Path) -> None:
        """Test creating a missing environment."""
        env = MambaEnvironment("cgo", tmp_path)

        assert env.create("3.12", "conda-forge") is True
        cmd = mock_run.call_args.args[0]
        assert cmd[:3] == [MICROMAMBA, "create", "python=3.12"]
        assert "--yes" in cmd
        assert cmd[cmd.index("--root-prefix") + 1] == str(tmp_path)
        assert cmd[cmd.index("--name") + 1] == "cgo"
        assert cmd[cmd.index("--channel") + 1] == "conda-forge"

    @patch("ezgo.toolchain.environment.subprocess.run", side_effect=_ok)
    def test_create_existing_is_noop(
        self, mock_run: MagicMock, mock_which: MagicMock, tmp_path: Path
    ) -> None:
        """Test an existing environment is left alone."""
        (tmp_path / "envs" / "cgo").mkdir(parents=True)
        env = MambaEnvironment("cgo", tmp_path)

        assert env.create("3.12", "conda-forge") is False
        mock_run.assert_not_called()

    @patch("ezgo.toolchain.environment.subprocess.run")
    def test_install_failure_raises(
        self, mock_run: MagicMock, mock_which: MagicMock, tmp_path: Path
    ) -> None:
        """Test a failed install surfaces as ToolchainError."""
        mock_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=1, stdout="", stderr="nothing provides glfw"
        )
        env = MambaEnvironment("cgo", tmp_path)

        with pytest.raises(ToolchainError) as exc_info:
            env.install_package("glfw", "conda-forge")

        assert exc_info.value.details["package"] == "glfw"
        assert "nothing provides" in exc_info.value.details["stderr"]

    def test_missing_micromamba(self, mock_which: MagicMock, tmp_path: Path) -> None:
        """Test a helpful error when micromamba is not installed."""
        mock_which.return_value = None
        env = MambaEnvironment("cgo", tmp_path)

        with pytest.raises(ToolchainError, match="micromamba"):
            env.install_package("glfw", "conda-forge")


@patch("ezgo.toolchain.environment.shutil.which", return_value=MICROMAMBA)
@patch("ezgo.toolchain.environment.subprocess.run", side_effect=_ok)
class TestSetupCgoEnvironment:
    """Tests for setup_cgo_environment."""

    def test_first_run_installs_toolchain(
        self, mock_run: MagicMock, mock_which: MagicMock, settings: ToolchainSettings
    ) -> None:
        """Test a new environment gets the MinGW-w64 package."""
        paths = setup_cgo_environment(quiet=True, packages=["glfw"], settings=settings)

        subcommands = [call.args[0][1:3] for call in mock_run.call_args_list]
        assert subcommands == [
            ["create", "python=3.12"],
            ["install", "m2w64-toolchain_win-64"],
            ["install", "glfw"],
        ]
        assert paths.is_new is True
        assert paths.env_path == settings.cache_root / "envs" / "cgo_win_env_py312"
        assert paths.tool_bin == paths.env_path / "Library" / "mingw-w64" / "x86_64-w64-mingw32" / "bin"

    def test_existing_environment(
        self, mock_run: MagicMock, mock_which: MagicMock, settings: ToolchainSettings
    ) -> None:
        """Test nothing is installed when the environment exists."""
        (settings.cache_root / "envs" / settings.env_name).mkdir(parents=True)

        paths = setup_cgo_environment(quiet=True, settings=settings)

        mock_run.assert_not_called()
        assert paths.is_new is False
