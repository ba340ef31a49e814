"""Spawning of `go` and interactive shells inside the CGO environment."""

import shutil
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from ezgo.core.exceptions.errors import ToolchainError
from ezgo.core.logger.logger import get_logger

logger = get_logger(__name__)

SHELLS = {
    "cmd": "cmd.exe",
    "powershell": "powershell.exe",
}


def find_executable(name: str, env: Mapping[str, str] | None = None) -> str:
    """Locate an executable on PATH.

    Args:
        name: Executable name.
        env: Environment whose PATH is searched. Defaults to the process PATH.

    Returns:
        Full path of the executable.

    Raises:
        ToolchainError: If it cannot be found.
    """
    search_path = env.get("PATH") if env is not None else None
    executable = shutil.which(name, path=search_path)
    if executable is None:
        raise ToolchainError(f"Could not find '{name}' executable in your system's PATH")
    return executable


def run_go(
    args: Sequence[str],
    env: Mapping[str, str],
    cwd: Path | None = None,
    go_executable: str | None = None,
) -> int:
    """Run the Go compiler with inherited standard streams.

    Args:
        args: Arguments for `go`.
        env: Complete environment for the child process.
        cwd: Working directory. Defaults to the process cwd.
        go_executable: Path to `go`. Looked up on the process PATH if omitted.

    Returns:
        Exit code of `go`.

    Raises:
        ToolchainError: If `go` cannot be found or started.
    """
    if go_executable is None:
        go_executable = find_executable("go")
    cwd = cwd or Path.cwd()

    cmd = [go_executable, *args]
    logger.debug(f"Running: {' '.join(cmd)}")

    try:
        completed = subprocess.run(cmd, env=dict(env), cwd=cwd)
    except OSError as e:
        raise ToolchainError(f"Command failed with an unknown error: {e}") from e
    return completed.returncode


def launch_shell(shell: str, env: Mapping[str, str], quiet: bool = False) -> int:
    """Start an interactive shell and wait for it to exit.

    Args:
        shell: "cmd" or "powershell". Anything else falls back to cmd.
        env: Complete environment for the shell.
        quiet: Suppress informational messages.

    Returns:
        Exit code of the shell.

    Raises:
        ToolchainError: If the shell cannot be found or started.
    """
    shell_exe = SHELLS.get(shell.lower(), SHELLS["cmd"])
    shell_path = find_executable(shell_exe)

    if not quiet:
        logger.info(f"ezgo: Starting interactive {shell_exe} shell with CGO environment...")

    try:
        completed = subprocess.run([shell_path], env=dict(env))
    except OSError as e:
        raise ToolchainError(f"failed to start interactive shell: {e}") from e

    if not quiet:
        logger.info("ezgo: Shell session ended.")
    return completed.returncode
