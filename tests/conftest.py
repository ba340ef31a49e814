"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from ezgo.core.exceptions.errors import InspectionError
from ezgo.core.logger.logger import set_quiet
from ezgo.models.toolchain import ToolchainPaths
from ezgo.runtime.inspector import is_system_dll


class FakeInspector:
    """In-memory import lister keyed by binary file name."""

    def __init__(
        self,
        graph: dict[str, set[str]] | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self.graph = {name.lower(): set(deps) for name, deps in (graph or {}).items()}
        self.failing = {name.lower() for name in (failing or set())}
        self.calls: list[str] = []

    def inspect(self, binary_path: Path | str) -> set[str]:
        name = Path(binary_path).name
        self.calls.append(name)
        if name.lower() in self.failing:
            raise InspectionError(
                f"failed to run objdump.exe on {binary_path}",
                binary_path=str(binary_path),
            )
        return {dep for dep in self.graph.get(name.lower(), set()) if not is_system_dll(dep)}


class RecordingReporter:
    """Reporter that keeps messages for assertions."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.warnings: list[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)


@pytest.fixture(autouse=True)
def reset_quiet_mode():
    """Undo quiet mode set by CLI invocations."""
    yield
    set_quiet(False)


@pytest.fixture
def reporter() -> RecordingReporter:
    """Create a recording reporter.

    Returns:
        RecordingReporter instance.
    """
    return RecordingReporter()


@pytest.fixture
def toolchain_paths(tmp_path: Path) -> ToolchainPaths:
    """Create an empty toolchain layout on disk.

    Args:
        tmp_path: Pytest temporary directory.

    Returns:
        ToolchainPaths rooted in the temporary directory.
    """
    paths = ToolchainPaths.from_env_root(tmp_path / "envs" / "cgo")
    for directory in (paths.compiler_bin, paths.general_bin, paths.tool_bin):
        directory.mkdir(parents=True, exist_ok=True)
    return paths


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Create the directory a build writes its artifact to.

    Args:
        tmp_path: Pytest temporary directory.

    Returns:
        Path to the output directory.
    """
    directory = tmp_path / "project"
    directory.mkdir()
    (directory / "app.exe").write_bytes(b"MZ app")
    return directory


def write_dll(directory: Path, name: str, content: bytes | None = None) -> Path:
    """Create a fake DLL file."""
    path = directory / name
    path.write_bytes(content if content is not None else f"MZ {name}".encode())
    return path


@pytest.fixture
def make_inspector() -> type[FakeInspector]:
    """Return the in-memory inspector class."""
    return FakeInspector


@pytest.fixture
def make_dll():
    """Return a helper that writes fake DLL files."""
    return write_dll
