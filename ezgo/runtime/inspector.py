"""Direct DLL import discovery via objdump.

The dump tool is run as `<tool> -p <binary>`; every line of the form
`DLL Name: <name>` names one imported library.
"""

import subprocess
from pathlib import Path

from ezgo.core.exceptions.errors import InspectionError
from ezgo.core.logger.logger import get_logger

logger = get_logger(__name__)

DLL_NAME_MARKER = "DLL Name:"

# Windows baseline DLLs that are always present and never shipped.
SYSTEM_DLLS = frozenset(
    {
        "advapi32.dll",
        "comdlg32.dll",
        "gdi32.dll",
        "kernel32.dll",
        "msvcrt.dll",
        "ole32.dll",
        "oleaut32.dll",
        "shell32.dll",
        "user32.dll",
        "winmm.dll",
        "ws2_32.dll",
        "ntdll.dll",
        "rpcrt4.dll",
        "shlwapi.dll",
    }
)


def is_system_dll(name: str) -> bool:
    """Check whether a library belongs to the Windows baseline."""
    return name.lower() in SYSTEM_DLLS


def parse_dll_names(output: str) -> set[str]:
    """Extract non-system DLL names from a dump report.

    Args:
        output: Text printed by the dump tool.

    Returns:
        Library names with their original casing.
    """
    names: set[str] = set()
    for line in output.splitlines():
        line = line.strip()
        if not line.startswith(DLL_NAME_MARKER):
            continue
        name = line[len(DLL_NAME_MARKER):].strip()
        if name and not is_system_dll(name):
            names.add(name)
    return names


class DependencyInspector:
    """Lists the libraries a binary imports directly."""

    def __init__(self, tool_path: Path | str) -> None:
        """Initialize the inspector.

        Args:
            tool_path: Path to the objdump-compatible executable.
        """
        self.tool_path = Path(tool_path)

    def inspect(self, binary_path: Path | str) -> set[str]:
        """Dump a binary's imports.

        Args:
            binary_path: Executable or DLL to inspect.

        Returns:
            Direct non-system dependencies of the binary.

        Raises:
            InspectionError: If the tool cannot be run or exits abnormally.
        """
        binary_path = Path(binary_path)
        cmd = [str(self.tool_path), "-p", str(binary_path)]
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
            )
        except OSError as e:
            raise InspectionError(
                f"failed to run {self.tool_path.name} on {binary_path}: {e}",
                binary_path=str(binary_path),
                tool_path=str(self.tool_path),
            ) from e

        if result.returncode != 0:
            raise InspectionError(
                f"failed to run {self.tool_path.name} on {binary_path}: "
                f"exit status {result.returncode}",
                binary_path=str(binary_path),
                tool_path=str(self.tool_path),
                details={"stderr": result.stderr.strip()[:500]},
            )

        return parse_dll_names(result.stdout)
