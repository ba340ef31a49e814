"""Build command argument handling."""

from collections.abc import Sequence
from pathlib import Path

from ezgo.core.exceptions.errors import BuildOutputError

NO_COPY_FLAG = "-no-copy"


def strip_no_copy(args: Sequence[str]) -> tuple[list[str], bool]:
    """Remove the ezgo-only `-no-copy` flag from build arguments.

    Args:
        args: Arguments destined for `go`.

    Returns:
        Tuple of (arguments without the flag, whether it was present).
    """
    filtered = [arg for arg in args if arg != NO_COPY_FLAG]
    return filtered, len(filtered) != len(args)


def locate_build_output(args: Sequence[str], cwd: Path | None = None) -> Path:
    """Work out where `go build` writes its artifact.

    Args:
        args: Build arguments (with or without the leading `build`).
        cwd: Working directory of the build. Defaults to the process cwd.

    Returns:
        Absolute path of the primary build artifact.

    Raises:
        BuildOutputError: If `-o` is given without a value.
    """
    cwd = Path(cwd) if cwd is not None else Path.cwd()

    output: str | None = None
    for i, arg in enumerate(args):
        if arg in ("-o", "--o"):
            if i + 1 >= len(args):
                raise BuildOutputError("flag -o requires an output path")
            output = args[i + 1]
            break
        if arg.startswith(("-o=", "--o=")):
            output = arg.split("=", 1)[1]
            break

    if not output:
        return cwd / f"{cwd.name}.exe"

    path = Path(output)
    if not path.is_absolute():
        path = cwd / path
    return path
