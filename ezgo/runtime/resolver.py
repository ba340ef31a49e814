"""Transitive runtime DLL resolution and copying.

After a successful build the produced executable is inspected for the DLLs
it imports. Each import found in the toolchain search directories is in turn
inspected, breadth-first, until no new names appear. Every library found this
way is then copied next to the executable so it runs outside the toolchain
environment.
"""

import shutil
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from ezgo.core.exceptions.errors import CopyError, InspectionError
from ezgo.core.logger.logger import get_logger
from ezgo.models.runtime import CopyReport, PostBuildResult, TraversalState
from ezgo.models.toolchain import ToolchainPaths
from ezgo.runtime.inspector import DependencyInspector
from ezgo.runtime.reporter import LoggingReporter, Reporter

logger = get_logger(__name__)


class Inspector(Protocol):
    """Anything that can list a binary's direct imports."""

    def inspect(self, binary_path: Path | str) -> set[str]: ...


class DependencyResolver:
    """Walks the import graph of a binary and copies what it needs."""

    def __init__(
        self,
        inspector: Inspector,
        search_paths: Iterable[Path],
        reporter: Reporter | None = None,
        fail_on_copy_error: bool = True,
    ) -> None:
        """Initialize the resolver.

        Args:
            inspector: Source of direct imports for a binary.
            search_paths: Directories searched for libraries, highest priority first.
            reporter: Receiver for progress and warnings.
            fail_on_copy_error: Raise on the first failed copy instead of
                collecting failures in the report.
        """
        self.inspector = inspector
        self.search_paths = [Path(p) for p in search_paths]
        self.reporter = reporter or LoggingReporter()
        self.fail_on_copy_error = fail_on_copy_error

    def locate(self, name: str) -> Path | None:
        """Find a library in the search paths.

        Args:
            name: Library file name.

        Returns:
            Path in the first directory that contains it, or None.
        """
        for directory in self.search_paths:
            candidate = directory / name
            if candidate.is_file():
                return candidate
        return None

    def resolve(self, output_path: Path | str) -> set[str]:
        """Collect the transitive non-system dependencies of a binary.

        Args:
            output_path: Build artifact to analyze.

        Returns:
            Every library required at any depth, with original casing.

        Raises:
            InspectionError: If the artifact itself cannot be inspected.
        """
        state = TraversalState()

        for name in self.inspector.inspect(output_path):
            state.discover(name)

        while state.queue:
            name = state.queue.popleft()
            if not state.mark_processed(name):
                continue

            library_path = self.locate(name)
            if library_path is None:
                # Not shipped by the toolchain; usually an OS library.
                self.reporter.warning(f"could not locate {name} in the search paths")
                continue

            try:
                transitive = self.inspector.inspect(library_path)
            except InspectionError as e:
                self.reporter.warning(f"could not analyze dependencies for {name}: {e}")
                continue

            for dependency in transitive:
                state.discover(dependency)

        return state.names

    def copy(self, names: Iterable[str], destination: Path | str) -> CopyReport:
        """Copy libraries into a directory.

        Args:
            names: Library names to copy.
            destination: Target directory.

        Returns:
            Report of copied, missing and failed libraries.

        Raises:
            CopyError: If a copy fails and fail_on_copy_error is set.
        """
        destination = Path(destination)
        report = CopyReport(destination=destination)

        for name in names:
            source = self.locate(name)
            if source is None:
                self.reporter.warning(f"could not find required DLL {name}")
                report.missing.append(name)
                continue

            target = destination / name
            try:
                shutil.copyfile(source, target)
            except OSError as e:
                if self.fail_on_copy_error:
                    raise CopyError(
                        f"failed to copy DLL {name}: {e}",
                        library=name,
                        destination=str(target),
                    ) from e
                self.reporter.warning(f"failed to copy DLL {name}: {e}")
                report.failed[name] = str(e)
                continue

            report.copied.append(target)

        return report


def resolve_and_copy(
    output_path: Path | str,
    toolchain_paths: ToolchainPaths,
    quiet: bool = False,
    skip: bool = False,
    *,
    reporter: Reporter | None = None,
    inspector: Inspector | None = None,
    fail_on_copy_error: bool = True,
) -> PostBuildResult:
    """Copy every runtime DLL a build artifact needs next to it.

    Args:
        output_path: Absolute path of the build artifact.
        toolchain_paths: Provisioned toolchain layout.
        quiet: Suppress informational messages.
        skip: Do nothing and report success.
        reporter: Receiver for progress and warnings.
        inspector: Import lister. Defaults to the toolchain's objdump.
        fail_on_copy_error: Abort on the first failed copy.

    Returns:
        PostBuildResult describing what was found and copied.

    Raises:
        InspectionError: If the artifact itself cannot be inspected.
        CopyError: If a library cannot be copied and fail_on_copy_error is set.
    """
    output_path = Path(output_path)
    reporter = reporter or LoggingReporter(quiet=quiet)

    if skip:
        reporter.info("Build successful. Skipping DLL copy due to -no-copy flag.")
        return PostBuildResult(output_path=output_path, skipped=True)

    resolver = DependencyResolver(
        inspector=inspector or DependencyInspector(toolchain_paths.objdump_path),
        search_paths=toolchain_paths.search_paths,
        reporter=reporter,
        fail_on_copy_error=fail_on_copy_error,
    )

    required = resolver.resolve(output_path)
    destination = output_path.parent
    reporter.info(f"Found {len(required)} required DLL(s). Copying to {destination}")

    report = resolver.copy(sorted(required, key=str.lower), destination)
    if report.copied_count:
        reporter.info(f"Copied {report.copied_count} DLLs.")

    result = PostBuildResult(output_path=output_path, required=required, copy=report)
    logger.debug(f"Post-build result: {result.to_dict()}")
    return result
