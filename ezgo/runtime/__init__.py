"""Post-build runtime library resolution.

This module provides:
- Direct import discovery for PE binaries
- Transitive dependency resolution over the toolchain search paths
- Copying of the resolved DLLs next to the build artifact
"""

from ezgo.runtime.inspector import (
    SYSTEM_DLLS,
    DependencyInspector,
    is_system_dll,
    parse_dll_names,
)
from ezgo.runtime.output import locate_build_output, strip_no_copy
from ezgo.runtime.reporter import LoggingReporter, Reporter
from ezgo.runtime.resolver import DependencyResolver, resolve_and_copy

__all__ = [
    "SYSTEM_DLLS",
    "DependencyInspector",
    "is_system_dll",
    "parse_dll_names",
    "locate_build_output",
    "strip_no_copy",
    "Reporter",
    "LoggingReporter",
    "DependencyResolver",
    "resolve_and_copy",
]
