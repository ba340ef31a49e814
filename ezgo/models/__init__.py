"""Data models module."""

from ezgo.models.project import ProjectConfig
from ezgo.models.runtime import CopyReport, PostBuildResult, TraversalState
from ezgo.models.toolchain import ToolchainPaths

__all__ = [
    "ProjectConfig",
    "ToolchainPaths",
    "TraversalState",
    "CopyReport",
    "PostBuildResult",
]
