"""Exception definitions module."""

from ezgo.core.exceptions.errors import (
    BuildOutputError,
    ConfigurationError,
    CopyError,
    EzgoError,
    InspectionError,
    ToolchainError,
)

__all__ = [
    "EzgoError",
    "ConfigurationError",
    "ToolchainError",
    "InspectionError",
    "CopyError",
    "BuildOutputError",
]
