"""Custom exception definitions for ezgo."""

from typing import Any


class EzgoError(Exception):
    """Base exception for all ezgo errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(EzgoError):
    """Exception raised for configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key or file that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)


class ToolchainError(EzgoError):
    """Exception raised when the CGO toolchain cannot be provisioned or used."""

    def __init__(
        self,
        message: str,
        env_path: str | None = None,
        package: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize toolchain error.

        Args:
            message: Error message.
            env_path: Path of the environment involved.
            package: Package being installed when the error occurred.
            details: Additional error details.
        """
        details = details or {}
        if env_path:
            details["env_path"] = env_path
        if package:
            details["package"] = package
        super().__init__(message, details)


class InspectionError(EzgoError):
    """Exception raised when a binary's imports cannot be dumped."""

    def __init__(
        self,
        message: str,
        binary_path: str | None = None,
        tool_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize inspection error.

        Args:
            message: Error message.
            binary_path: Binary that was being inspected.
            tool_path: Dependency-dump tool that was invoked.
            details: Additional error details.
        """
        details = details or {}
        if binary_path:
            details["binary_path"] = binary_path
        if tool_path:
            details["tool_path"] = tool_path
        super().__init__(message, details)


class CopyError(EzgoError):
    """Exception raised when a runtime library cannot be copied."""

    def __init__(
        self,
        message: str,
        library: str | None = None,
        destination: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize copy error.

        Args:
            message: Error message.
            library: Name of the library being copied.
            destination: Destination file path.
            details: Additional error details.
        """
        details = details or {}
        if library:
            details["library"] = library
        if destination:
            details["destination"] = destination
        super().__init__(message, details)


class BuildOutputError(EzgoError):
    """Exception raised when the build artifact path cannot be determined."""
