"""Progress reporting for the post-build step."""

from typing import Protocol

from ezgo.core.logger.logger import get_logger

logger = get_logger(__name__)


class Reporter(Protocol):
    """Receives advisory messages from the dependency resolver."""

    def info(self, message: str) -> None:
        """Report progress."""

    def warning(self, message: str) -> None:
        """Report a tolerated problem."""


class LoggingReporter:
    """Reporter that forwards to the ezgo logger."""

    def __init__(self, quiet: bool = False) -> None:
        """Initialize the reporter.

        Args:
            quiet: Drop informational messages. Warnings are always logged.
        """
        self.quiet = quiet

    def info(self, message: str) -> None:
        if not self.quiet:
            logger.info(f"ezgo: {message}")

    def warning(self, message: str) -> None:
        logger.warning(f"ezgo: warning: {message}")
