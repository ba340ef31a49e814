"""ezgo - a CGO-aware wrapper for the Go compiler on Windows."""

__version__ = "0.1.0"
