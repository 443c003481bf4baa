"""
Exception types used across macsetup.

The CLI catches MacSetupError to turn expected failures into a short
message and a non-zero exit status.
"""

from __future__ import annotations


class MacSetupError(Exception):
    """Base class for all macsetup specific errors."""


class ConfigError(MacSetupError):
    """Raised when the configuration file is missing, unreadable, or malformed."""


class CommandError(MacSetupError):
    """Raised when an external command exits with a failure status."""

    def __init__(self, message: str, returncode: int | None = None, output: str = "") -> None:
        if output.strip():
            message = f"{message}\n{output.rstrip()}"
        super().__init__(message)
        self.returncode = returncode
        self.output = output


class DotfileError(MacSetupError):
    """Raised when a dotfile cannot be written to its destination."""
