# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""CLI-specific exception hierarchy.

Provides a structured set of exceptions for CLI error handling,
allowing for consistent error reporting and handling patterns.
"""

from .constants import ExitCode


class CLIError(Exception):
    """Base exception for all CLI-related errors.

    Attributes:
        message: Main error message
        details: Optional list of additional detail lines
        exit_code: Suggested exit code for this error type (class attribute)
    """

    exit_code: int = ExitCode.USAGE

    def __init__(self, message: str, details: list[str] | None = None):
        self.message = message
        self.details = details or []
        super().__init__(message)

    def format_for_console(self) -> str:
        """Format error message for console output."""
        lines = [f"[red]Error:[/red] {self.message}"]
        if self.details:
            lines.append("")
            for detail in self.details:
                lines.append(f"  • {detail}")
        return "\n".join(lines)


class ConfigurationError(CLIError):
    """Raised when configuration files or settings fail to load or validate."""

    exit_code = ExitCode.CONFIG


class ValidationError(CLIError):
    """Raised when a descriptor manifest fails validation."""

    exit_code = ExitCode.DATAERR


class CommandError(CLIError):
    """Raised when a CLI command fails during execution."""

    exit_code = ExitCode.SOFTWARE
