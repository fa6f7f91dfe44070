"""
Exception classes for command line argument classification.

This module defines the exception types raised when an argument vector cannot
be classified or when a released argument set is used again.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Position of the offending token only
    DEVELOPER = "developer"  # Also the token itself and the declared count


@dataclass
class ErrorContext:
    """
    Context information for error messages.

    Captures where in the argument vector an error occurred. Supports
    formatting at different detail levels for user-facing vs developer
    debugging.

    Params:
        argc: Declared argument count passed to the parser
        index: Position in the argument vector of the offending token
        token: The offending token (any object, as received)
    """

    argc: int | None = None
    index: int | None = None
    token: object | None = None

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string with appropriate detail level
        """
        lines = []

        if self.index is not None:
            lines.append(f"  at argument {self.index}")

        if error_level == ErrorLevel.DEVELOPER:
            if self.token is not None:
                lines.append(f"  token: {self.token!r}")
            if self.argc is not None:
                lines.append(f"  argc: {self.argc}")

        return "\n".join(lines)


class CmdArgsError(Exception):
    """Base exception for all cmdargs errors."""

    pass


class ArgumentVectorError(CmdArgsError):
    """Raised when an argument count or vector cannot be classified."""

    def __init__(
        self,
        reason: str,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            reason: Why the argument vector was rejected
            context: ErrorContext with the position of the offending token
            error_level: Level of detail to show in error message
        """
        self.reason = reason
        self.context = context
        self.error_level = error_level

        primary_error = f"Invalid argument vector: {reason}"
        location_info = context.format_location(error_level) if context else ""
        if location_info:
            super().__init__(f"{primary_error}\n{location_info}")
        else:
            super().__init__(primary_error)


class ArgumentSetReleasedError(CmdArgsError):
    """Raised when a released argument set is queried or released again."""

    def __init__(self, operation: str):
        """
        Initialize the exception.

        Params:
            operation: Name of the operation attempted on the released set
        """
        self.operation = operation
        super().__init__(f"Cannot {operation}: argument set has been released")
