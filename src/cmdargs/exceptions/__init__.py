"""
cmdargs exception classes.

This package provides all exception types raised by the argument classifier
and the argument set lifecycle.
"""

from cmdargs.exceptions.core import (
    ArgumentSetReleasedError,
    ArgumentVectorError,
    CmdArgsError,
    ErrorContext,
    ErrorLevel,
)

__all__ = [
    "CmdArgsError",
    "ArgumentVectorError",
    "ArgumentSetReleasedError",
    "ErrorContext",
    "ErrorLevel",
]
