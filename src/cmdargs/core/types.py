"""
Core type definitions for cmdargs.

This module contains the tri-state query result and the type aliases shared
by the classifier and the query layer.
"""

from collections.abc import Sequence
from enum import Enum

ArgumentVector = Sequence[str]


class QueryResult(Enum):
    """Outcome of a presence query against an argument set."""

    ERROR = -1  # Invalid call, e.g. a missing set or query string
    NOT_PRESENT = 0
    PRESENT = 1

    def __bool__(self) -> bool:
        return self is QueryResult.PRESENT
