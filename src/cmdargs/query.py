"""
Query functions over classified arguments.

These accept a possibly missing ArgumentSet and query string and report an
invalid call as `QueryResult.ERROR` (or None for value retrieval) instead of
raising, so callers can tell a bad call apart from a valid query that found
nothing.
"""

import logging

from cmdargs.core.models import ArgumentSet
from cmdargs.core.types import QueryResult

logger = logging.getLogger(__name__)


def has_option(args: ArgumentSet | None, name: str | None) -> QueryResult:
    """
    Test whether an option is present.

    Params:
        args: Classified arguments
        name: Option name, with or without its prefix

    Returns:
        PRESENT if an option with the normalized name exists, NOT_PRESENT if
        not, ERROR if args or name is None
    """
    if args is None:
        return QueryResult.ERROR
    return args.has_option(name)


def has_parameter(args: ArgumentSet | None, value: str | None) -> QueryResult:
    """
    Test whether a positional parameter is present.

    Params:
        args: Classified arguments
        value: Parameter text, compared verbatim

    Returns:
        PRESENT, NOT_PRESENT, or ERROR if args or value is None
    """
    if args is None:
        return QueryResult.ERROR
    return args.has_parameter(value)


def get_option_value(args: ArgumentSet | None, name: str | None) -> str | None:
    """Return the parameter of the first option named `name`, or None."""
    if args is None:
        return None
    return args.get_option_value(name)


def release(args: ArgumentSet | None) -> None:
    """Release an argument set. Releasing None does nothing."""
    if args is None:
        logger.debug("release() called without an argument set")
        return
    args.release()
