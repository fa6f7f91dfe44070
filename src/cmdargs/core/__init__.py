"""
Core cmdargs components.

This package provides the data model for classified arguments, the classifier
configuration and the shared type definitions.
"""

from cmdargs.core.config import DEFAULT_OPTION_PREFIX, ClassifierConfig
from cmdargs.core.models import ArgumentSet, Option, Parameter
from cmdargs.core.types import ArgumentVector, QueryResult

__all__ = [
    "ArgumentSet",
    "Option",
    "Parameter",
    "ClassifierConfig",
    "DEFAULT_OPTION_PREFIX",
    "ArgumentVector",
    "QueryResult",
]
