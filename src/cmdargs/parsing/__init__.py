"""
cmdargs parsing components.

This package provides the argument vector classifier and its convenience
entry points.
"""

from cmdargs.parsing.classifier import ArgumentClassifier, parse, parse_args

__all__ = [
    "ArgumentClassifier",
    "parse",
    "parse_args",
]
