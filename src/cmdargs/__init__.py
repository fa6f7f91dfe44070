"""
cmdargs - Command line argument classification

cmdargs splits a raw argument vector into options, option parameters and
positional parameters, and answers presence and value queries over them.
"""

from importlib.metadata import version

from cmdargs.core import ArgumentSet, ClassifierConfig, Option, Parameter, QueryResult
from cmdargs.exceptions import (
    ArgumentSetReleasedError,
    ArgumentVectorError,
    CmdArgsError,
)
from cmdargs.parsing import ArgumentClassifier, parse, parse_args
from cmdargs.query import get_option_value, has_option, has_parameter, release

__version__ = version("cmdargs")

__all__ = [
    "__version__",
    "parse",
    "parse_args",
    "release",
    "has_option",
    "has_parameter",
    "get_option_value",
    "ArgumentClassifier",
    "ClassifierConfig",
    "ArgumentSet",
    "Option",
    "Parameter",
    "QueryResult",
    "CmdArgsError",
    "ArgumentVectorError",
    "ArgumentSetReleasedError",
]
