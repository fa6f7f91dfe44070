"""
Classifier for command line argument vectors.

This module splits a raw argument vector into options, the parameters those
options consume, and positional parameters:

    cmd -opt1 -opt2 --opt3
    cmd -opt1 value1 -opt2 value2
    cmd pos1 pos2
    cmd -opt1 value pos1 pos2

argv[0] is the program name and is never classified.
"""

import logging
import sys

from cmdargs.core.config import ClassifierConfig
from cmdargs.core.models import ArgumentSet, Option, Parameter
from cmdargs.core.normalizer import is_option_token, normalize_option_name
from cmdargs.core.types import ArgumentVector
from cmdargs.exceptions import ArgumentVectorError, ErrorContext

logger = logging.getLogger(__name__)


class ArgumentClassifier:
    """Single-pass classifier turning an argument vector into an ArgumentSet."""

    def __init__(self, config: ClassifierConfig | None = None):
        self.config = config or ClassifierConfig()

    def parse(self, argc: int, argv: ArgumentVector | None) -> ArgumentSet:
        """
        Classify an argument vector.

        Params:
            argc: Number of entries of argv to classify, program name included
            argv: Argument vector; argv[0] is the program name

        Returns:
            ArgumentSet holding options and positional parameters in order of
            appearance

        Raises:
            ArgumentVectorError: If argv is None or a bare string, argc is not
                positive, argv is shorter than argc, or an entry is not a string
        """
        self._validate_vector(argc, argv)

        prefix = self.config.option_prefix
        options: list[Option] = []
        parameters: list[Parameter] = []

        cursor = 1
        while cursor < argc:
            token = argv[cursor]

            if not is_option_token(token, prefix):
                parameters.append(Parameter(value=token))
                cursor += 1
                continue

            name = normalize_option_name(token, prefix)
            if not name:
                logger.warning(
                    "Option token %r at argument %d has an empty name", token, cursor
                )

            # Lookahead: a following non-option token is this option's parameter
            following = cursor + 1
            if following < argc and not is_option_token(argv[following], prefix):
                options.append(Option(name=name, parameter=argv[following]))
                cursor += 2
            else:
                options.append(Option(name=name))
                cursor += 1

        args = ArgumentSet(
            options=tuple(options),
            parameters=tuple(parameters),
            option_prefix=prefix,
        )
        logger.debug(
            "Classified %d arguments into %d options and %d parameters",
            argc - 1,
            args.options_count,
            args.parameters_count,
        )
        return args

    def _validate_vector(self, argc: int, argv: ArgumentVector | None) -> None:
        """Reject vectors that cannot be classified, before anything is built."""
        if argv is None:
            raise ArgumentVectorError("argv is None", ErrorContext(argc=argc))

        if isinstance(argv, str):
            raise ArgumentVectorError(
                "argv must be a sequence of strings, got a single str",
                ErrorContext(argc=argc, token=argv),
            )

        if isinstance(argc, bool) or not isinstance(argc, int):
            raise ArgumentVectorError(
                f"argc must be an int, got {type(argc).__name__}",
                ErrorContext(argc=argc),
            )

        if argc <= 0:
            raise ArgumentVectorError(
                f"argc must be positive, got {argc}", ErrorContext(argc=argc)
            )

        if argc > len(argv):
            raise ArgumentVectorError(
                f"argc is {argc} but argv holds {len(argv)} entries",
                ErrorContext(argc=argc),
            )

        for index in range(argc):
            token = argv[index]
            if not isinstance(token, str):
                raise ArgumentVectorError(
                    f"argument must be a string, got {type(token).__name__}",
                    ErrorContext(argc=argc, index=index, token=token),
                )


def parse(
    argc: int, argv: ArgumentVector | None, config: ClassifierConfig | None = None
) -> ArgumentSet:
    """
    Convenience function to classify an argument vector.

    Params:
        argc: Number of entries of argv to classify, program name included
        argv: Argument vector; argv[0] is the program name
        config: Optional classifier settings

    Returns:
        The classified ArgumentSet

    Raises:
        ArgumentVectorError: If the argument vector is invalid
    """
    classifier = ArgumentClassifier(config)
    return classifier.parse(argc, argv)


def parse_args(
    argv: ArgumentVector | None = None, config: ClassifierConfig | None = None
) -> ArgumentSet:
    """Classify argv, or the running process's sys.argv when argv is omitted."""
    if argv is None:
        argv = sys.argv
    return parse(len(argv), argv, config)
