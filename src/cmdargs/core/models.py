"""
Data model for classified command line arguments.

An `ArgumentSet` is the immutable result of classifying one argument vector.
It owns its `Option` and `Parameter` entries and answers presence and value
queries over them until it is released.
"""

import logging

from pydantic import BaseModel, ConfigDict, PrivateAttr

from cmdargs.core.config import DEFAULT_OPTION_PREFIX
from cmdargs.core.normalizer import normalize_option_name
from cmdargs.core.types import QueryResult
from cmdargs.exceptions import ArgumentSetReleasedError

logger = logging.getLogger(__name__)


class Option(BaseModel):
    """A flag token and the parameter it consumed, if any."""

    model_config = ConfigDict(frozen=True)

    name: str  # Canonical name, prefix stripped; empty for dash-only tokens
    parameter: str | None = None

    @property
    def has_parameter(self) -> bool:
        return self.parameter is not None


class Parameter(BaseModel):
    """A positional token, stored verbatim."""

    model_config = ConfigDict(frozen=True)

    value: str


class ArgumentSet(BaseModel):
    """
    Options and positional parameters of one argument vector.

    Both collections keep the order in which tokens appeared. Option names are
    not required to be unique; every lookup resolves to the first match.

    The set supports the context manager protocol so that it is released on
    every exit path:

        with parse(len(sys.argv), sys.argv) as args:
            verbose = args.has_option("verbose")

    A released set must not be queried or released again; doing so raises
    `ArgumentSetReleasedError`.
    """

    model_config = ConfigDict(frozen=True)

    options: tuple[Option, ...] = ()
    parameters: tuple[Parameter, ...] = ()
    option_prefix: str = DEFAULT_OPTION_PREFIX

    _released: bool = PrivateAttr(default=False)

    @property
    def options_count(self) -> int:
        return len(self.options)

    @property
    def parameters_count(self) -> int:
        return len(self.parameters)

    @property
    def consumed_tokens(self) -> int:
        """Number of argument vector entries (after argv[0]) this set accounts for."""
        consumed_parameters = sum(1 for option in self.options if option.has_parameter)
        return len(self.options) + len(self.parameters) + consumed_parameters

    @property
    def is_released(self) -> bool:
        return self._released

    def get_option(self, name: str | None) -> Option | None:
        """
        Find the first option matching a name.

        Params:
            name: Option name, with or without its prefix

        Returns:
            The first matching Option, or None if name is None or no option matches
        """
        self._ensure_active("query options")
        if name is None:
            return None

        wanted = normalize_option_name(name, self.option_prefix)
        for option in self.options:
            if option.name == wanted:
                return option
        return None

    def has_option(self, name: str | None) -> QueryResult:
        """Test whether an option is present. The name is normalized first."""
        self._ensure_active("query options")
        if name is None:
            return QueryResult.ERROR
        if self.get_option(name) is not None:
            return QueryResult.PRESENT
        return QueryResult.NOT_PRESENT

    def has_parameter(self, value: str | None) -> QueryResult:
        """Test whether a positional parameter is present. The value is compared verbatim."""
        self._ensure_active("query parameters")
        if value is None:
            return QueryResult.ERROR

        for parameter in self.parameters:
            if parameter.value == value:
                return QueryResult.PRESENT
        return QueryResult.NOT_PRESENT

    def get_option_value(self, name: str | None) -> str | None:
        """
        Get the parameter attached to an option.

        Params:
            name: Option name, with or without its prefix

        Returns:
            Parameter of the first matching option, or None if the option is
            missing or has no parameter
        """
        self._ensure_active("query options")
        if name is None:
            return None

        option = self.get_option(name)
        if option is None:
            return None
        return option.parameter

    def release(self) -> None:
        """Release the set. It must not be used afterwards."""
        self._ensure_active("release")
        self._released = True
        logger.debug(
            "Released argument set with %d options and %d parameters",
            self.options_count,
            self.parameters_count,
        )

    def _ensure_active(self, operation: str) -> None:
        if self._released:
            raise ArgumentSetReleasedError(operation)

    def __enter__(self) -> "ArgumentSet":
        self._ensure_active("enter context")
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        if not self._released:
            self.release()
