"""
Option name normalization.

Option tokens are stored and compared by their canonical name: the raw token
with every leading prefix character removed, so `-v`, `--v` and `---v` all
name the same option.
"""

from cmdargs.core.config import DEFAULT_OPTION_PREFIX


def is_option_token(token: str, prefix: str = DEFAULT_OPTION_PREFIX) -> bool:
    """Return True if the raw token is an option (starts with the prefix)."""
    return token.startswith(prefix)


def normalize_option_name(token: str, prefix: str = DEFAULT_OPTION_PREFIX) -> str:
    """
    Strip all leading prefix characters from a raw option token.

    Params:
        token: Raw token as it appeared in the argument vector
        prefix: Option prefix character

    Returns:
        The canonical option name. A token made only of prefix characters
        normalizes to an empty string.
    """
    return token.lstrip(prefix)
