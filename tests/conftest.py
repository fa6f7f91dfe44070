"""
Shared test fixtures for the cmdargs test suite.
"""

import pytest

from cmdargs import parse


@pytest.fixture
def sample_argv():
    """Argument vector mixing a positional, an option with a parameter and a bare option."""
    return ["cmd", "extra", "-f", "file.txt", "-v"]


@pytest.fixture
def sample_args(sample_argv):
    """ArgumentSet parsed from `sample_argv`, released after the test if still active."""
    args = parse(len(sample_argv), sample_argv)
    yield args
    if not args.is_released:
        args.release()
