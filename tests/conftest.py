# tests/conftest.py
"""
Shared fixtures for the predsets test-suite.
"""

import logging

import pytest

from predsets.bounds import Bound


def is_even(i):
    return i % 2 == 0


def is_odd(i):
    return i % 2 != 0


@pytest.fixture
def small_bound():
    """A bound small enough to reason about boundary members by hand."""
    return Bound(10)


@pytest.fixture
def probe_range():
    """Integers (negatives included) used to compare sets pointwise."""
    return range(-25, 26)


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    """Drop stream handlers the CLI attaches to the ``predsets`` logger."""
    logger = logging.getLogger("predsets")
    before = list(logger.handlers)
    level = logger.level
    yield
    for handler in logger.handlers[:]:
        if handler not in before:
            logger.removeHandler(handler)
    logger.setLevel(level)
