"""Shared test fixtures."""

import pytest

from pyepoch import MAX_VALUE_INT, MIN_VALUE_INT


@pytest.fixture
def max_ms():
    """Largest millisecond value that still narrows successfully."""
    return MAX_VALUE_INT * 1000 + 999


@pytest.fixture
def min_ms():
    """Smallest millisecond value that still narrows successfully."""
    return MIN_VALUE_INT * 1000 - 999
