"""
Pytest configuration and shared fixtures for fftalgos tests.
"""

import numpy as np
import pytest

from fftalgos import ENGINES, get_engine, set_engine


@pytest.fixture
def rng():
    """Seeded generator so every run sees the same signals."""
    return np.random.default_rng(1234)


@pytest.fixture(autouse=True)
def restore_engine():
    """Put the process-wide default engine back after each test."""
    previous = get_engine()
    yield
    set_engine(previous)


@pytest.fixture(params=ENGINES)
def engine(request):
    """Run the test once per butterfly engine."""
    set_engine(request.param)
    return request.param
