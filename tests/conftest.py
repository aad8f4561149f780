"""
pytest configuration and shared fixtures.
"""

import logging

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def vandermonde_system():
    """Augmented system [A | b] with unique solution (7, 6, -1)."""
    grid = [
        [1, 1, 1, 12],
        [1, 2, 4, 15],
        [1, 3, 9, 16],
    ]
    expected_rref = [
        [1, 0, 0, 7],
        [0, 1, 0, 6],
        [0, 0, 1, -1],
    ]
    return grid, expected_rref


@pytest.fixture
def mixed_pivots_grid():
    """8x5 grid with shuffled pivots, a zero row and dependent rows."""
    return [
        [0, 0, 3, 0, 10],
        [2, 4, 0, 6, 9],
        [0, 0, 3, 5, 8],
        [0, 0, 0, 0, 0],
        [0, 3, 6, 9, 7],
        [0, 0, 0, 0, 1],
        [0, 1, 1, 0, 5],
        [0, 0, 0, 5, 3],
    ]


@pytest.fixture
def reset_package_logger():
    """Drop handlers that setup_logging() attached during a test."""
    yield
    logger = logging.getLogger("pyechelon")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
