"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pynumerics.linalg import SquareMatrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def parabola():
    """x^2 - 3x + 1, roots (3 -+ sqrt(5)) / 2."""
    return lambda x: x * x - 3.0 * x + 1.0


@pytest.fixture
def inverse_pair():
    """Integer matrix with determinant 1 and its exact inverse."""
    m = SquareMatrix.from_rows([[1, -1, 0], [1, 0, -1], [2, 3, -4]])
    inv = SquareMatrix.from_rows([[3, -4, 1], [2, -4, 1], [3, -5, 1]])
    return m, inv


@pytest.fixture
def singular_matrix():
    """3x3 matrix of rank 2."""
    return SquareMatrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
