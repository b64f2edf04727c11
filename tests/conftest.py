"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pygauss import IntegerMatrix, RealMatrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def int_pair():
    """[[1, 2], [3, 4]] and [[5, 6], [7, 8]] as int32 matrices."""
    a = IntegerMatrix.from_array([[1, 2], [3, 4]])
    b = IntegerMatrix.from_array([[5, 6], [7, 8]])
    return a, b


@pytest.fixture
def rref_example():
    """3x4 system used throughout the row-reduction tests."""
    return RealMatrix.from_array(
        [[6.0, 2.0, 4.0, 5.0],
         [1.0, 3.0, 2.0, 5.0],
         [4.0, 8.0, 12.0, 5.0]],
        dtype=np.float64,
    )
