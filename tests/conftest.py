"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from matrixnum import DenseMatrix, NdarrayMatrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(params=[DenseMatrix, NdarrayMatrix], ids=['dense', 'ndarray'])
def matrix_cls(request):
    """Every backend, for tests of the shared MatrixLike contract."""
    return request.param


@pytest.fixture
def square_pair(matrix_cls):
    """The 2x2 operands used by the multiplication examples."""
    a = matrix_cls.from_rows([[1.0, 2.0], [3.0, 4.0]])
    b = matrix_cls.from_rows([[2.0, 0.0], [1.0, 2.0]])
    return a, b
