"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def sparse_signal_rows(rng):
    """
    60 rows, 6 explanatory columns, response driven by columns 1 and 4.

    Returned as rows with the response in the last column.
    """
    n, p = 60, 6
    X = rng.standard_normal((n, p))
    y = 3.0 * X[:, 1] - 2.0 * X[:, 4] + rng.standard_normal(n) * 0.1
    return np.column_stack([X, y])


@pytest.fixture
def small_rows(rng):
    """5 rows, 4 explanatory columns, 1 response."""
    return rng.standard_normal((5, 5))


@pytest.fixture
def duplicate_column_rows(rng):
    """
    40 rows, 4 explanatory columns where column 1 duplicates column 0.

    The response depends on columns 0 and 2 so that subsets (0, 2) and
    (1, 2) fit equally well.
    """
    n = 40
    x0 = rng.standard_normal(n)
    x2 = rng.standard_normal(n)
    x3 = rng.standard_normal(n)
    y = 1.5 * x0 - 0.5 * x2 + rng.standard_normal(n) * 0.05
    return np.column_stack([x0, x0.copy(), x2, x3, y])
