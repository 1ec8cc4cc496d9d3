"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyvectorspace import TupleVec, ListVec


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def hetero_vec(rng):
    """Two float64 blocks of different length, tuple storage."""
    return TupleVec.of(rng.standard_normal(3), rng.standard_normal(5))


@pytest.fixture
def homo_vec(rng):
    """Three float64 blocks, list storage."""
    return ListVec.of(
        rng.standard_normal(4),
        rng.standard_normal(4),
        rng.standard_normal(2),
    )


@pytest.fixture
def complex_vec(rng):
    """Two complex128 blocks, one of them 2D."""
    return TupleVec.of(
        rng.standard_normal(3) + 1j * rng.standard_normal(3),
        rng.standard_normal((2, 2)) + 1j * rng.standard_normal((2, 2)),
    )
