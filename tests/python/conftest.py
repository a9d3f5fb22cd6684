"""
Pytest configuration and shared fixtures for matrixcore tests.
"""

import pytest
import numpy as np
from pathlib import Path
import sys

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

from matrixcore import (
    DenseMatrix,
    SparseRowMatrix,
    SparseColumnMatrix,
    MatrixFormat,
    from_dense,
    get_config,
    set_precision,
)

# Try to import scipy
try:
    import scipy.sparse as sp
    HAS_SCIPY = True
except ImportError:
    HAS_SCIPY = False


FAMILIES = [MatrixFormat.DENSE, MatrixFormat.ROW, MatrixFormat.COLUMN]

FAMILY_CLASSES = {
    MatrixFormat.DENSE: DenseMatrix,
    MatrixFormat.ROW: SparseRowMatrix,
    MatrixFormat.COLUMN: SparseColumnMatrix,
}

SMALL = [
    [1.0, 0.0, 2.0],
    [0.0, 3.0, 4.0],
]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def requires_scipy():
    """Skip test if scipy is not available."""
    if not HAS_SCIPY:
        pytest.skip("scipy not available")


@pytest.fixture(params=FAMILIES)
def family(request):
    """Storage format; every test using it runs once per backend."""
    return request.param


@pytest.fixture
def make(family):
    """Build a matrix of the current family from a 2-D list."""
    def _make(values):
        return from_dense(values, format=family)
    return _make


@pytest.fixture
def small(make):
    """2x3 matrix of the current family.

    Matrix:
    [[1, 0, 2],
     [0, 3, 4]]
    """
    return make(SMALL)


@pytest.fixture
def square(make):
    """3x3 matrix of the current family with determinant 6."""
    return make([
        [2.0, 0.0, 1.0],
        [1.0, 3.0, 2.0],
        [1.0, 1.0, 2.0],
    ])


@pytest.fixture
def restore_config():
    """Restore global configuration after a test changes it."""
    config = get_config()
    precision = config.default_real
    warn_order = config.determinant_warn_order
    yield config
    set_precision(precision)
    config.determinant_warn_order = warn_order


# =============================================================================
# Helper Functions
# =============================================================================

def assert_matrix_close(matrix, expected, rtol=1e-7, atol=1e-12):
    """Assert a matrix holds the values of a 2-D list or array."""
    expected = np.asarray(expected, dtype=np.float64)
    assert matrix.shape == expected.shape
    np.testing.assert_allclose(matrix.to_numpy(), expected, rtol=rtol, atol=atol)


def assert_vector_close(vector, expected, rtol=1e-7, atol=1e-12):
    """Assert a vector holds the values of a 1-D list or array."""
    expected = np.asarray(expected, dtype=np.float64)
    assert vector.size == expected.shape[0]
    np.testing.assert_allclose(vector.to_numpy(), expected, rtol=rtol, atol=atol)
