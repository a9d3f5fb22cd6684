"""High-Level Matrix Constructors and Conversions.

This module provides functional entry points:
- Constructors (zeros, identity, from_dense)
- Cross-platform conversions (numpy, scipy)

Formats are the MatrixFormat constants: 'dense' (DenseMatrix),
'row' (SparseRowMatrix) and 'column' (SparseColumnMatrix).

Example:
    >>> from matrixcore.matrix import from_numpy, to_scipy
    >>>
    >>> m = from_numpy(np.eye(3), format='row')
    >>> csr = to_scipy(m)
"""

from typing import TYPE_CHECKING, List, Type, Union

import numpy as np

from ._base import MatrixBase, MatrixFormat
from ._dense import DenseMatrix
from ._sparse_column import SparseColumnMatrix
from ._sparse_row import SparseRowMatrix

if TYPE_CHECKING:
    from scipy.sparse import spmatrix

__all__ = [
    # Constructors
    'zeros',
    'identity',
    'from_dense',

    # Cross-platform
    'from_numpy',
    'to_numpy',
    'from_scipy',
    'to_scipy',
]

_FORMAT_CLASSES = {
    MatrixFormat.DENSE: DenseMatrix,
    MatrixFormat.ROW: SparseRowMatrix,
    MatrixFormat.COLUMN: SparseColumnMatrix,
}


def _family_for(format: str) -> Type[MatrixBase]:
    try:
        return _FORMAT_CLASSES[format]
    except KeyError:
        raise ValueError(f"Unknown matrix format: {format!r}. "
                         f"Supported: {list(_FORMAT_CLASSES.keys())}") from None


# =============================================================================
# Constructors
# =============================================================================

def zeros(rows: int, cols: int, format: str = MatrixFormat.DENSE) -> MatrixBase:
    """Create an all-zero matrix of the given format."""
    return _family_for(format)(rows, cols)


def identity(n: int, format: str = MatrixFormat.DENSE) -> MatrixBase:
    """Create an ``n x n`` identity matrix of the given format."""
    matrix = zeros(n, n, format)
    for i in range(n):
        matrix.set_quick(i, i, 1.0)
    return matrix


def from_dense(values: Union[List[List[float]], np.ndarray],
               format: str = MatrixFormat.DENSE) -> MatrixBase:
    """Create a matrix from a 2-D list or array.

    Raises:
        ValueError: If ``values`` is not rectangular 2-D data
    """
    return from_numpy(values, format)


# =============================================================================
# Cross-platform Conversions
# =============================================================================

def from_numpy(array: Union[np.ndarray, List[List[float]]],
               format: str = MatrixFormat.DENSE) -> MatrixBase:
    """Create a matrix from a 2-D numpy array (values are copied).

    Args:
        array: 2-D array-like
        format: 'dense', 'row' or 'column'
    """
    family = _family_for(format)
    if family is DenseMatrix:
        return DenseMatrix.from_dense(array)

    try:
        arr = np.asarray(array, dtype=np.float64)
    except ValueError as e:
        raise ValueError(f"Cannot build a matrix from ragged input: {e}") from e
    if arr.ndim != 2:
        raise ValueError(f"Expected 2-D data, got {arr.ndim}-D")
    matrix = family(arr.shape[0], arr.shape[1])
    for row, col in zip(*np.nonzero(arr)):
        matrix.set_quick(int(row), int(col), float(arr[row, col]))
    return matrix


def to_numpy(matrix: MatrixBase) -> np.ndarray:
    """Convert any matrix to a dense float64 numpy array."""
    return matrix.to_numpy()


def from_scipy(mat: 'spmatrix') -> MatrixBase:
    """Create a sparse matrix from a scipy sparse matrix or array.

    CSC input becomes a SparseColumnMatrix; every other scipy format becomes
    a SparseRowMatrix. Duplicate entries are summed.
    """
    import scipy.sparse as sp

    if not sp.issparse(mat):
        raise TypeError(f"Expected a scipy sparse matrix, got {type(mat).__name__}")

    family = SparseColumnMatrix if mat.format == 'csc' else SparseRowMatrix
    coo = sp.coo_matrix(mat)
    coo.sum_duplicates()
    result = family(coo.shape[0], coo.shape[1])
    for row, col, value in zip(coo.row, coo.col, coo.data):
        if value != 0:
            result.set_quick(int(row), int(col), float(value))
    return result


def to_scipy(matrix: MatrixBase) -> 'spmatrix':
    """Convert to scipy sparse.

    Returns:
        scipy.sparse.csc_matrix for column matrices, csr_matrix otherwise
    """
    import scipy.sparse as sp

    rows, cols, data = [], [], []
    for row, col, value in matrix.iter_nonzero():
        rows.append(row)
        cols.append(col)
        data.append(value)
    coo = sp.coo_matrix(
        (np.asarray(data, dtype=np.float64),
         (np.asarray(rows, dtype=np.int64), np.asarray(cols, dtype=np.int64))),
        shape=matrix.shape,
    )
    if matrix.format == MatrixFormat.COLUMN:
        return coo.tocsc()
    return coo.tocsr()
