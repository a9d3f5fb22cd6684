"""matrixcore Matrix Module.

This module provides the matrix and vector types: one abstract base that
implements the whole algebra once, and several storage families that only
supply a handful of primitives.

Type Hierarchy:

    MatrixBase (ABC)
    ├── DenseMatrix           # numpy 2-D array
    ├── SparseRowMatrix       # optional sparse vector per row
    ├── SparseColumnMatrix    # optional sparse vector per column
    └── MatrixView            # rectangular window (from view_part)

    VectorBase (ABC)
    ├── DenseVector
    ├── SparseVector
    ├── MatrixVectorView      # RowView, ColumnView
    └── TransposeView

Quick Start:
    >>> from matrixcore.matrix import DenseMatrix, identity
    >>>
    >>> a = DenseMatrix.from_dense([[2.0, 1.0], [1.0, 3.0]])
    >>> a.times(identity(2)).to_list()
    [[2.0, 1.0], [1.0, 3.0]]
    >>> a.determinant()
    5.0
    >>> for row, index in a:          # live row views
    ...     row.assign(float(index))
"""

# =============================================================================
# Vectors
# =============================================================================
from ._vector import (
    VectorBase,
    DenseVector,
    SparseVector,
)

from ._views import (
    ViewKind,
    MatrixVectorView,
    RowView,
    ColumnView,
    TransposeView,
)

# =============================================================================
# Matrices
# =============================================================================
from ._base import (
    MatrixBase,
    MatrixFormat,
)

from ._slice import MatrixSlice

from ._dense import DenseMatrix
from ._sparse_row import SparseRowMatrix
from ._sparse_column import SparseColumnMatrix
from ._matrix_view import MatrixView

# =============================================================================
# Serialization & Operations
# =============================================================================
from ._io import (
    encode_matrix,
    decode_matrix,
    register_family,
)

from ._ops import (
    zeros,
    identity,
    from_dense,
    from_numpy,
    to_numpy,
    from_scipy,
    to_scipy,
)


__all__ = [
    # ---- Vectors ----
    'VectorBase',
    'DenseVector',
    'SparseVector',

    # ---- Views ----
    'ViewKind',
    'MatrixVectorView',
    'RowView',
    'ColumnView',
    'TransposeView',

    # ---- Matrices ----
    'MatrixBase',
    'MatrixFormat',
    'MatrixSlice',
    'DenseMatrix',
    'SparseRowMatrix',
    'SparseColumnMatrix',
    'MatrixView',

    # ---- Serialization ----
    'encode_matrix',
    'decode_matrix',
    'register_family',

    # ---- Constructors & Conversion ----
    'zeros',
    'identity',
    'from_dense',
    'from_numpy',
    'to_numpy',
    'from_scipy',
    'to_scipy',
]
