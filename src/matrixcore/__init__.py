"""
matrixcore - Storage-agnostic matrix algebra

A 2-D numeric matrix abstraction with:
- Bounds-checked and quick (unchecked) element access
- Label-based row/column addressing
- Live row, column, transpose and sub-matrix views
- Elementwise and matrix arithmetic written once for every backend
- Dense, sparse-by-row and sparse-by-column storage
- JSON serialization and numpy/scipy interop

Modules:
- matrix: Matrix and vector types, views, serialization, conversions
- functions: Named unary/binary functions for assign/aggregate
- error: Exception types and error codes

Architecture:
    ┌──────────────────────────────────────────────┐
    │   MatrixBase (algebra, labels, views, iter)  │
    ├──────────────────────────────────────────────┤
    │  get_quick | set_quick | like | get_row ...  │
    ├──────────────────────────────────────────────┤
    │  DenseMatrix | SparseRowMatrix | SparseColumn│
    └──────────────────────────────────────────────┘

Example:
    >>> import matrixcore as mc
    >>>
    >>> a = mc.from_dense([[1, 2], [3, 4]], format='row')
    >>> a.set_labeled('first', 'second', 0, 1, 5.0)
    >>> a.get('first', 'second')
    5.0
    >>> text = a.as_format_string()
    >>> mc.decode_matrix(text).get(0, 1)
    5.0
"""

__version__ = '0.1.0'

from . import functions
from . import matrix

from ._config import (
    RealType,
    get_config,
    set_precision,
    get_precision,
)

from .error import (
    MatrixError,
    IndexOutOfBoundsError,
    CardinalityError,
    UnboundLabelError,
    MatrixFormatError,
)

from .matrix import (
    # Core classes
    MatrixBase,
    MatrixFormat,
    MatrixSlice,
    DenseMatrix,
    SparseRowMatrix,
    SparseColumnMatrix,
    MatrixView,

    # Vectors & views
    VectorBase,
    DenseVector,
    SparseVector,
    ViewKind,
    RowView,
    ColumnView,
    TransposeView,

    # Serialization
    encode_matrix,
    decode_matrix,
    register_family,

    # Constructors & conversion
    zeros,
    identity,
    from_dense,
    from_numpy,
    to_numpy,
    from_scipy,
    to_scipy,
)

__all__ = [
    # Version
    '__version__',

    # Modules
    'functions',
    'matrix',

    # Configuration
    'RealType',
    'get_config',
    'set_precision',
    'get_precision',

    # Errors
    'MatrixError',
    'IndexOutOfBoundsError',
    'CardinalityError',
    'UnboundLabelError',
    'MatrixFormatError',

    # Core classes
    'MatrixBase',
    'MatrixFormat',
    'MatrixSlice',
    'DenseMatrix',
    'SparseRowMatrix',
    'SparseColumnMatrix',
    'MatrixView',

    # Vectors & views
    'VectorBase',
    'DenseVector',
    'SparseVector',
    'ViewKind',
    'RowView',
    'ColumnView',
    'TransposeView',

    # Serialization
    'encode_matrix',
    'decode_matrix',
    'register_family',

    # Constructors & conversion
    'zeros',
    'identity',
    'from_dense',
    'from_numpy',
    'to_numpy',
    'from_scipy',
    'to_scipy',
]
