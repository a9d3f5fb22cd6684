"""
Matrix Base Class

This module defines the abstract base class of the matrixcore type system.
A concrete backend supplies a small set of storage primitives; everything
else (checked access, labels, views, arithmetic, aggregation, determinant,
iteration, cloning) is implemented here once, against those primitives.

Type Hierarchy:

    MatrixBase (ABC)
    ├── DenseMatrix          # numpy 2-D array
    ├── SparseRowMatrix      # optional sparse vector per row
    ├── SparseColumnMatrix   # optional sparse vector per column
    └── MatrixView           # rectangular window onto another matrix

Storage Primitives (subclasses must implement):

    get_quick(row, col)        unchecked read
    set_quick(row, col, v)     unchecked write
    like(rows, cols)           empty matrix of the same family
    get_row(i) / get_column(i) backing vector, or None if unallocated
    assign_row(i, v)           install/write a vector as row i
    assign_column(i, v)        install/write a vector as column i
    _clone_storage()           duplicate storage after a shallow copy

Design Philosophy:

1. Backend Agnostic: the algebra never looks at storage, so dense and sparse
   matrices behave identically apart from speed.

2. Checked vs. Quick: ``get``/``set`` validate and delegate; ``get_quick``/
   ``set_quick`` trust the caller. Bulk operations validate shapes first and
   only then loop with the quick accessors.

3. Copy-then-mutate: ``plus``, ``minus``, ``times(scalar)`` and ``divide``
   clone the receiver and return the clone; ``assign`` mutates in place.

Example:

    >>> a = DenseMatrix.from_dense([[1.0, 2.0], [3.0, 4.0]])
    >>> b = a.plus(1.0)            # a is unchanged
    >>> a.view_row(0).set(1, 9.0)  # writes a[0, 1]
    >>> a.determinant()
    -14.0
"""

import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from .._config import get_config
from ..error import CardinalityError, UnboundLabelError, check_cardinality, check_index
from ..functions import IDENTITY, BinaryFunction, UnaryFunction, plus_mult
from ._labels import (
    LabelBindings,
    bind_label,
    copy_bindings,
    resolve_label,
    validate_bindings,
)
from ._slice import MatrixSlice
from ._vector import DenseVector, VectorBase, _is_scalar
from ._views import ColumnView, RowView

logger = logging.getLogger("matrixcore.matrix")

__all__ = [
    'MatrixBase',
    'MatrixFormat',
]

Index = Union[int, str]


class MatrixFormat:
    """Enumeration of storage families."""
    DENSE = 'dense'
    ROW = 'row'
    COLUMN = 'column'


class MatrixBase(ABC):
    """
    Abstract base class for all matrices.

    Shape is fixed at construction. Row and column label maps are absent
    (``None``) until the first labelled write.
    """

    def __init__(self, rows: int, cols: int):
        if rows < 0 or cols < 0:
            raise ValueError(f"Matrix dimensions must be non-negative, got ({rows}, {cols})")
        self._shape: Tuple[int, int] = (int(rows), int(cols))
        self._row_labels: Optional[LabelBindings] = None
        self._column_labels: Optional[LabelBindings] = None

    # =========================================================================
    # Abstract Primitives
    # =========================================================================

    @property
    @abstractmethod
    def format(self) -> str:
        """Storage family (one of the MatrixFormat constants)."""
        ...

    @abstractmethod
    def get_quick(self, row: int, column: int) -> float:
        """Read a cell without bounds checking."""
        ...

    @abstractmethod
    def set_quick(self, row: int, column: int, value: float) -> None:
        """Write a cell without bounds checking."""
        ...

    @abstractmethod
    def like(self, rows: int, cols: int) -> 'MatrixBase':
        """Create an empty matrix of the same family.

        Args:
            rows: Number of rows of the new matrix
            cols: Number of columns of the new matrix
        """
        ...

    @abstractmethod
    def get_row(self, row: int) -> Optional[VectorBase]:
        """Backing vector of a row, or None if the backend has not allocated it."""
        ...

    @abstractmethod
    def get_column(self, column: int) -> Optional[VectorBase]:
        """Backing vector of a column, or None if the backend has not allocated it."""
        ...

    @abstractmethod
    def assign_row(self, row: int, vector: VectorBase) -> 'MatrixBase':
        """Install ``vector`` as row ``row``.

        Raises:
            CardinalityError: If ``vector.size != cols``
        """
        ...

    @abstractmethod
    def assign_column(self, column: int, vector: VectorBase) -> 'MatrixBase':
        """Install ``vector`` as column ``column``.

        Raises:
            CardinalityError: If ``vector.size != rows``
        """
        ...

    @abstractmethod
    def _clone_storage(self) -> None:
        """Called on a shallow copy; replace shared storage with a private copy."""
        ...

    # =========================================================================
    # Derived Properties
    # =========================================================================

    @property
    def shape(self) -> Tuple[int, int]:
        """Matrix dimensions (rows, cols)."""
        return self._shape

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._shape[1]

    @property
    def ndim(self) -> int:
        return 2

    @property
    def size(self) -> int:
        """Total number of cells (rows * cols)."""
        return self._shape[0] * self._shape[1]

    # =========================================================================
    # Checked Access
    # =========================================================================

    def get(self, row: Index, column: Index) -> float:
        """Read a cell by index or by label.

        Args:
            row: Row index, or a bound row label
            column: Column index, or a bound column label

        Raises:
            IndexOutOfBoundsError: If an index is out of range
            UnboundLabelError: If labels are used but not bound
            TypeError: If a label is mixed with an index
        """
        if isinstance(row, str) or isinstance(column, str):
            row, column = self._resolve_labels(row, column)
        check_index(row, self._shape[0])
        check_index(column, self._shape[1])
        return self.get_quick(row, column)

    def set(self, row: Index, column: Index, value: float) -> None:
        """Write a cell by index or by label.

        Raises:
            IndexOutOfBoundsError: If an index is out of range
            UnboundLabelError: If labels are used but not bound
            TypeError: If a label is mixed with an index
        """
        if isinstance(row, str) or isinstance(column, str):
            row, column = self._resolve_labels(row, column)
        check_index(row, self._shape[0])
        check_index(column, self._shape[1])
        self.set_quick(row, column, value)

    def set_row(self, row: Index, data: Sequence[float]) -> None:
        """Overwrite a whole row from a sequence or vector.

        Args:
            row: Row index, or a bound row label
            data: Exactly ``cols`` values

        Raises:
            CardinalityError: If ``len(data) != cols``
            IndexOutOfBoundsError: If ``row`` is out of range
            UnboundLabelError: If ``row`` is an unbound label
        """
        if isinstance(row, str):
            row = resolve_label(self._row_labels, row)
        check_index(row, self._shape[0])
        check_cardinality(self._shape[1], len(data))
        for column in range(self._shape[1]):
            self.set_quick(row, column, data[column])

    def _resolve_labels(self, row: Index, column: Index) -> Tuple[int, int]:
        if not (isinstance(row, str) and isinstance(column, str)):
            raise TypeError("Row and column must both be labels or both be indices")
        if self._row_labels is None or self._column_labels is None:
            raise UnboundLabelError()
        return resolve_label(self._row_labels, row), resolve_label(self._column_labels, column)

    # =========================================================================
    # Label Bindings
    # =========================================================================

    @property
    def row_label_bindings(self) -> Optional[LabelBindings]:
        """Live row label map, or None if no row label was ever bound."""
        return self._row_labels

    @row_label_bindings.setter
    def row_label_bindings(self, bindings: Optional[Mapping[str, int]]) -> None:
        self._row_labels = validate_bindings(bindings, self._shape[0])

    @property
    def column_label_bindings(self) -> Optional[LabelBindings]:
        """Live column label map, or None if no column label was ever bound."""
        return self._column_labels

    @column_label_bindings.setter
    def column_label_bindings(self, bindings: Optional[Mapping[str, int]]) -> None:
        self._column_labels = validate_bindings(bindings, self._shape[1])

    def set_labeled_row(self, row_label: str, row: int, data: Sequence[float]) -> None:
        """Bind ``row_label -> row`` and overwrite that row.

        The row index and data length are validated before the label is bound.
        """
        check_index(row, self._shape[0])
        check_cardinality(self._shape[1], len(data))
        self._row_labels = bind_label(self._row_labels, row_label, row)
        for column in range(self._shape[1]):
            self.set_quick(row, column, data[column])

    def set_labeled(self, row_label: str, column_label: str, row: int, column: int, value: float) -> None:
        """Bind both labels to ``(row, column)`` and write one cell."""
        check_index(row, self._shape[0])
        check_index(column, self._shape[1])
        self._row_labels = bind_label(self._row_labels, row_label, row)
        self._column_labels = bind_label(self._column_labels, column_label, column)
        self.set_quick(row, column, value)

    # =========================================================================
    # Bulk Assignment
    # =========================================================================

    def assign(self, value: Any, function: Optional[BinaryFunction] = None) -> 'MatrixBase':
        """Overwrite every cell in place.

        Args:
            value: One of
                - scalar: every cell becomes ``value``
                - unary function: every cell becomes ``value(cell)``
                - matrix of the same shape: cells are copied
                - 2-D sequence/array with exactly ``rows`` rows of ``cols`` values
            function: With a matrix ``value``, combine cells as
                ``function(self_cell, other_cell)``

        Returns:
            self

        Raises:
            CardinalityError: On any shape mismatch (nothing is written)
        """
        rows, cols = self._shape
        if function is not None:
            if not isinstance(value, MatrixBase):
                raise TypeError(f"assign with a function requires a matrix, got {type(value).__name__}")
            self._check_same_shape(value)
            for row in range(rows):
                for col in range(cols):
                    self.set_quick(row, col, function(self.get_quick(row, col), value.get_quick(row, col)))
        elif isinstance(value, MatrixBase):
            self._check_same_shape(value)
            for row in range(rows):
                for col in range(cols):
                    self.set_quick(row, col, value.get_quick(row, col))
        elif callable(value):
            for row in range(rows):
                for col in range(cols):
                    self.set_quick(row, col, value(self.get_quick(row, col)))
        elif _is_scalar(value):
            for row in range(rows):
                for col in range(cols):
                    self.set_quick(row, col, value)
        else:
            self._assign_array(value)
        return self

    def _assign_array(self, values: Sequence[Sequence[float]]) -> None:
        rows, cols = self._shape
        if len(values) != rows:
            raise CardinalityError(rows, len(values))
        for row_values in values:
            if len(row_values) != cols:
                raise CardinalityError(cols, len(row_values))
        for row in range(rows):
            row_values = values[row]
            for col in range(cols):
                self.set_quick(row, col, row_values[col])

    def _check_same_shape(self, other: 'MatrixBase') -> None:
        rows, cols = self._shape
        other_rows, other_cols = other.shape
        if rows != other_rows:
            raise CardinalityError(rows, other_rows)
        if cols != other_cols:
            raise CardinalityError(cols, other_cols)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def plus(self, other: Union[float, 'MatrixBase']) -> 'MatrixBase':
        """Return ``self + other`` (scalar or same-shape matrix) as a new matrix."""
        if isinstance(other, MatrixBase):
            self._check_same_shape(other)
            return self.clone().assign(other, lambda a, b: a + b)
        if _is_scalar(other):
            return self.clone().assign(lambda a: a + other)
        raise TypeError(f"Cannot add {type(other).__name__} to a matrix")

    def minus(self, other: 'MatrixBase') -> 'MatrixBase':
        """Return ``self - other`` for a same-shape matrix as a new matrix."""
        if not isinstance(other, MatrixBase):
            raise TypeError(f"Cannot subtract {type(other).__name__} from a matrix")
        self._check_same_shape(other)
        return self.clone().assign(other, lambda a, b: a - b)

    def divide(self, x: float) -> 'MatrixBase':
        """Return ``self / x`` as a new matrix."""
        if not _is_scalar(x):
            raise TypeError(f"Cannot divide a matrix by {type(x).__name__}")
        return self.clone().assign(lambda a: a / x)

    def times(self, other: Union[float, 'MatrixBase', VectorBase]) -> Union['MatrixBase', DenseVector]:
        """Scalar, matrix or matrix-vector product.

        - scalar: new matrix with every cell scaled
        - matrix: naive triple-loop product, shape ``(rows, other.cols)``,
          allocated with ``self.like``
        - vector: DenseVector of length ``rows`` holding ``dot(row_i, v)``

        Raises:
            CardinalityError: If the inner dimensions differ
        """
        if isinstance(other, MatrixBase):
            return self._times_matrix(other)
        if isinstance(other, VectorBase):
            return self._times_vector(other)
        if _is_scalar(other):
            return self.clone().assign(lambda a: a * other)
        raise TypeError(f"Cannot multiply a matrix by {type(other).__name__}")

    def _times_matrix(self, other: 'MatrixBase') -> 'MatrixBase':
        rows, inner = self._shape
        other_rows, other_cols = other.shape
        if inner != other_rows:
            raise CardinalityError(inner, other_rows)
        result = self.like(rows, other_cols)
        for row in range(rows):
            for col in range(other_cols):
                total = 0.0
                for k in range(inner):
                    total += self.get_quick(row, k) * other.get_quick(k, col)
                result.set_quick(row, col, total)
        return result

    def _times_vector(self, vector: VectorBase) -> DenseVector:
        rows, cols = self._shape
        check_cardinality(cols, vector.size)
        result = DenseVector(rows)
        for row in range(rows):
            row_vector = self.get_row(row)
            result.set_quick(row, 0.0 if row_vector is None else vector.dot(row_vector))
        return result

    def times_squared(self, vector: VectorBase) -> DenseVector:
        """Compute ``transpose(A) . A . v`` without forming ``transpose(A) . A``.

        Accumulates ``row_i * dot(row_i, v)`` over all rows. Rows that are
        unallocated or whose dot product is exactly zero are skipped.

        Raises:
            CardinalityError: If ``len(vector) != cols``
        """
        if not isinstance(vector, VectorBase):
            raise TypeError(f"times_squared requires a vector, got {type(vector).__name__}")
        rows, cols = self._shape
        check_cardinality(cols, vector.size)
        result = DenseVector(cols)
        for row in range(rows):
            row_vector = self.get_row(row)
            if row_vector is None:
                continue
            d = row_vector.dot(vector)
            if d != 0.0:
                result.assign(row_vector, plus_mult(d))
        return result

    def transpose(self) -> 'MatrixBase':
        """New matrix of shape ``(cols, rows)`` with ``result[c, r] = self[r, c]``."""
        rows, cols = self._shape
        result = self.like(cols, rows)
        for row in range(rows):
            for col in range(cols):
                result.set_quick(col, row, self.get_quick(row, col))
        return result

    # =========================================================================
    # Aggregation
    # =========================================================================

    def z_sum(self) -> float:
        """Sum of all cells."""
        total = 0.0
        rows, cols = self._shape
        for row in range(rows):
            for col in range(cols):
                total += self.get_quick(row, col)
        return total

    def aggregate_rows(self, f: Callable[[VectorBase], float]) -> DenseVector:
        """Apply ``f`` to every row view; DenseVector of length ``rows``."""
        rows = self._shape[0]
        result = DenseVector(rows)
        for row in range(rows):
            result.set_quick(row, f(self.view_row(row)))
        return result

    def aggregate_columns(self, f: Callable[[VectorBase], float]) -> DenseVector:
        """Apply ``f`` to every column view; DenseVector of length ``cols``."""
        cols = self._shape[1]
        result = DenseVector(cols)
        for col in range(cols):
            result.set_quick(col, f(self.view_column(col)))
        return result

    def aggregate(self, combiner: BinaryFunction, mapper: UnaryFunction = IDENTITY) -> float:
        """Two-pass reduction over all cells.

        Each row is reduced with ``row.aggregate(combiner, mapper)``; the
        resulting per-row values are then reduced with
        ``aggregate(combiner, IDENTITY)``. For non-associative combiners the
        result depends on this exact order.

        Example:
            >>> m.aggregate(functions.PLUS, functions.SQUARE)  # sum of squares
        """
        return self.aggregate_rows(
            lambda v: v.aggregate(combiner, mapper)
        ).aggregate(combiner, IDENTITY)

    # =========================================================================
    # Determinant
    # =========================================================================

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row.

        Every level allocates a fresh dense minor, so the cost is O(n!).

        Raises:
            CardinalityError: If the matrix is not square
        """
        rows, cols = self._shape
        if rows != cols:
            raise CardinalityError(rows, cols)
        if rows > get_config().determinant_warn_order:
            logger.warning(f"Cofactor expansion of a {rows}x{cols} matrix is O(n!); "
                           f"this may take a very long time")
        return self._cofactor_determinant()

    def _cofactor_determinant(self) -> float:
        from ._dense import DenseMatrix

        n = self._shape[0]
        if n == 0:
            return 1.0
        if n == 1:
            return self.get_quick(0, 0)
        if n == 2:
            return self.get_quick(0, 0) * self.get_quick(1, 1) - self.get_quick(0, 1) * self.get_quick(1, 0)

        sign = 1
        result = 0.0
        for i in range(n):
            minor = DenseMatrix(n - 1, n - 1, dtype=np.float64)
            for j in range(1, n):
                for k in range(n):
                    if k == i:
                        continue
                    minor.set_quick(j - 1, k - 1 if k > i else k, self.get_quick(j, k))
            result += self.get_quick(0, i) * sign * minor._cofactor_determinant()
            sign = -sign
        return result

    # =========================================================================
    # Views
    # =========================================================================

    def view_row(self, row: int) -> RowView:
        """Live view of a row. Writes to the view write to this matrix."""
        check_index(row, self._shape[0])
        return RowView(self, row)

    def view_column(self, column: int) -> ColumnView:
        """Live view of a column. Writes to the view write to this matrix."""
        check_index(column, self._shape[1])
        return ColumnView(self, column)

    def view_part(self, row_offset: int, rows_requested: int,
                  column_offset: int, columns_requested: int) -> 'MatrixBase':
        """Live view of the block starting at ``(row_offset, column_offset)``.

        Raises:
            IndexOutOfBoundsError: If the block does not fit inside this matrix
        """
        from ._matrix_view import MatrixView
        return MatrixView(self, row_offset, rows_requested, column_offset, columns_requested)

    # =========================================================================
    # Iteration
    # =========================================================================

    def num_slices(self) -> int:
        """Number of slices produced by iteration (rows by default)."""
        return self._shape[0]

    def slice(self, index: int) -> VectorBase:
        """Slice ``index`` as a live view (row view by default)."""
        return self.view_row(index)

    def iterate_all(self) -> Iterator[MatrixSlice]:
        """Lazily yield ``MatrixSlice(view, index)`` for every slice, starting at 0."""
        for index in range(self.num_slices()):
            yield MatrixSlice(self.slice(index), index)

    def iter_nonzero(self) -> Iterator[Tuple[int, int, float]]:
        """Yield ``(row, column, value)`` for every non-zero cell, row-major."""
        rows, cols = self._shape
        for row in range(rows):
            for col in range(cols):
                value = self.get_quick(row, col)
                if value != 0.0:
                    yield row, col, value

    # =========================================================================
    # Cloning & Conversion
    # =========================================================================

    def clone(self) -> 'MatrixBase':
        """Copy with private storage and independent label maps."""
        result = copy.copy(self)
        result._clone_storage()
        result._row_labels = copy_bindings(self._row_labels)
        result._column_labels = copy_bindings(self._column_labels)
        return result

    def copy(self) -> 'MatrixBase':
        """Alias for clone()."""
        return self.clone()

    def to_numpy(self) -> np.ndarray:
        """Convert to a new dense float64 numpy array."""
        rows, cols = self._shape
        result = np.zeros((rows, cols), dtype=np.float64)
        for row, col, value in self.iter_nonzero():
            result[row, col] = value
        return result

    def to_list(self):
        return self.to_numpy().tolist()

    def as_format_string(self) -> str:
        """Serialize to a JSON document (see ``decode_matrix``)."""
        from ._io import encode_matrix
        return encode_matrix(self)

    @staticmethod
    def decode_matrix(text: str) -> 'MatrixBase':
        """Rebuild a matrix from ``as_format_string`` output."""
        from ._io import decode_matrix
        return decode_matrix(text)

    # =========================================================================
    # Magic Methods
    # =========================================================================

    def __getitem__(self, key: Tuple[Index, Index]) -> float:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, column) pair")
        return self.get(key[0], key[1])

    def __setitem__(self, key: Tuple[Index, Index], value: float) -> None:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix indices must be a (row, column) pair")
        self.set(key[0], key[1], value)

    def __iter__(self) -> Iterator[MatrixSlice]:
        return self.iterate_all()

    def __len__(self) -> int:
        """Return number of rows."""
        return self._shape[0]

    def __add__(self, other):
        if isinstance(other, MatrixBase) or _is_scalar(other):
            return self.plus(other)
        return NotImplemented

    def __radd__(self, other):
        if _is_scalar(other):
            return self.plus(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, MatrixBase):
            return self.minus(other)
        if _is_scalar(other):
            return self.plus(-other)
        return NotImplemented

    def __mul__(self, other):
        if _is_scalar(other):
            return self.times(other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return self.times(other)
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, (MatrixBase, VectorBase)):
            return self.times(other)
        return NotImplemented

    def __truediv__(self, other):
        if _is_scalar(other):
            return self.divide(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(shape={self._shape}, format={self.format})"

    def __str__(self) -> str:
        return self.__repr__()
