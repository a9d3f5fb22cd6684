"""
Matrix Views

Vectors that alias cells of a parent matrix instead of owning storage.
Every read and write goes back to the parent, so a mutation through a view
is visible in the matrix immediately and vice versa.

View Kinds:

    RowView        # fixed row, column varies        (stride 0, 1)
    ColumnView     # fixed column, row varies        (stride 1, 0)
    TransposeView  # element i is vector(i)[offset], vector = row or column i

A view holds a strong reference to its parent, so the parent stays alive
as long as the view does. Matrix shapes never change, so a view can never
point past the end of its parent.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Optional

from ..error import MATRIX_ERROR_INTERNAL, MatrixError
from ._vector import DenseVector, VectorBase

if TYPE_CHECKING:
    from ._base import MatrixBase

logger = logging.getLogger("matrixcore.matrix.views")

__all__ = [
    'ViewKind',
    'MatrixVectorView',
    'RowView',
    'ColumnView',
    'TransposeView',
]


class ViewKind(Enum):
    """Tag identifying which cells of the parent a view aliases."""
    ROW = 'row'
    COLUMN = 'column'
    TRANSPOSE = 'transpose'


# =============================================================================
# Strided Views
# =============================================================================

class MatrixVectorView(VectorBase):
    """
    Vector over the cells ``(row + i * row_stride, column + i * column_stride)``.

    Element access goes straight to the parent's ``get_quick`` /
    ``set_quick``; the starting cell is validated by the factory methods on
    the matrix, not here.
    """

    kind: Optional[ViewKind] = None

    def __init__(
        self,
        matrix: 'MatrixBase',
        row: int,
        column: int,
        row_stride: int,
        column_stride: int,
    ):
        if row_stride < 0 or column_stride < 0 or (row_stride == 0 and column_stride == 0):
            raise ValueError(f"Invalid view strides ({row_stride}, {column_stride})")
        self._matrix = matrix
        self._row = row
        self._column = column
        self._row_stride = row_stride
        self._column_stride = column_stride
        self._size = self._compute_size()

    def _compute_size(self) -> int:
        rows, cols = self._matrix.shape
        limits = []
        if self._row_stride > 0:
            limits.append(-(-(rows - self._row) // self._row_stride))
        if self._column_stride > 0:
            limits.append(-(-(cols - self._column) // self._column_stride))
        return max(0, min(limits))

    @property
    def matrix(self) -> 'MatrixBase':
        """Parent matrix."""
        return self._matrix

    @property
    def offset(self) -> int:
        """Fixed index on the non-varying axis."""
        return self._row if self._row_stride == 0 else self._column

    @property
    def size(self) -> int:
        return self._size

    def get_quick(self, index: int) -> float:
        return self._matrix.get_quick(
            self._row + index * self._row_stride,
            self._column + index * self._column_stride,
        )

    def set_quick(self, index: int, value: float) -> None:
        self._matrix.set_quick(
            self._row + index * self._row_stride,
            self._column + index * self._column_stride,
            value,
        )

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(offset={self.offset}, size={self._size}, "
                f"matrix={self._matrix!r})")


class RowView(MatrixVectorView):
    """Live view of one matrix row."""

    kind = ViewKind.ROW

    def __init__(self, matrix: 'MatrixBase', row: int):
        super().__init__(matrix, row, 0, 0, 1)


class ColumnView(MatrixVectorView):
    """Live view of one matrix column."""

    kind = ViewKind.COLUMN

    def __init__(self, matrix: 'MatrixBase', column: int):
        super().__init__(matrix, 0, column, 1, 0)


# =============================================================================
# Transpose View
# =============================================================================

class TransposeView(VectorBase):
    """
    Cross-axis view built from the parent's row (or column) vectors.

    With ``row_to_column=True`` the view has one element per parent row and
    element ``i`` is ``matrix.get_row(i)[offset]``, i.e. the view is column
    ``offset``. With ``row_to_column=False`` it walks the parent's columns and
    is row ``offset``.

    Sparse backends report unallocated rows/columns as ``None``. Those read
    as 0.0; writing into one allocates a fresh vector, installs it through
    ``assign_row`` / ``assign_column`` and then writes through the installed
    vector.

    Traversal is element by element. Empty rows are not skipped.
    """

    kind = ViewKind.TRANSPOSE

    def __init__(self, matrix: 'MatrixBase', offset: int, row_to_column: bool = True):
        self._matrix = matrix
        self._offset = offset
        self._row_to_column = row_to_column
        rows, cols = matrix.shape
        self._size = rows if row_to_column else cols
        self._vector_size = cols if row_to_column else rows

    @property
    def matrix(self) -> 'MatrixBase':
        return self._matrix

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def row_to_column(self) -> bool:
        return self._row_to_column

    @property
    def size(self) -> int:
        return self._size

    def _vector_at(self, index: int) -> Optional[VectorBase]:
        if self._row_to_column:
            return self._matrix.get_row(index)
        return self._matrix.get_column(index)

    def _install(self, index: int, vector: VectorBase) -> None:
        if self._row_to_column:
            self._matrix.assign_row(index, vector)
        else:
            self._matrix.assign_column(index, vector)

    def new_vector(self, size: int) -> VectorBase:
        """Vector allocated for an unallocated row/column. Override to change family."""
        return DenseVector(size)

    def get_quick(self, index: int) -> float:
        vector = self._vector_at(index)
        return 0.0 if vector is None else vector.get_quick(self._offset)

    def set_quick(self, index: int, value: float) -> None:
        vector = self._vector_at(index)
        if vector is None:
            axis = 'row' if self._row_to_column else 'column'
            logger.debug(f"Materializing {axis} {index} of {type(self._matrix).__name__} "
                         f"for transpose view write")
            self._install(index, self.new_vector(self._vector_size))
            vector = self._vector_at(index)
            if vector is None:
                raise MatrixError(
                    MATRIX_ERROR_INTERNAL,
                    f"{type(self._matrix).__name__} did not install {axis} {index}",
                )
        vector.set_quick(self._offset, value)

    def __repr__(self) -> str:
        axis = 'column' if self._row_to_column else 'row'
        return (f"TransposeView({axis}={self._offset}, size={self._size}, "
                f"matrix={self._matrix!r})")
