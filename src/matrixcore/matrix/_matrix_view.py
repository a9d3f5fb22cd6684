"""
Matrix Views (sub-matrix windows)

MatrixView exposes a rectangular block of another matrix as a matrix in its
own right. It owns no cells: every access is translated by the block offset
and forwarded to the parent, so writes through the view land in the parent.

Created by ``MatrixBase.view_part``; not normally constructed directly.
"""

from typing import Tuple

from ..error import IndexOutOfBoundsError, check_cardinality
from ._base import MatrixBase
from ._vector import VectorBase
from ._views import ColumnView, RowView

__all__ = ['MatrixView']


class MatrixView(MatrixBase):
    """
    Live window of shape ``(rows, cols)`` starting at ``offset`` in ``matrix``.

    Cloning a MatrixView clones the parent as well, so arithmetic on a view
    never writes back into the original matrix.
    """

    def __init__(self, matrix: MatrixBase, row_offset: int, rows: int,
                 column_offset: int, cols: int):
        parent_rows, parent_cols = matrix.shape
        if row_offset < 0 or row_offset > parent_rows:
            raise IndexOutOfBoundsError(row_offset, parent_rows)
        if column_offset < 0 or column_offset > parent_cols:
            raise IndexOutOfBoundsError(column_offset, parent_cols)
        super().__init__(rows, cols)
        if row_offset + rows > parent_rows:
            raise IndexOutOfBoundsError(row_offset + rows, parent_rows)
        if column_offset + cols > parent_cols:
            raise IndexOutOfBoundsError(column_offset + cols, parent_cols)
        self._matrix = matrix
        self._offset = (row_offset, column_offset)

    @property
    def matrix(self) -> MatrixBase:
        """Parent matrix."""
        return self._matrix

    @property
    def offset(self) -> Tuple[int, int]:
        """(row_offset, column_offset) of the block inside the parent."""
        return self._offset

    @property
    def format(self) -> str:
        return self._matrix.format

    # =========================================================================
    # Storage Primitives
    # =========================================================================

    def get_quick(self, row: int, column: int) -> float:
        return self._matrix.get_quick(row + self._offset[0], column + self._offset[1])

    def set_quick(self, row: int, column: int, value: float) -> None:
        self._matrix.set_quick(row + self._offset[0], column + self._offset[1], value)

    def like(self, rows: int, cols: int) -> MatrixBase:
        return self._matrix.like(rows, cols)

    def get_row(self, row: int) -> RowView:
        return RowView(self, row)

    def get_column(self, column: int) -> ColumnView:
        return ColumnView(self, column)

    def assign_row(self, row: int, vector: VectorBase) -> 'MatrixView':
        check_cardinality(self._shape[1], vector.size)
        for column in range(self._shape[1]):
            self.set_quick(row, column, vector.get_quick(column))
        return self

    def assign_column(self, column: int, vector: VectorBase) -> 'MatrixView':
        check_cardinality(self._shape[0], vector.size)
        for row in range(self._shape[0]):
            self.set_quick(row, column, vector.get_quick(row))
        return self

    def _clone_storage(self) -> None:
        self._matrix = self._matrix.clone()

    def __repr__(self) -> str:
        return (f"MatrixView(shape={self._shape}, offset={self._offset}, "
                f"matrix={self._matrix!r})")
