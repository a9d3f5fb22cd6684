"""
Sparse Row Matrix

Each row is an optional vector; rows that were never written are ``None``
and read as zeros. Row access is direct, column access goes through a
TransposeView over the rows.

Memory Layout:
    - _vectors[i]: SparseVector (or any installed vector) for row i, or None

Example:
    >>> m = SparseRowMatrix(1000, 50)
    >>> m.set(3, 7, 1.5)          # allocates row 3 only
    >>> m.get_row(4) is None
    True
    >>> col = m.get_column(7)     # TransposeView
    >>> col.set(4, 2.0)           # allocates row 4 through the view
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from ..error import check_cardinality
from ._base import MatrixBase, MatrixFormat
from ._vector import SparseVector, VectorBase
from ._views import TransposeView

__all__ = ['SparseRowMatrix']


class SparseRowMatrix(MatrixBase):
    """
    Row-oriented sparse matrix.

    ``assign_row`` installs the given vector object itself (no copy), so the
    caller and the matrix share it afterwards.
    """

    def __init__(self, rows: int, cols: int, row_vectors: Optional[Sequence[Optional[VectorBase]]] = None):
        """
        Args:
            rows: Number of rows
            cols: Number of columns
            row_vectors: Optional initial rows (installed, not copied); each
                entry is a vector of length ``cols`` or None

        Raises:
            CardinalityError: If ``row_vectors`` has the wrong length, or a
                row has the wrong size
        """
        super().__init__(rows, cols)
        if row_vectors is None:
            self._vectors: List[Optional[VectorBase]] = [None] * self._shape[0]
        else:
            check_cardinality(self._shape[0], len(row_vectors))
            for vector in row_vectors:
                if vector is not None:
                    check_cardinality(self._shape[1], vector.size)
            self._vectors = list(row_vectors)

    @property
    def format(self) -> str:
        return MatrixFormat.ROW

    @property
    def allocated_rows(self) -> int:
        """Number of rows that have a backing vector."""
        return sum(1 for v in self._vectors if v is not None)

    # =========================================================================
    # Storage Primitives
    # =========================================================================

    def get_quick(self, row: int, column: int) -> float:
        vector = self._vectors[row]
        return 0.0 if vector is None else vector.get_quick(column)

    def set_quick(self, row: int, column: int, value: float) -> None:
        vector = self._vectors[row]
        if vector is None:
            if value == 0.0:
                return
            vector = SparseVector(self._shape[1])
            self._vectors[row] = vector
        vector.set_quick(column, value)

    def like(self, rows: int, cols: int) -> 'SparseRowMatrix':
        return SparseRowMatrix(rows, cols)

    def get_row(self, row: int) -> Optional[VectorBase]:
        return self._vectors[row]

    def get_column(self, column: int) -> TransposeView:
        return TransposeView(self, column, row_to_column=True)

    def assign_row(self, row: int, vector: VectorBase) -> 'SparseRowMatrix':
        check_cardinality(self._shape[1], vector.size)
        self._vectors[row] = vector
        return self

    def assign_column(self, column: int, vector: VectorBase) -> 'SparseRowMatrix':
        check_cardinality(self._shape[0], vector.size)
        for row in range(self._shape[0]):
            self.set_quick(row, column, vector.get_quick(row))
        return self

    def _clone_storage(self) -> None:
        self._vectors = [None if v is None else v.clone() for v in self._vectors]

    # =========================================================================
    # Iteration
    # =========================================================================

    def iter_nonzero(self) -> Iterator[Tuple[int, int, float]]:
        for row, vector in enumerate(self._vectors):
            if vector is None:
                continue
            for column, value in vector.iter_nonzero():
                yield row, column, value
