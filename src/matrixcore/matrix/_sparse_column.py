"""
Sparse Column Matrix

Column-oriented twin of SparseRowMatrix: each column is an optional vector,
``get_row`` is a TransposeView over the columns, and iteration walks
columns instead of rows.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from ..error import check_cardinality
from ._base import MatrixBase, MatrixFormat
from ._vector import SparseVector, VectorBase
from ._views import TransposeView

__all__ = ['SparseColumnMatrix']


class SparseColumnMatrix(MatrixBase):
    """
    Column-oriented sparse matrix.

    ``assign_column`` installs the given vector object itself (no copy).
    ``iterate_all`` yields one slice per column.
    """

    def __init__(self, rows: int, cols: int,
                 column_vectors: Optional[Sequence[Optional[VectorBase]]] = None):
        super().__init__(rows, cols)
        if column_vectors is None:
            self._vectors: List[Optional[VectorBase]] = [None] * self._shape[1]
        else:
            check_cardinality(self._shape[1], len(column_vectors))
            for vector in column_vectors:
                if vector is not None:
                    check_cardinality(self._shape[0], vector.size)
            self._vectors = list(column_vectors)

    @property
    def format(self) -> str:
        return MatrixFormat.COLUMN

    @property
    def allocated_columns(self) -> int:
        """Number of columns that have a backing vector."""
        return sum(1 for v in self._vectors if v is not None)

    # =========================================================================
    # Storage Primitives
    # =========================================================================

    def get_quick(self, row: int, column: int) -> float:
        vector = self._vectors[column]
        return 0.0 if vector is None else vector.get_quick(row)

    def set_quick(self, row: int, column: int, value: float) -> None:
        vector = self._vectors[column]
        if vector is None:
            if value == 0.0:
                return
            vector = SparseVector(self._shape[0])
            self._vectors[column] = vector
        vector.set_quick(row, value)

    def like(self, rows: int, cols: int) -> 'SparseColumnMatrix':
        return SparseColumnMatrix(rows, cols)

    def get_row(self, row: int) -> TransposeView:
        return TransposeView(self, row, row_to_column=False)

    def get_column(self, column: int) -> Optional[VectorBase]:
        return self._vectors[column]

    def assign_row(self, row: int, vector: VectorBase) -> 'SparseColumnMatrix':
        check_cardinality(self._shape[1], vector.size)
        for column in range(self._shape[1]):
            self.set_quick(row, column, vector.get_quick(column))
        return self

    def assign_column(self, column: int, vector: VectorBase) -> 'SparseColumnMatrix':
        check_cardinality(self._shape[0], vector.size)
        self._vectors[column] = vector
        return self

    def _clone_storage(self) -> None:
        self._vectors = [None if v is None else v.clone() for v in self._vectors]

    # =========================================================================
    # Iteration (column slices)
    # =========================================================================

    def num_slices(self) -> int:
        return self._shape[1]

    def slice(self, index: int) -> VectorBase:
        return self.view_column(index)

    def iter_nonzero(self) -> Iterator[Tuple[int, int, float]]:
        entries = []
        for column, vector in enumerate(self._vectors):
            if vector is None:
                continue
            for row, value in vector.iter_nonzero():
                entries.append((row, column, value))
        entries.sort()
        return iter(entries)
