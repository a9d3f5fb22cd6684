"""
Dense Matrix

Row-major numpy storage. Rows and columns handed out by ``get_row`` /
``get_column`` are DenseVectors wrapping numpy views, so they alias the
matrix just like the views in ``_views.py`` do.

Example:
    >>> m = DenseMatrix.from_dense([[1, 2], [3, 4]])
    >>> row = m.get_row(0)
    >>> row.set(0, 10.0)
    >>> m.get(0, 0)
    10.0
"""

from typing import List, Optional, Sequence, Union

import numpy as np

from .._config import _get_real_dtype
from ..error import check_cardinality
from ._base import MatrixBase, MatrixFormat
from ._vector import DenseVector, VectorBase

__all__ = ['DenseMatrix']


def _as_array(vector: Union[VectorBase, Sequence[float]]) -> np.ndarray:
    if isinstance(vector, DenseVector):
        return vector.values
    if isinstance(vector, VectorBase):
        return vector.to_numpy()
    return np.asarray(vector, dtype=np.float64)


class DenseMatrix(MatrixBase):
    """
    Matrix backed by a 2-D numpy array.

    Attributes:
        dtype: NumPy dtype of the storage (default from configuration)
    """

    def __init__(self, rows: int, cols: int, dtype: Optional[Union[str, np.dtype]] = None):
        """
        Allocate a zero-filled matrix.

        Args:
            rows: Number of rows
            cols: Number of columns
            dtype: Storage dtype; defaults to the configured precision
        """
        super().__init__(rows, cols)
        dtype = _get_real_dtype() if dtype is None else np.dtype(dtype)
        self._values = np.zeros(self._shape, dtype=dtype)

    @classmethod
    def from_dense(
        cls,
        values: Union[List[List[float]], np.ndarray],
        dtype: Optional[Union[str, np.dtype]] = None,
    ) -> 'DenseMatrix':
        """Create from a 2-D list or array (copied).

        Raises:
            ValueError: If ``values`` is not 2-D or is ragged
        """
        try:
            arr = np.asarray(values)
            if dtype is None:
                dtype = arr.dtype if arr.dtype in (np.float32, np.float64) else _get_real_dtype()
            arr = np.array(arr, dtype=dtype)
        except ValueError as e:
            raise ValueError(f"Cannot build a dense matrix from ragged input: {e}") from e
        if arr.ndim != 2:
            raise ValueError(f"DenseMatrix requires 2-D data, got {arr.ndim}-D")
        matrix = cls(arr.shape[0], arr.shape[1], dtype=arr.dtype)
        matrix._values[...] = arr
        return matrix

    @property
    def format(self) -> str:
        return MatrixFormat.DENSE

    @property
    def dtype(self) -> np.dtype:
        return self._values.dtype

    @property
    def values(self) -> np.ndarray:
        """Underlying array (live, not a copy)."""
        return self._values

    # =========================================================================
    # Storage Primitives
    # =========================================================================

    def get_quick(self, row: int, column: int) -> float:
        return float(self._values[row, column])

    def set_quick(self, row: int, column: int, value: float) -> None:
        self._values[row, column] = value

    def like(self, rows: int, cols: int) -> 'DenseMatrix':
        return DenseMatrix(rows, cols, dtype=self._values.dtype)

    def get_row(self, row: int) -> DenseVector:
        return DenseVector.wrap(self._values[row])

    def get_column(self, column: int) -> DenseVector:
        return DenseVector.wrap(self._values[:, column])

    def assign_row(self, row: int, vector: VectorBase) -> 'DenseMatrix':
        """Copy ``vector`` into row ``row``."""
        check_cardinality(self._shape[1], len(vector))
        self._values[row, :] = _as_array(vector)
        return self

    def assign_column(self, column: int, vector: VectorBase) -> 'DenseMatrix':
        """Copy ``vector`` into column ``column``."""
        check_cardinality(self._shape[0], len(vector))
        self._values[:, column] = _as_array(vector)
        return self

    def _clone_storage(self) -> None:
        self._values = self._values.copy()

    # =========================================================================
    # Conversion
    # =========================================================================

    def to_numpy(self) -> np.ndarray:
        return np.array(self._values, dtype=np.float64)

    def __repr__(self) -> str:
        return f"DenseMatrix(shape={self._shape}, dtype={self._values.dtype})"
