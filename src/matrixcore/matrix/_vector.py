"""
Vector Types

Vectors are the 1-D counterpart of the matrix hierarchy. The algebra engine
only needs a handful of primitives from them (size, unchecked get/set), so
any storage can take part: numpy-backed dense vectors, dict-backed sparse
vectors, and the views in ``_views.py`` that alias matrix cells.

Type Hierarchy:

    VectorBase (ABC)
    ├── DenseVector          # numpy 1-D array, may alias a matrix row/column
    ├── SparseVector         # dict of non-zeros
    ├── MatrixVectorView     # row/column view (see _views.py)
    └── TransposeView        # cross-axis view (see _views.py)
"""

import numbers
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple, Union

import numpy as np

from .._config import _get_real_dtype
from ..error import check_cardinality, check_index
from ..functions import BinaryFunction, UnaryFunction

__all__ = [
    'VectorBase',
    'DenseVector',
    'SparseVector',
]


def _is_scalar(value: Any) -> bool:
    """True for real numbers (Python or numpy), False for bools."""
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


class VectorBase(ABC):
    """
    Abstract base class for all vectors.

    Required (subclasses must implement):
        size: Number of elements
        get_quick(i): Unchecked read
        set_quick(i, value): Unchecked write

    Everything else (checked access, dot, aggregate, assign) is written
    against those three primitives.
    """

    # =========================================================================
    # Abstract Primitives
    # =========================================================================

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of elements."""
        ...

    @abstractmethod
    def get_quick(self, index: int) -> float:
        """Read element ``index`` without bounds checking."""
        ...

    @abstractmethod
    def set_quick(self, index: int, value: float) -> None:
        """Write element ``index`` without bounds checking."""
        ...

    # =========================================================================
    # Derived Properties
    # =========================================================================

    @property
    def is_dense(self) -> bool:
        """Whether every element is stored explicitly."""
        return True

    def like(self, size: Optional[int] = None) -> 'VectorBase':
        """Create an empty vector of the same family."""
        return DenseVector(self.size if size is None else size)

    # =========================================================================
    # Checked Access
    # =========================================================================

    def get(self, index: int) -> float:
        """Read element ``index``.

        Raises:
            IndexOutOfBoundsError: If index is outside ``[0, size)``
        """
        check_index(index, self.size)
        return self.get_quick(index)

    def set(self, index: int, value: float) -> None:
        """Write element ``index``.

        Raises:
            IndexOutOfBoundsError: If index is outside ``[0, size)``
        """
        check_index(index, self.size)
        self.set_quick(index, value)

    # =========================================================================
    # Algebra
    # =========================================================================

    def dot(self, other: 'VectorBase') -> float:
        """Inner product.

        Raises:
            CardinalityError: If sizes differ
        """
        check_cardinality(self.size, other.size)
        if not other.is_dense:
            return other.dot(self)
        result = 0.0
        for i in range(self.size):
            result += self.get_quick(i) * other.get_quick(i)
        return result

    def aggregate(self, combiner: BinaryFunction, mapper: UnaryFunction) -> float:
        """Map every element, then fold left with ``combiner``.

        The fold starts from ``mapper(v[0])``, so ``combiner`` never sees an
        artificial identity element. An empty vector aggregates to 0.0.
        """
        if self.size == 0:
            return 0.0
        result = mapper(self.get_quick(0))
        for i in range(1, self.size):
            result = combiner(result, mapper(self.get_quick(i)))
        return result

    def assign(self, value: Any, function: Optional[BinaryFunction] = None) -> 'VectorBase':
        """Overwrite elements in place.

        Args:
            value: Scalar, unary function, sequence, or another vector
            function: When given, ``value`` must be a vector and each element
                becomes ``function(self[i], value[i])``

        Returns:
            self

        Raises:
            CardinalityError: If a vector or sequence has the wrong length
        """
        n = self.size
        if function is not None:
            if not isinstance(value, VectorBase):
                raise TypeError(f"assign with a function requires a vector, got {type(value).__name__}")
            check_cardinality(n, value.size)
            for i in range(n):
                self.set_quick(i, function(self.get_quick(i), value.get_quick(i)))
        elif isinstance(value, VectorBase):
            check_cardinality(n, value.size)
            for i in range(n):
                self.set_quick(i, value.get_quick(i))
        elif callable(value):
            for i in range(n):
                self.set_quick(i, value(self.get_quick(i)))
        elif _is_scalar(value):
            for i in range(n):
                self.set_quick(i, value)
        else:
            check_cardinality(n, len(value))
            for i in range(n):
                self.set_quick(i, value[i])
        return self

    def z_sum(self) -> float:
        """Sum of all elements."""
        result = 0.0
        for i in range(self.size):
            result += self.get_quick(i)
        return result

    def iter_nonzero(self) -> Iterator[Tuple[int, float]]:
        """Yield ``(index, value)`` for every non-zero element."""
        for i in range(self.size):
            value = self.get_quick(i)
            if value != 0.0:
                yield i, value

    # =========================================================================
    # Conversion
    # =========================================================================

    def clone(self) -> 'VectorBase':
        """Detached copy. Views clone into a DenseVector."""
        result = DenseVector(self.size, dtype=np.float64)
        for i in range(self.size):
            result.set_quick(i, self.get_quick(i))
        return result

    def copy(self) -> 'VectorBase':
        """Alias for clone()."""
        return self.clone()

    def to_numpy(self) -> np.ndarray:
        """Convert to a new numpy array."""
        return np.array([self.get_quick(i) for i in range(self.size)], dtype=np.float64)

    def to_list(self) -> List[float]:
        return [self.get_quick(i) for i in range(self.size)]

    # =========================================================================
    # Magic Methods
    # =========================================================================

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[float]:
        for i in range(self.size):
            yield self.get_quick(i)

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    def __setitem__(self, index: int, value: float) -> None:
        self.set(index, value)

    def __repr__(self) -> str:
        if self.size <= 6:
            data_str = str(self.to_list())
        else:
            head = [self.get_quick(i) for i in range(3)]
            tail = [self.get_quick(i) for i in range(self.size - 3, self.size)]
            data_str = str(head + ['...'] + tail)
        return f"{self.__class__.__name__}({data_str}, size={self.size})"


class DenseVector(VectorBase):
    """
    Vector backed by a 1-D numpy array.

    A DenseVector built with ``DenseVector.wrap(array)`` shares memory with
    ``array``; DenseMatrix uses this to hand out aliasing rows and columns.

    Example:
        >>> v = DenseVector([1.0, 2.0, 3.0])
        >>> w = DenseVector(3)  # zeros
        >>> v.dot(w)
        0.0
    """

    def __init__(
        self,
        values: Union[int, List[float], np.ndarray, VectorBase],
        dtype: Optional[Union[str, np.dtype]] = None,
    ):
        """
        Args:
            values: Size (zero-filled) or initial contents (copied)
            dtype: NumPy dtype, defaults to the configured precision
        """
        if dtype is None:
            dtype = _get_real_dtype()
        if isinstance(values, numbers.Integral):
            if values < 0:
                raise ValueError(f"Vector size must be non-negative, got {values}")
            self._values = np.zeros(int(values), dtype=dtype)
            return
        if isinstance(values, VectorBase):
            values = values.to_numpy()
        arr = np.array(values, dtype=dtype)
        if arr.ndim != 1:
            raise ValueError(f"DenseVector requires 1-D data, got {arr.ndim}-D")
        self._values = arr

    @classmethod
    def wrap(cls, array: np.ndarray) -> 'DenseVector':
        """Wrap an existing 1-D array without copying (the vector aliases it)."""
        if array.ndim != 1:
            raise ValueError(f"DenseVector requires 1-D data, got {array.ndim}-D")
        vec = cls.__new__(cls)
        vec._values = array
        return vec

    @property
    def size(self) -> int:
        return self._values.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self._values.dtype

    @property
    def values(self) -> np.ndarray:
        """Underlying array (live, not a copy)."""
        return self._values

    def get_quick(self, index: int) -> float:
        return float(self._values[index])

    def set_quick(self, index: int, value: float) -> None:
        self._values[index] = value

    def clone(self) -> 'DenseVector':
        return DenseVector.wrap(self._values.copy())

    def to_numpy(self) -> np.ndarray:
        return np.array(self._values, dtype=np.float64)


class SparseVector(VectorBase):
    """
    Vector storing only its non-zero elements in a dict.

    Writing 0.0 removes the entry, so ``num_nondefault_elements`` always
    counts real non-zeros.
    """

    def __init__(self, size: int, entries: Optional[Mapping[int, float]] = None):
        if size < 0:
            raise ValueError(f"Vector size must be non-negative, got {size}")
        self._size = int(size)
        self._entries: Dict[int, float] = {}
        if entries:
            for index, value in entries.items():
                self.set(int(index), value)

    @property
    def size(self) -> int:
        return self._size

    @property
    def is_dense(self) -> bool:
        return False

    @property
    def num_nondefault_elements(self) -> int:
        return len(self._entries)

    def like(self, size: Optional[int] = None) -> 'SparseVector':
        return SparseVector(self._size if size is None else size)

    def get_quick(self, index: int) -> float:
        return self._entries.get(index, 0.0)

    def set_quick(self, index: int, value: float) -> None:
        if value == 0.0:
            self._entries.pop(index, None)
        else:
            self._entries[index] = float(value)

    def dot(self, other: VectorBase) -> float:
        check_cardinality(self._size, other.size)
        result = 0.0
        for index, value in self._entries.items():
            result += value * other.get_quick(index)
        return result

    def iter_nonzero(self) -> Iterator[Tuple[int, float]]:
        for index in sorted(self._entries):
            yield index, self._entries[index]

    def z_sum(self) -> float:
        return float(sum(self._entries.values()))

    def clone(self) -> 'SparseVector':
        result = SparseVector(self._size)
        result._entries = dict(self._entries)
        return result
