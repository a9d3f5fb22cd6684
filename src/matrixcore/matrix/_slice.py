"""Slice record produced by matrix iteration."""

from typing import NamedTuple

from ._vector import VectorBase

__all__ = ['MatrixSlice']


class MatrixSlice(NamedTuple):
    """One row (or column) of a matrix paired with its index.

    ``vector`` is a live view: writing to it writes to the matrix.

    Example:
        >>> for vector, index in matrix.iterate_all():
        ...     vector.assign(float(index))
    """
    vector: VectorBase
    index: int
