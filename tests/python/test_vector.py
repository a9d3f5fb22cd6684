"""
Tests for DenseVector and SparseVector.
"""

import pytest
import numpy as np

from matrixcore import (
    CardinalityError,
    DenseVector,
    IndexOutOfBoundsError,
    SparseVector,
    functions,
)


class TestDenseVector:
    """Test DenseVector."""

    def test_create_zeros(self):
        """An int argument gives a zero vector."""
        v = DenseVector(4)
        assert v.size == 4
        assert len(v) == 4
        assert v.to_list() == [0.0] * 4

    def test_create_from_list(self):
        """Values are copied."""
        source = np.array([1.0, 2.0])
        v = DenseVector(source)
        source[0] = 9.0
        assert v.get(0) == 1.0

    def test_wrap_aliases(self):
        """wrap() shares memory."""
        source = np.zeros(3)
        v = DenseVector.wrap(source)
        v.set(2, 4.0)
        assert source[2] == 4.0

    def test_not_1d(self):
        """2-D data is rejected."""
        with pytest.raises(ValueError):
            DenseVector([[1.0], [2.0]])

    def test_bounds(self):
        """Checked access rejects out-of-range and negative indices."""
        v = DenseVector(2)
        with pytest.raises(IndexOutOfBoundsError):
            v.get(2)
        with pytest.raises(IndexOutOfBoundsError):
            v[-1] = 1.0

    def test_dot(self):
        """Inner product."""
        assert DenseVector([1.0, 2.0, 3.0]).dot(DenseVector([4.0, 5.0, 6.0])) == 32.0

    def test_dot_mismatch(self):
        """Sizes must agree."""
        with pytest.raises(CardinalityError):
            DenseVector(2).dot(DenseVector(3))

    def test_assign_forms(self):
        """assign accepts scalar, function, sequence and vector."""
        v = DenseVector(3)
        v.assign(2.0)
        assert v.to_list() == [2.0, 2.0, 2.0]
        v.assign(functions.SQUARE)
        assert v.to_list() == [4.0, 4.0, 4.0]
        v.assign([1.0, 2.0, 3.0])
        assert v.to_list() == [1.0, 2.0, 3.0]
        v.assign(DenseVector([1.0, 1.0, 1.0]), functions.PLUS)
        assert v.to_list() == [2.0, 3.0, 4.0]
        with pytest.raises(CardinalityError):
            v.assign([1.0])

    def test_aggregate(self):
        """Map then fold left."""
        v = DenseVector([1.0, -2.0, 3.0])
        assert v.aggregate(functions.PLUS, functions.ABS) == 6.0
        assert v.aggregate(functions.MIN, functions.IDENTITY) == -2.0

    def test_aggregate_empty(self):
        """An empty vector aggregates to zero."""
        assert DenseVector(0).aggregate(functions.PLUS, functions.IDENTITY) == 0.0

    def test_clone(self):
        """clone() detaches."""
        v = DenseVector([1.0, 2.0])
        c = v.clone()
        c.set(0, 5.0)
        assert v.get(0) == 1.0


class TestSparseVector:
    """Test SparseVector."""

    def test_defaults(self):
        """Unset entries read as zero."""
        v = SparseVector(5, {3: 2.0})
        assert v.to_list() == [0.0, 0.0, 0.0, 2.0, 0.0]
        assert not v.is_dense
        assert v.num_nondefault_elements == 1

    def test_zero_write_removes(self):
        """Writing zero drops the entry."""
        v = SparseVector(3, {0: 1.0})
        v.set(0, 0.0)
        assert v.num_nondefault_elements == 0

    def test_bounds(self):
        """Initial entries and writes are bounds-checked."""
        with pytest.raises(IndexOutOfBoundsError):
            SparseVector(2, {2: 1.0})
        with pytest.raises(IndexOutOfBoundsError):
            SparseVector(2).set(-1, 1.0)

    def test_dot_mixed(self):
        """Sparse and dense operands give the same inner product."""
        s = SparseVector(3, {0: 2.0, 2: 1.0})
        d = DenseVector([1.0, 5.0, 3.0])
        assert s.dot(d) == 5.0
        assert d.dot(s) == 5.0

    def test_iter_nonzero_sorted(self):
        """Non-zeros come out in index order."""
        v = SparseVector(10)
        v.set(7, 1.0)
        v.set(2, 3.0)
        assert list(v.iter_nonzero()) == [(2, 3.0), (7, 1.0)]

    def test_z_sum(self):
        """Sum of stored entries."""
        assert SparseVector(4, {1: 1.5, 3: 2.5}).z_sum() == 4.0

    def test_like_and_clone(self):
        """like() is an empty sparse vector; clone() copies entries."""
        v = SparseVector(3, {1: 1.0})
        assert isinstance(v.like(), SparseVector)
        assert v.like().num_nondefault_elements == 0
        c = v.clone()
        c.set(1, 2.0)
        assert v.get(1) == 1.0
