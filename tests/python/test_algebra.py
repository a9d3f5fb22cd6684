"""
Tests for assign, arithmetic, products, transpose and aggregation.
"""

import pytest
import numpy as np

from matrixcore import (
    CardinalityError,
    DenseVector,
    SparseRowMatrix,
    SparseVector,
    functions,
    identity,
    zeros,
)

from conftest import SMALL, assert_matrix_close, assert_vector_close


class TestAssign:
    """Test in-place bulk assignment."""

    def test_assign_scalar(self, small):
        """Every cell takes the scalar."""
        assert small.assign(2.5) is small
        assert_matrix_close(small, np.full((2, 3), 2.5))

    def test_assign_function(self, small):
        """A unary function maps every cell."""
        small.assign(functions.NEGATE)
        assert_matrix_close(small, -np.asarray(SMALL))

    def test_assign_matrix(self, small, make):
        """Cells are copied from a same-shape matrix."""
        other = make([[9.0, 8.0, 7.0], [6.0, 5.0, 4.0]])
        small.assign(other)
        assert_matrix_close(small, [[9.0, 8.0, 7.0], [6.0, 5.0, 4.0]])

    def test_assign_matrix_with_function(self, small, make):
        """A binary function combines corresponding cells."""
        other = make([[1.0, 1.0, 1.0], [2.0, 2.0, 2.0]])
        small.assign(other, functions.MULT)
        assert_matrix_close(small, [[1.0, 0.0, 2.0], [0.0, 6.0, 8.0]])

    def test_assign_array(self, small):
        """A 2-D list overwrites the matrix."""
        small.assign([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        assert_matrix_close(small, [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])

    def test_assign_array_wrong_rows(self, small):
        """Row count mismatch raises and writes nothing."""
        with pytest.raises(CardinalityError):
            small.assign([[1.0, 2.0, 3.0]])
        assert_matrix_close(small, SMALL)

    def test_assign_array_ragged(self, small):
        """A short row anywhere raises before anything is written."""
        with pytest.raises(CardinalityError):
            small.assign([[9.0, 9.0, 9.0], [1.0, 2.0]])
        assert_matrix_close(small, SMALL)

    def test_assign_shape_mismatch(self, small):
        """Matrices of another shape are rejected."""
        with pytest.raises(CardinalityError):
            small.assign(zeros(3, 2))

    def test_assign_function_needs_matrix(self, small):
        """A combining function requires a matrix operand."""
        with pytest.raises(TypeError):
            small.assign(1.0, functions.PLUS)


class TestArithmetic:
    """Test copy-returning arithmetic."""

    def test_plus_scalar(self, small):
        """plus(x) adds x to every cell and leaves the receiver alone."""
        result = small.plus(1.0)
        assert_matrix_close(result, np.asarray(SMALL) + 1.0)
        assert_matrix_close(small, SMALL)

    def test_plus_matrix(self, small, make):
        """plus(m) adds cellwise."""
        result = small.plus(make(SMALL))
        assert_matrix_close(result, 2 * np.asarray(SMALL))

    def test_minus_matrix(self, small, make):
        """minus(m) subtracts cellwise."""
        result = small.minus(make([[1.0, 1.0, 1.0], [1.0, 1.0, 1.0]]))
        assert_matrix_close(result, np.asarray(SMALL) - 1.0)

    def test_minus_shape_mismatch(self, small):
        """Shape mismatch raises."""
        with pytest.raises(CardinalityError):
            small.minus(zeros(2, 2))

    def test_times_scalar(self, small):
        """times(x) scales every cell."""
        assert_matrix_close(small.times(3.0), 3.0 * np.asarray(SMALL))
        assert_matrix_close(small, SMALL)

    def test_divide(self, small):
        """divide(x) divides every cell."""
        assert_matrix_close(small.divide(2.0), np.asarray(SMALL) / 2.0)

    def test_operators(self, small, make):
        """Python operators map to the named methods."""
        other = make(SMALL)
        assert_matrix_close(small + other, 2 * np.asarray(SMALL))
        assert_matrix_close(small - other, np.zeros((2, 3)))
        assert_matrix_close(small + 1.0, np.asarray(SMALL) + 1.0)
        assert_matrix_close(1.0 + small, np.asarray(SMALL) + 1.0)
        assert_matrix_close(small - 1.0, np.asarray(SMALL) - 1.0)
        assert_matrix_close(2.0 * small, 2 * np.asarray(SMALL))
        assert_matrix_close(small * 2.0, 2 * np.asarray(SMALL))
        assert_matrix_close(small / 4.0, np.asarray(SMALL) / 4.0)

    def test_result_family(self, small):
        """Results keep the receiver's family."""
        assert type(small.plus(1.0)) is type(small)
        assert type(small.times(small.transpose())) is type(small)


class TestProducts:
    """Test matrix and matrix-vector products."""

    def test_times_identity(self, small, family):
        """A . I == A."""
        result = small.times(identity(3, family))
        assert_matrix_close(result, SMALL)

    def test_times_matrix(self, small, make):
        """Product matches numpy."""
        other = make([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        expected = np.asarray(SMALL) @ np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        result = small.times(other)
        assert result.shape == (2, 2)
        assert_matrix_close(result, expected)
        assert_matrix_close(small @ other, expected)

    def test_times_inner_mismatch(self, small):
        """Inner dimensions must agree."""
        with pytest.raises(CardinalityError):
            small.times(zeros(2, 2))

    def test_times_mixed_families(self, small):
        """Operands may come from different families."""
        other = SparseRowMatrix(3, 1)
        other.set(2, 0, 1.0)
        assert_matrix_close(small.times(other), [[2.0], [4.0]])

    def test_times_vector(self, small):
        """Matrix-vector product returns a dense vector of length rows."""
        result = small.times(DenseVector([1.0, 1.0, 1.0]))
        assert isinstance(result, DenseVector)
        assert_vector_close(result, [3.0, 7.0])

    def test_times_sparse_vector(self, small):
        """Sparse operands give the same answer."""
        result = small.times(SparseVector(3, {2: 2.0}))
        assert_vector_close(result, [4.0, 8.0])

    def test_times_vector_wrong_size(self, small):
        """Vector length must equal cols."""
        with pytest.raises(CardinalityError):
            small.times(DenseVector([1.0, 1.0]))

    def test_times_vector_unallocated_rows(self):
        """Rows a sparse backend never allocated contribute zero."""
        m = SparseRowMatrix(3, 2)
        m.set(1, 0, 2.0)
        assert_vector_close(m.times(DenseVector([5.0, 1.0])), [0.0, 10.0, 0.0])

    def test_times_squared(self, small):
        """times_squared(v) == A^T (A v)."""
        v = DenseVector([1.0, 2.0, 3.0])
        a = np.asarray(SMALL)
        expected = a.T @ (a @ np.array([1.0, 2.0, 3.0]))
        result = small.times_squared(v)
        assert result.size == 3
        assert_vector_close(result, expected)

    def test_times_squared_wrong_size(self, small):
        """Vector length must equal cols."""
        with pytest.raises(CardinalityError):
            small.times_squared(DenseVector([1.0]))

    def test_times_squared_skips_empty_rows(self):
        """Unallocated rows are skipped."""
        m = SparseRowMatrix(4, 2)
        m.set(2, 1, 3.0)
        result = m.times_squared(DenseVector([1.0, 1.0]))
        assert_vector_close(result, [0.0, 9.0])

    def test_transpose(self, small):
        """Transpose swaps shape and indices."""
        t = small.transpose()
        assert t.shape == (3, 2)
        assert type(t) is type(small)
        assert_matrix_close(t, np.asarray(SMALL).T)

    def test_transpose_involution(self, small):
        """transpose(transpose(A)) == A."""
        assert_matrix_close(small.transpose().transpose(), SMALL)


class TestAggregation:
    """Test sums and reductions."""

    def test_z_sum(self, small):
        """Sum of all cells."""
        assert small.z_sum() == 10.0

    def test_aggregate_sum_of_squares(self, small):
        """aggregate(PLUS, SQUARE) is the sum of squares."""
        assert small.aggregate(functions.PLUS, functions.SQUARE) == 30.0

    def test_aggregate_max(self, small):
        """aggregate(MAX) finds the largest cell."""
        assert small.aggregate(functions.MAX) == 4.0

    def test_aggregate_two_pass_order(self, make):
        """Rows are reduced first, then the row results."""
        m = make([[8.0, 2.0], [3.0, 1.0]])
        # rows: 8-2=6 and 3-1=2, then 6-2=4
        assert m.aggregate(functions.MINUS) == 4.0

    def test_aggregate_rows(self, small):
        """aggregate_rows applies the function to each row view."""
        result = small.aggregate_rows(lambda v: v.z_sum())
        assert_vector_close(result, [3.0, 7.0])

    def test_aggregate_columns(self, small):
        """aggregate_columns applies the function to each column view."""
        result = small.aggregate_columns(lambda v: v.z_sum())
        assert_vector_close(result, [1.0, 3.0, 6.0])

    def test_aggregate_empty(self, family):
        """A matrix without rows aggregates to 0.0."""
        assert zeros(0, 3, family).aggregate(functions.PLUS) == 0.0
