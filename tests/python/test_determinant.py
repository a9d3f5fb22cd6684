"""
Tests for cofactor-expansion determinant.
"""

import logging

import pytest
import numpy as np

from matrixcore import CardinalityError, identity, zeros


class TestDeterminant:
    """Test determinant()."""

    def test_two_by_two(self, make):
        """Closed form for 2x2."""
        assert make([[1.0, 2.0], [3.0, 4.0]]).determinant() == -2.0

    def test_three_by_three(self, square):
        """Cofactor expansion for 3x3."""
        assert square.determinant() == pytest.approx(6.0)

    def test_matches_numpy(self, make):
        """Agrees with numpy on a random 5x5."""
        rng = np.random.default_rng(7)
        values = rng.normal(size=(5, 5))
        assert make(values).determinant() == pytest.approx(np.linalg.det(values))

    def test_identity(self, family):
        """det(I) == 1."""
        assert identity(4, family).determinant() == pytest.approx(1.0)

    def test_singular(self, make):
        """Linearly dependent rows give zero."""
        m = make([[1.0, 2.0, 3.0], [2.0, 4.0, 6.0], [0.0, 1.0, 5.0]])
        assert m.determinant() == pytest.approx(0.0)

    def test_one_by_one(self, make):
        """A 1x1 determinant is the single cell."""
        assert make([[-3.5]]).determinant() == -3.5

    def test_empty(self, family):
        """The 0x0 determinant is 1."""
        assert zeros(0, 0, family).determinant() == 1.0

    def test_non_square(self, small):
        """Non-square matrices raise."""
        with pytest.raises(CardinalityError) as info:
            small.determinant()
        assert info.value.expected == 2
        assert info.value.actual == 3

    def test_receiver_unchanged(self, square):
        """Minors are scratch copies."""
        before = square.to_numpy()
        square.determinant()
        np.testing.assert_array_equal(square.to_numpy(), before)

    def test_view_determinant(self, square):
        """Views work like any other matrix."""
        assert square.view_part(1, 2, 1, 2).determinant() == pytest.approx(4.0)

    def test_large_order_warns(self, family, restore_config, caplog):
        """Orders above the configured threshold log a warning."""
        restore_config.determinant_warn_order = 2
        with caplog.at_level(logging.WARNING, logger="matrixcore.matrix"):
            identity(3, family).determinant()
        assert any("O(n!)" in r.getMessage() for r in caplog.records)

    def test_small_order_silent(self, family, caplog):
        """Orders at or below the threshold do not warn."""
        with caplog.at_level(logging.WARNING, logger="matrixcore.matrix"):
            identity(3, family).determinant()
        assert not caplog.records
