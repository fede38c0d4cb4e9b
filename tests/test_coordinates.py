"""Tests for the hex <-> Cartesian coordinate transform."""

import pytest

from sector_viewer.engine import HexTransform


class TestHexToCartesian:
    """Test forward transform."""

    def test_odd_column_staggered_up(self):
        """Test that odd columns sit half a row higher."""
        transform = HexTransform(rows=3)
        assert transform.hex_to_cartesian(1, 1) == (0.5, 2.75)
        assert transform.hex_to_cartesian(3, 1) == (2.5, 2.75)

    def test_even_column(self):
        """Test even column placement."""
        transform = HexTransform(rows=3)
        assert transform.hex_to_cartesian(2, 1) == (1.5, 2.25)

    def test_rows_inverted(self):
        """Test that row 1 is plotted highest and the last row lowest."""
        transform = HexTransform(rows=10)
        _, top = transform.hex_to_cartesian(2, 1)
        _, bottom = transform.hex_to_cartesian(2, 10)
        assert top == 9.25
        assert bottom == 0.25

    def test_points_inside_plot_bounds(self):
        """Test that every cell centre lies inside [0, columns] x [0, rows]."""
        transform = HexTransform(rows=6)
        for x in range(1, 9):
            for y in range(1, 7):
                cx, cy = transform.hex_to_cartesian(x, y)
                assert 0 < cx < 8
                assert 0 < cy < 6


class TestCartesianToHex:
    """Test inverse transform."""

    @pytest.mark.parametrize("columns,rows", [(1, 1), (3, 3), (8, 10), (12, 7), (255, 255)])
    def test_round_trip(self, columns, rows):
        """Test that every valid hex survives a round trip."""
        transform = HexTransform(rows=rows)
        for x in range(1, columns + 1):
            for y in range(1, rows + 1):
                assert transform.cartesian_to_hex(*transform.hex_to_cartesian(x, y)) == (x, y)

    def test_point_within_cell(self):
        """Test that a point off-centre but inside a cell maps to that cell."""
        transform = HexTransform(rows=3)
        assert transform.cartesian_to_hex(1.6, 2.1) == (2, 1)
