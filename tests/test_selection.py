"""Tests for the selection state machine."""

import math

import pytest

from sector_viewer.engine import (
    HexTransform,
    SelectionChange,
    SelectionCursor,
    SelectionMode,
    SelectionState,
)


class TestSelectionMode:
    """Test mode cycling."""

    def test_initial_state(self):
        """Test the initial cursor and mode."""
        state = SelectionState(columns=3, rows=3)
        assert state.cursor == (1, 1)
        assert state.mode == SelectionMode.MAP

    def test_cycle_order(self):
        """Test MAP -> SYSTEM -> OBJECTS -> MAP."""
        state = SelectionState(columns=3, rows=3)
        assert state.advance_mode() == SelectionMode.SYSTEM
        assert state.advance_mode() == SelectionMode.OBJECTS
        assert state.advance_mode() == SelectionMode.MAP

    @pytest.mark.parametrize("mode", [SelectionMode.SYSTEM, SelectionMode.OBJECTS])
    def test_movement_ignored_outside_map(self, mode):
        """Test that the cursor does not move while a panel has focus."""
        state = SelectionState(columns=3, rows=3, mode=mode)
        for change in SelectionChange:
            assert state.move(change) == (1, 1)
        assert state.cursor == (1, 1)


class TestCursorMovement:
    """Test cursor movement and clamping."""

    def test_move_each_direction(self):
        """Test single steps in every direction."""
        state = SelectionState(columns=3, rows=3, cursor=(2, 2))
        assert state.move(SelectionChange.UP) == (2, 1)
        assert state.move(SelectionChange.DOWN) == (2, 2)
        assert state.move(SelectionChange.LEFT) == (1, 2)
        assert state.move(SelectionChange.RIGHT) == (2, 2)

    def test_clamp_top_left(self):
        """Test that LEFT/UP never go below (1, 1)."""
        state = SelectionState(columns=4, rows=5)
        for _ in range(10):
            state.move(SelectionChange.LEFT)
            state.move(SelectionChange.UP)
        assert state.cursor == (1, 1)

    def test_clamp_bottom_right(self):
        """Test that RIGHT/DOWN never exceed (columns, rows)."""
        state = SelectionState(columns=4, rows=5, cursor=(4, 5))
        for _ in range(10):
            state.move(SelectionChange.RIGHT)
            state.move(SelectionChange.DOWN)
        assert state.cursor == (4, 5)

    def test_single_cell_grid(self):
        """Test that a 1x1 grid pins the cursor."""
        state = SelectionState(columns=1, rows=1)
        for change in SelectionChange:
            state.move(change)
        assert state.cursor == (1, 1)


class TestSelectionGeometry:
    """Test selection geometry."""

    def test_block(self):
        """Test that BLOCK yields the cursor's plot point."""
        transform = HexTransform(rows=3)
        state = SelectionState(columns=3, rows=3, cursor=(2, 2))
        assert state.geometry(SelectionCursor.BLOCK, transform) == [
            transform.hex_to_cartesian(2, 2)
        ]

    def test_hex_outline(self):
        """Test the closed hexagon around the cursor."""
        transform = HexTransform(rows=3)
        state = SelectionState(columns=3, rows=3, cursor=(3, 2))
        outline = state.geometry(SelectionCursor.HEX, transform)
        cx, cy = transform.hex_to_cartesian(3, 2)

        assert len(outline) == 7
        assert outline[0] == outline[6]
        for x, y in outline:
            assert math.hypot(x - cx, y - cy) <= math.cos(math.pi / 6) + 1e-9

    def test_hex_outline_shape(self):
        """Test vertex offsets of the flat-top hexagon."""
        transform = HexTransform(rows=2)
        state = SelectionState(columns=2, rows=2)
        outline = state.geometry(SelectionCursor.HEX, transform)
        cx, cy = transform.hex_to_cartesian(1, 1)

        top_left, top_right, right, _, _, left, _ = outline
        assert top_left == pytest.approx((cx - math.tan(math.pi / 6), cy + 0.4))
        assert top_right == pytest.approx((cx + math.tan(math.pi / 6), cy + 0.4))
        assert right == pytest.approx((cx + math.cos(math.pi / 6), cy))
        assert left == pytest.approx((cx - math.cos(math.pi / 6), cy))
