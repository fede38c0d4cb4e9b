"""Tests for the viewer session."""

import pytest

from sector_viewer.engine import (
    AdvanceSelectionMode,
    ColorScheme,
    ColorTarget,
    CycleColor,
    MoveCursor,
    SelectionChange,
    SelectionCursor,
    SelectionMode,
    ViewerSession,
)
from sector_viewer.errors import MissingSector
from sector_viewer.models import BlackHole, World


def walk(session, *changes):
    for change in changes:
        session.move_selection(change)


class TestConstruction:
    """Test session construction."""

    def test_initial_state(self, alpha_world):
        """Test initial cursor, mode and derived data."""
        session = ViewerSession(alpha_world)
        assert session.cursor == (1, 1)
        assert session.selection_mode == SelectionMode.MAP
        assert session.sector.name == "Alpha"
        assert session.world is alpha_world
        assert len(session.starfield) == 15
        assert session.grid.occupant_at(2, 2).name == "Sol"

    def test_missing_sector(self):
        """Test that a world without a sector cannot be viewed."""
        with pytest.raises(MissingSector):
            ViewerSession(World())

    def test_same_sector_name_same_starfield(self, make_world):
        """Test that sessions over equally named sectors share a starfield."""
        a = ViewerSession(make_world(name="Alpha", columns=6, rows=4))
        b = ViewerSession(make_world(name="Alpha", columns=6, rows=4))
        c = ViewerSession(make_world(name="Omega", columns=6, rows=4))
        assert a.starfield == b.starfield
        assert len(c.starfield) == len(a.starfield)
        assert c.starfield != a.starfield

    def test_construction_logged(self, alpha_world, caplog):
        """Test that loading a sector logs its summary."""
        with caplog.at_level("INFO", logger="sector_viewer.engine.session"):
            ViewerSession(alpha_world)
        assert "Alpha" in caplog.text
        assert "1 systems" in caplog.text


class TestCoordinates:
    """Test coordinate queries."""

    def test_system_coords(self, alpha_world):
        """Test that system coordinates come from the transform."""
        session = ViewerSession(alpha_world)
        assert session.system_coords() == [session.transform.hex_to_cartesian(2, 2)]

    def test_black_hole_coords(self, crowded_world):
        """Test black hole coordinates."""
        session = ViewerSession(crowded_world)
        assert session.black_hole_coords() == [session.transform.hex_to_cartesian(4, 1)]
        assert len(session.system_coords()) == 2

    def test_coords_stable_between_calls(self, crowded_world):
        """Test that repeated calls agree."""
        session = ViewerSession(crowded_world)
        assert session.system_coords() == session.system_coords()

    def test_selection_geometry(self, alpha_world):
        """Test selection shapes follow the cursor."""
        session = ViewerSession(alpha_world)
        walk(session, SelectionChange.RIGHT)
        assert session.selection(SelectionCursor.BLOCK) == [
            session.transform.hex_to_cartesian(2, 1)
        ]
        assert len(session.selection(SelectionCursor.HEX)) == 7


class TestSelectedSystem:
    """Test selection lookups."""

    def test_end_to_end(self, alpha_world, sol):
        """Test selecting Sol, listing its planet, then moving away."""
        session = ViewerSession(alpha_world)
        walk(session, SelectionChange.RIGHT, SelectionChange.DOWN)
        assert session.cursor == (2, 2)

        selected = session.selected_system()
        assert selected is sol
        planets = session.world.child_planets(selected)
        assert [p.name for p in planets] == ["Earth"]
        assert session.selected_planets() == planets

        walk(session, SelectionChange.LEFT, SelectionChange.UP)
        assert session.cursor == (1, 1)
        assert session.selected_system() is None
        assert session.selected_planets() == []

    def test_black_hole_selected(self, crowded_world):
        """Test that a black hole is returned as the occupant."""
        session = ViewerSession(crowded_world)
        walk(session, *[SelectionChange.RIGHT] * 3)
        occupant = session.selected_system()
        assert isinstance(occupant, BlackHole)
        assert session.selected_planets() == []


class TestCommands:
    """Test command handling."""

    def test_mode_cycle_closure(self, alpha_world):
        """Test that three advances return to MAP."""
        session = ViewerSession(alpha_world)
        for _ in range(3):
            session.handle(AdvanceSelectionMode())
        assert session.selection_mode == SelectionMode.MAP

    def test_movement_ignored_outside_map(self, alpha_world):
        """Test that movement commands are no-ops in panel modes."""
        session = ViewerSession(alpha_world)
        session.handle(AdvanceSelectionMode())
        session.handle(MoveCursor(SelectionChange.RIGHT))
        assert session.cursor == (1, 1)
        session.handle(AdvanceSelectionMode())
        session.handle(MoveCursor(SelectionChange.DOWN))
        assert session.cursor == (1, 1)
        session.handle(AdvanceSelectionMode())
        session.handle(MoveCursor(SelectionChange.DOWN))
        assert session.cursor == (1, 2)

    def test_cursor_clamped(self, alpha_world):
        """Test that the cursor stays within the grid."""
        session = ViewerSession(alpha_world)
        for _ in range(5):
            session.handle(MoveCursor(SelectionChange.RIGHT))
            session.handle(MoveCursor(SelectionChange.DOWN))
        assert session.cursor == (3, 3)
        for _ in range(5):
            session.handle(MoveCursor(SelectionChange.LEFT))
            session.handle(MoveCursor(SelectionChange.UP))
        assert session.cursor == (1, 1)

    def test_cycle_colors(self, alpha_world):
        """Test color commands for each palette slot."""
        session = ViewerSession(alpha_world, colors=ColorScheme(foreground=10, accent=20))
        session.handle(CycleColor(ColorTarget.FOREGROUND))
        assert session.colors.as_tuple() == (11, 20)
        session.handle(CycleColor(ColorTarget.ACCENT, reverse=True))
        assert session.colors.as_tuple() == (11, 19)
        session.handle(CycleColor())
        assert session.colors.as_tuple() == (12, 20)

    def test_color_wraps(self, alpha_world):
        """Test that palette indices wrap around 0-255."""
        session = ViewerSession(alpha_world, colors=ColorScheme(foreground=255, accent=0))
        session.cycle_foreground()
        session.cycle_background(reverse=True)
        assert session.colors.as_tuple() == (0, 255)

    def test_unknown_command(self, alpha_world):
        """Test that unknown commands are rejected."""
        session = ViewerSession(alpha_world)
        with pytest.raises(TypeError, match="Unsupported command"):
            session.handle("jump")

    def test_invalid_color_scheme(self):
        """Test palette index validation."""
        with pytest.raises(ValueError, match="Invalid accent color"):
            ColorScheme(foreground=1, accent=256)
