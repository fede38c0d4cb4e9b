"""Viewer session: the single mutable state object read by the interface."""

import logging
from typing import List, Optional, Tuple

from ..models import Planet, Sector, System, World
from .commands import AdvanceSelectionMode, ColorTarget, Command, CycleColor, MoveCursor
from .coordinates import HexTransform
from .grid import OccupancyGrid
from .palette import ColorScheme
from .selection import SelectionChange, SelectionCursor, SelectionMode, SelectionState
from .starfield import generate_starfield

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


class ViewerSession:
    """Loaded world plus everything derived from it for display.

    The grid, transform and starfield are built once at construction and
    never change. Only the selection state and color scheme are mutated,
    through the command handlers.
    """

    def __init__(self, world: World, colors: Optional[ColorScheme] = None):
        """Build a session for a world.

        Args:
            world: Fully loaded world
            colors: Initial color scheme (defaults to the standard palette)

        Raises:
            MissingSector: If the world holds no sector
        """
        sector = world.sector()

        self._world = world
        self._grid = OccupancyGrid.from_world(world)
        self._transform = HexTransform(rows=sector.rows)
        self._starfield = generate_starfield(sector)
        self._selection = SelectionState(columns=sector.columns, rows=sector.rows)
        self._colors = colors or ColorScheme()

        logger.info(
            f"Loaded sector {sector.name!r} ({sector.columns}x{sector.rows}): "
            f"{len(world.systems_by_id)} systems, {len(world.black_holes_by_id)} black holes, "
            f"{len(world.planets_by_id)} planets"
        )

    @property
    def world(self) -> World:
        return self._world

    @property
    def sector(self) -> Sector:
        return self._world.sector()

    @property
    def grid(self) -> OccupancyGrid:
        return self._grid

    @property
    def transform(self) -> HexTransform:
        return self._transform

    @property
    def starfield(self) -> Tuple[Point, ...]:
        return self._starfield

    @property
    def cursor(self) -> Tuple[int, int]:
        return self._selection.cursor

    @property
    def selection_mode(self) -> SelectionMode:
        return self._selection.mode

    @property
    def colors(self) -> ColorScheme:
        return self._colors

    def system_coords(self) -> List[Point]:
        """Plot coordinates of every system."""
        return [self._transform.hex_to_cartesian(*s.hex) for s in self._world.systems()]

    def black_hole_coords(self) -> List[Point]:
        """Plot coordinates of every black hole."""
        return [self._transform.hex_to_cartesian(*b.hex) for b in self._world.black_holes()]

    def selection(self, cursor: SelectionCursor) -> List[Point]:
        """Plot geometry of the cursor in the requested shape."""
        return self._selection.geometry(cursor, self._transform)

    def selected_system(self) -> Optional[System]:
        """Return the system or black hole under the cursor, if any."""
        x, y = self._selection.cursor
        assert self._grid.contains(x, y), f"cursor {self._selection.cursor} left the grid"
        return self._grid.occupant_at(x, y)

    def selected_planets(self) -> List[Planet]:
        """Return the child planets of the selected system (empty if none)."""
        system = self.selected_system()
        if system is None:
            return []
        return self._world.child_planets(system) or []

    def toggle_selection_mode(self) -> SelectionMode:
        mode = self._selection.advance_mode()
        logger.debug(f"Selection mode -> {mode.name}")
        return mode

    def move_selection(self, change: SelectionChange) -> Tuple[int, int]:
        cursor = self._selection.move(change)
        logger.debug(f"Cursor {change.name} -> {cursor}")
        return cursor

    def cycle_color(self, reverse: bool = False) -> None:
        self._colors.cycle_foreground(reverse)
        self._colors.cycle_accent(reverse)

    def cycle_foreground(self, reverse: bool = False) -> None:
        self._colors.cycle_foreground(reverse)

    def cycle_background(self, reverse: bool = False) -> None:
        self._colors.cycle_accent(reverse)

    def handle(self, command: Command) -> None:
        """Apply a decoded input command.

        Args:
            command: Command produced by the input layer

        Raises:
            TypeError: If the command type is not recognised
        """
        if isinstance(command, AdvanceSelectionMode):
            self.toggle_selection_mode()
        elif isinstance(command, MoveCursor):
            self.move_selection(command.direction)
        elif isinstance(command, CycleColor):
            if command.target == ColorTarget.FOREGROUND:
                self.cycle_foreground(command.reverse)
            elif command.target == ColorTarget.ACCENT:
                self.cycle_background(command.reverse)
            else:
                self.cycle_color(command.reverse)
        else:
            raise TypeError(f"Unsupported command: {command!r}")
