"""Cursor and selection-mode state machine."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from ..utils.constants import HEX_HALF_HEIGHT
from .coordinates import HexTransform

HEX_SHORT_OFFSET = math.tan(math.pi / 6)
HEX_LONG_OFFSET = math.cos(math.pi / 6)


class SelectionMode(Enum):
    """Which part of the viewer has focus."""

    MAP = "map"  # Grid cursor
    SYSTEM = "system"  # Info panel
    OBJECTS = "objects"  # Child-planet list

    def next(self) -> "SelectionMode":
        """Return the mode that follows this one in the cycle."""
        modes = list(SelectionMode)
        return modes[(modes.index(self) + 1) % len(modes)]


class SelectionChange(Enum):
    """Cursor movement direction."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class SelectionCursor(Enum):
    """Shape requested for the selection geometry."""

    BLOCK = "block"
    HEX = "hex"


@dataclass
class SelectionState:
    """Cursor position and mode for one grid.

    The cursor is 1-based and always stays inside the grid: movement past an
    edge is ignored rather than wrapped or rejected.
    """

    columns: int
    rows: int
    cursor: Tuple[int, int] = (1, 1)
    mode: SelectionMode = SelectionMode.MAP

    def advance_mode(self) -> SelectionMode:
        """Cycle MAP -> SYSTEM -> OBJECTS -> MAP and return the new mode."""
        self.mode = self.mode.next()
        return self.mode

    def move(self, change: SelectionChange) -> Tuple[int, int]:
        """Move the cursor one cell, clamped to the grid.

        Only acts in MAP mode; in the panel modes the cursor stays put.

        Args:
            change: Direction to move

        Returns:
            The (possibly unchanged) cursor
        """
        if self.mode != SelectionMode.MAP:
            return self.cursor

        x, y = self.cursor
        if change == SelectionChange.UP and y > 1:
            y -= 1
        elif change == SelectionChange.DOWN and y < self.rows:
            y += 1
        elif change == SelectionChange.LEFT and x > 1:
            x -= 1
        elif change == SelectionChange.RIGHT and x < self.columns:
            x += 1

        self.cursor = (x, y)
        return self.cursor

    def geometry(
        self, cursor: SelectionCursor, transform: HexTransform
    ) -> List[Tuple[float, float]]:
        """Plot geometry for the current cursor.

        Args:
            cursor: BLOCK for a single point, HEX for a closed outline
            transform: Coordinate transform of the sector

        Returns:
            One point for BLOCK; for HEX a flat-top hexagon of 7 points whose
            first and last points coincide
        """
        x, y = transform.hex_to_cartesian(*self.cursor)

        if cursor == SelectionCursor.BLOCK:
            return [(x, y)]

        return [
            (x - HEX_SHORT_OFFSET, y + HEX_HALF_HEIGHT),
            (x + HEX_SHORT_OFFSET, y + HEX_HALF_HEIGHT),
            (x + HEX_LONG_OFFSET, y),
            (x + HEX_SHORT_OFFSET, y - HEX_HALF_HEIGHT),
            (x - HEX_SHORT_OFFSET, y - HEX_HALF_HEIGHT),
            (x - HEX_LONG_OFFSET, y),
            (x - HEX_SHORT_OFFSET, y + HEX_HALF_HEIGHT),
        ]
