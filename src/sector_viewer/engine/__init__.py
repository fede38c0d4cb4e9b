"""Sector state and coordinate engine."""

from .commands import AdvanceSelectionMode, ColorTarget, Command, CycleColor, MoveCursor
from .coordinates import HexTransform
from .grid import OccupancyGrid
from .palette import ColorScheme
from .selection import SelectionChange, SelectionCursor, SelectionMode, SelectionState
from .session import ViewerSession
from .starfield import generate_starfield, starfield_size

__all__ = [
    "AdvanceSelectionMode",
    "ColorTarget",
    "Command",
    "CycleColor",
    "MoveCursor",
    "HexTransform",
    "OccupancyGrid",
    "ColorScheme",
    "SelectionChange",
    "SelectionCursor",
    "SelectionMode",
    "SelectionState",
    "ViewerSession",
    "generate_starfield",
    "starfield_size",
]
