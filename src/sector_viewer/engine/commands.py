"""Discrete viewer commands produced by the input layer."""

from dataclasses import dataclass
from enum import Enum

from .selection import SelectionChange


class ColorTarget(Enum):
    """Which palette slot a color command cycles."""

    BOTH = "both"
    FOREGROUND = "foreground"
    ACCENT = "accent"


@dataclass(frozen=True)
class AdvanceSelectionMode:
    """Cycle the selection mode."""


@dataclass(frozen=True)
class MoveCursor:
    """Move the map cursor one cell."""

    direction: SelectionChange


@dataclass(frozen=True)
class CycleColor:
    """Step one or both palette indices."""

    target: ColorTarget = ColorTarget.BOTH
    reverse: bool = False  # Step backwards through the palette


Command = AdvanceSelectionMode | MoveCursor | CycleColor
