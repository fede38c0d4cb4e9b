"""Utility functions and constants for the sector viewer."""

from .constants import (
    DEFAULT_ACCENT,
    DEFAULT_FOREGROUND,
    FIELD_BLEED,
    FIELD_DENSITY,
    HEX_HALF_HEIGHT,
    HORIZONTAL_OFFSET,
    MAX_GRID_EXTENT,
    MIN_GRID_EXTENT,
    PALETTE_SIZE,
    STAGGER_OFFSET,
    TIMESTAMP_FORMAT,
    VERTICAL_OFFSET,
)
from .rng import SectorRNG

__all__ = [
    "DEFAULT_ACCENT",
    "DEFAULT_FOREGROUND",
    "FIELD_BLEED",
    "FIELD_DENSITY",
    "HEX_HALF_HEIGHT",
    "HORIZONTAL_OFFSET",
    "MAX_GRID_EXTENT",
    "MIN_GRID_EXTENT",
    "PALETTE_SIZE",
    "STAGGER_OFFSET",
    "TIMESTAMP_FORMAT",
    "VERTICAL_OFFSET",
    "SectorRNG",
]
