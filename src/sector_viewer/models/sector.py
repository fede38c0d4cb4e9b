"""Sector data model."""

from dataclasses import dataclass
from typing import Any, Optional

from ..utils.constants import MAX_GRID_EXTENT, MIN_GRID_EXTENT


@dataclass
class Sector:
    """The rectangular hex-grid map container.

    A loaded world holds exactly one sector. Its name seeds the decorative
    starfield; creation metadata is carried through untouched.
    """

    id: str  # Export identifier
    name: str  # Human-readable name, also the starfield seed
    columns: int  # Grid width (1-255)
    rows: int  # Grid height (1-255)
    created: Optional[str] = None  # RFC 3339 timestamp
    updated: Optional[str] = None  # RFC 3339 timestamp
    creator: Optional[str] = None
    attributes: Optional[Any] = None  # Free-form export attributes

    def __post_init__(self):
        """Validate sector extent after initialization."""
        if not (MIN_GRID_EXTENT <= self.columns <= MAX_GRID_EXTENT):
            raise ValueError(
                f"Invalid columns: {self.columns} "
                f"(must be {MIN_GRID_EXTENT}-{MAX_GRID_EXTENT})"
            )
        if not (MIN_GRID_EXTENT <= self.rows <= MAX_GRID_EXTENT):
            raise ValueError(
                f"Invalid rows: {self.rows} (must be {MIN_GRID_EXTENT}-{MAX_GRID_EXTENT})"
            )
