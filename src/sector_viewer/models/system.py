"""Star system and black hole data models."""

from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass
class System:
    """A star system occupying one hex of the sector.

    Systems carry their own export identifier so callers can go from a
    system value straight back to its key in the world.
    """

    id: str  # Export identifier
    name: str
    x: int  # Column (1-based)
    y: int  # Row (1-based)
    parent: str = ""  # Owning sector id
    parent_entity: str = "sector"
    is_hidden: bool = False  # Display hint only
    created: Optional[str] = None
    updated: Optional[str] = None
    creator: Optional[str] = None
    attributes: Optional[Any] = None

    category = "system"

    def __post_init__(self):
        """Validate hex coordinates after initialization."""
        if self.x < 1:
            raise ValueError(f"Invalid x coordinate: {self.x} (must be >= 1)")
        if self.y < 1:
            raise ValueError(f"Invalid y coordinate: {self.y} (must be >= 1)")

    @property
    def hex(self) -> Tuple[int, int]:
        """1-based (x, y) hex coordinate."""
        return (self.x, self.y)


@dataclass
class BlackHole(System):
    """A black hole. Shaped like a system and selected the same way."""

    category = "blackHole"
