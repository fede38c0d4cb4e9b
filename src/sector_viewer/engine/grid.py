"""Dense occupancy index from hex coordinate to system or black hole."""

import logging
from typing import Iterator, List, Optional, Tuple

from ..errors import OutOfBounds
from ..models import System, World

logger = logging.getLogger(__name__)


class OccupancyGrid:
    """Column-major grid of optional occupants, one cell per sector hex.

    Built once from a world: systems are written first, then black holes, so
    a black hole sharing a cell with a system replaces it.
    """

    def __init__(self, columns: int, rows: int):
        """Initialize an empty grid.

        Args:
            columns: Grid width
            rows: Grid height
        """
        self.columns = columns
        self.rows = rows
        self._cells: List[List[Optional[System]]] = [[None] * rows for _ in range(columns)]

    @classmethod
    def from_world(cls, world: World) -> "OccupancyGrid":
        """Build the grid for a world's sector.

        Raises:
            MissingSector: If the world holds no sector
            OutOfBounds: If an entity sits outside the sector extent
        """
        sector = world.sector()
        grid = cls(sector.columns, sector.rows)

        for system in world.systems():
            grid._place(system)

        for black_hole in world.black_holes():
            grid._place(black_hole)

        return grid

    def contains(self, x: int, y: int) -> bool:
        """Return True if (x, y) is a 1-based coordinate inside the grid."""
        return 1 <= x <= self.columns and 1 <= y <= self.rows

    def to_index(self, x: int, y: int) -> Tuple[int, int]:
        """Convert a 1-based hex coordinate to zero-based cell indices.

        Raises:
            OutOfBounds: If the coordinate lies outside the grid
        """
        if not self.contains(x, y):
            raise OutOfBounds(x, y, self.columns, self.rows)
        return (x - 1, y - 1)

    def _place(self, occupant: System) -> None:
        """Write an occupant into its cell, replacing any previous one."""
        col, row = self.to_index(occupant.x, occupant.y)
        previous = self._cells[col][row]
        if previous is not None:
            logger.warning(
                f"{occupant.category} {occupant.name!r} replaces "
                f"{previous.category} {previous.name!r} at {occupant.hex}"
            )
        logger.debug(f"Placed {occupant.category} {occupant.name!r} at {occupant.hex}")
        self._cells[col][row] = occupant

    def occupant_at(self, x: int, y: int) -> Optional[System]:
        """Return the system or black hole at a 1-based hex, if any.

        Raises:
            OutOfBounds: If the coordinate lies outside the grid
        """
        col, row = self.to_index(x, y)
        return self._cells[col][row]

    def occupied(self) -> Iterator[Tuple[Tuple[int, int], System]]:
        """Yield ((x, y), occupant) for every occupied cell, column by column."""
        for col, column in enumerate(self._cells):
            for row, occupant in enumerate(column):
                if occupant is not None:
                    yield (col + 1, row + 1), occupant
