"""Hex grid <-> Cartesian plot coordinate transform.

Columns are staggered: odd columns sit half a row higher than even ones.
Row 1 is the top of the sector while the plot's y axis grows upward, so the
row is inverted against the sector height.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from ..utils.constants import HORIZONTAL_OFFSET, STAGGER_OFFSET, VERTICAL_OFFSET


@dataclass(frozen=True)
class HexTransform:
    """Coordinate transform for a sector with a given number of rows."""

    rows: int

    def hex_to_cartesian(self, x: int, y: int) -> Tuple[float, float]:
        """Map a 1-based hex coordinate to its plot position.

        Args:
            x: Column (1-based)
            y: Row (1-based)

        Returns:
            (cx, cy) plot coordinates of the cell centre

        Examples:
            >>> HexTransform(rows=3).hex_to_cartesian(1, 1)
            (0.5, 2.75)
            >>> HexTransform(rows=3).hex_to_cartesian(2, 1)
            (1.5, 2.25)
        """
        return (
            x - HORIZONTAL_OFFSET,
            (self.rows - y) + ((x % 2) * STAGGER_OFFSET + VERTICAL_OFFSET),
        )

    def cartesian_to_hex(self, cx: float, cy: float) -> Tuple[int, int]:
        """Map a plot position back to the hex coordinate it was derived from.

        Exact inverse of hex_to_cartesian for every cell of the grid.

        Args:
            cx: Plot x
            cy: Plot y

        Returns:
            (x, y) 1-based hex coordinate
        """
        return (
            round(abs(cx + HORIZONTAL_OFFSET)),
            self.rows - math.floor(cy),
        )
