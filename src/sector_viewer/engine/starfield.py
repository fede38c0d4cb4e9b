"""Deterministic decorative starfield."""

import math
from typing import List, Tuple

from ..models import Sector
from ..utils import FIELD_BLEED, FIELD_DENSITY, SectorRNG


def starfield_size(sector: Sector) -> int:
    """Number of background points drawn for a sector."""
    return math.ceil(sector.rows * sector.columns * FIELD_DENSITY)


def generate_starfield(sector: Sector) -> Tuple[Tuple[float, float], ...]:
    """Generate the background starfield for a sector.

    The generator is seeded with the sector name, so the same sector always
    gets the same field. Points may fall up to FIELD_BLEED outside the grid
    so the field bleeds past the map edge.

    Args:
        sector: Sector to decorate

    Returns:
        Tuple of (a, b) points; a is drawn from [-1, rows + 1] and b from
        [-1, columns + 1]

    Examples:
        >>> len(generate_starfield(Sector(id="s", name="Alpha", columns=3, rows=3)))
        15
    """
    rng = SectorRNG(sector.name)

    points: List[Tuple[float, float]] = []
    for _ in range(starfield_size(sector)):
        points.append(
            (
                rng.uniform(-FIELD_BLEED, sector.rows + FIELD_BLEED),
                rng.uniform(-FIELD_BLEED, sector.columns + FIELD_BLEED),
            )
        )

    return tuple(points)
