"""Sector export loading.

Reads the JSON exported by Sectors Without Number into a World. The export
holds one id -> record mapping per entity kind (``sector``, ``system``,
``blackHole``, ``planet``, plus kinds the viewer does not display). Records
are validated with pydantic before being turned into the dataclass models.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import SectorFileError
from ..models import BlackHole, Planet, Sector, System, World
from .constants import MAX_GRID_EXTENT, MIN_GRID_EXTENT

logger = logging.getLogger(__name__)


# ========== Export Schemas ==========


class EntityRecord(BaseModel):
    """Fields shared by every exported entity."""

    name: str
    created: str | None = None
    updated: str | None = None
    creator: str | None = None
    attributes: Any = None

    model_config = ConfigDict(populate_by_name=True)


class SectorRecord(EntityRecord):
    """Exported sector."""

    columns: int = Field(ge=MIN_GRID_EXTENT, le=MAX_GRID_EXTENT)
    rows: int = Field(ge=MIN_GRID_EXTENT, le=MAX_GRID_EXTENT)


class ChildRecord(EntityRecord):
    """Exported entity with a parent reference."""

    parent: str
    parent_entity: str = Field(alias="parentEntity")
    is_hidden: bool = Field(default=False, alias="isHidden")


class SystemRecord(ChildRecord):
    """Exported system or black hole."""

    x: int = Field(ge=1, le=MAX_GRID_EXTENT)
    y: int = Field(ge=1, le=MAX_GRID_EXTENT)


class SectorExport(BaseModel):
    """Top-level export document."""

    sector: dict[str, SectorRecord] = Field(default_factory=dict)
    system: dict[str, SystemRecord] = Field(default_factory=dict)
    black_hole: dict[str, SystemRecord] = Field(default_factory=dict, alias="blackHole")
    planet: dict[str, ChildRecord] = Field(default_factory=dict)

    model_config = ConfigDict(populate_by_name=True)


# ========== Loading ==========


def load_world(filepath: str | Path) -> World:
    """Load a world from a sector export file.

    Args:
        filepath: Path to the exported JSON

    Returns:
        Loaded World

    Raises:
        SectorFileError: If the file is missing, not JSON, or malformed
    """
    path = Path(filepath)
    logger.info(f"Loading sector export from {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise SectorFileError(f"File {path} not found") from e
    except OSError as e:
        raise SectorFileError(f"Could not open {path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SectorFileError(f"Could not read JSON from {path}: {e}") from e

    return world_from_dict(data)


def world_from_dict(data: dict[str, Any]) -> World:
    """Build a World from a decoded sector export.

    Args:
        data: Decoded export document

    Returns:
        World holding every sector, system, black hole and planet

    Raises:
        SectorFileError: If the document does not match the export schema
    """
    if not isinstance(data, dict):
        raise SectorFileError(f"Sector export must be a JSON object, got {type(data).__name__}")

    try:
        export = SectorExport.model_validate(data)
    except ValidationError as e:
        raise SectorFileError(f"Sector export failed validation: {e}")

    world = World(
        sectors={sid: _to_sector(sid, r) for sid, r in export.sector.items()},
        systems_by_id={sid: _to_system(System, sid, r) for sid, r in export.system.items()},
        black_holes_by_id={
            bid: _to_system(BlackHole, bid, r) for bid, r in export.black_hole.items()
        },
        planets_by_id={pid: _to_planet(pid, r) for pid, r in export.planet.items()},
    )

    logger.debug(
        f"Decoded {len(world.sectors)} sectors, {len(world.systems_by_id)} systems, "
        f"{len(world.black_holes_by_id)} black holes, {len(world.planets_by_id)} planets"
    )
    return world


def _to_sector(sector_id: str, record: SectorRecord) -> Sector:
    """Convert a sector record to the model."""
    return Sector(
        id=sector_id,
        name=record.name,
        columns=record.columns,
        rows=record.rows,
        created=record.created,
        updated=record.updated,
        creator=record.creator,
        attributes=record.attributes,
    )


def _to_system(cls: type[System], system_id: str, record: SystemRecord) -> System:
    """Convert a system record to a System or BlackHole."""
    return cls(
        id=system_id,
        name=record.name,
        x=record.x,
        y=record.y,
        parent=record.parent,
        parent_entity=record.parent_entity,
        is_hidden=record.is_hidden,
        created=record.created,
        updated=record.updated,
        creator=record.creator,
        attributes=record.attributes,
    )


def _to_planet(planet_id: str, record: ChildRecord) -> Planet:
    """Convert a planet record to the model."""
    return Planet(
        id=planet_id,
        name=record.name,
        parent=record.parent,
        parent_entity=record.parent_entity,
        is_hidden=record.is_hidden,
        created=record.created,
        updated=record.updated,
        creator=record.creator,
        attributes=record.attributes,
    )
