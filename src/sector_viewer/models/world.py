"""World container: every loaded entity, keyed by identifier."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from ..errors import MissingSector, UnknownId
from .planet import Planet
from .sector import Sector
from .system import BlackHole, System


@dataclass
class World:
    """Entity store for one loaded sector export.

    The world owns sectors, systems, black holes and planets as
    identifier-keyed collections and answers the relational queries the
    viewer needs. Iteration order of the snapshot methods follows dict
    insertion order but callers should not rely on it.
    """

    sectors: Dict[str, Sector] = field(default_factory=dict)
    systems_by_id: Dict[str, System] = field(default_factory=dict)
    black_holes_by_id: Dict[str, BlackHole] = field(default_factory=dict)
    planets_by_id: Dict[str, Planet] = field(default_factory=dict)

    def sector(self) -> Sector:
        """Return the world's sector.

        Raises:
            MissingSector: If the world holds no sector
        """
        for sector in self.sectors.values():
            return sector
        raise MissingSector()

    def systems(self) -> List[System]:
        return list(self.systems_by_id.values())

    def black_holes(self) -> List[BlackHole]:
        return list(self.black_holes_by_id.values())

    def planets(self) -> List[Planet]:
        return list(self.planets_by_id.values())

    def system(self, system_id: str) -> Optional[System]:
        return self.systems_by_id.get(system_id)

    def black_hole(self, black_hole_id: str) -> Optional[BlackHole]:
        return self.black_holes_by_id.get(black_hole_id)

    def planet(self, planet_id: str) -> Optional[Planet]:
        return self.planets_by_id.get(planet_id)

    def child_planets(self, system: System) -> Optional[List[Planet]]:
        """Return the planets owned by a system.

        Args:
            system: System whose children to list

        Returns:
            None if the system is not part of this world, otherwise the
            (possibly empty) list of planets parented to it
        """
        if self.systems_by_id.get(system.id) != system:
            return None

        return [
            p
            for p in self.planets_by_id.values()
            if p.parent == system.id and p.parent_entity == "system"
        ]

    def parent_system(self, system_id: str) -> System:
        """Resolve a planet's parent system by identifier.

        Args:
            system_id: Identifier stored in a planet's ``parent`` field

        Returns:
            The matching system

        Raises:
            UnknownId: If no system has that identifier
        """
        system = self.systems_by_id.get(system_id)
        if system is None:
            raise UnknownId("system", system_id)
        return system

    def parent_sector(self, entity: Union[System, Planet]) -> Sector:
        """Resolve the sector an entity's ``parent`` field points at.

        Raises:
            UnknownId: If no sector has that identifier
        """
        sector = self.sectors.get(entity.parent)
        if sector is None:
            raise UnknownId("sector", entity.parent)
        return sector
