"""Shared fixtures for sector viewer tests."""

import pytest

from sector_viewer.models import BlackHole, Planet, Sector, System, World


def build_world(name="Alpha", columns=3, rows=3, systems=(), black_holes=(), planets=()):
    """Build a world holding one sector plus the given entities."""
    sector = Sector(id="sec-1", name=name, columns=columns, rows=rows)
    return World(
        sectors={sector.id: sector},
        systems_by_id={s.id: s for s in systems},
        black_holes_by_id={b.id: b for b in black_holes},
        planets_by_id={p.id: p for p in planets},
    )


@pytest.fixture
def make_world():
    """Factory fixture for single-sector worlds."""
    return build_world


@pytest.fixture
def sol():
    return System(id="sys-sol", name="Sol", x=2, y=2, parent="sec-1")


@pytest.fixture
def alpha_world(sol):
    """3x3 sector "Alpha" with Sol at (2, 2) and one planet orbiting it."""
    earth = Planet(id="pl-earth", name="Earth", parent=sol.id, parent_entity="system")
    return build_world(systems=[sol], planets=[earth])


@pytest.fixture
def crowded_world():
    """4x3 sector with two systems, a black hole sharing a cell, and planets."""
    vega = System(id="sys-vega", name="Vega", x=1, y=3, parent="sec-1")
    rigel = System(id="sys-rigel", name="Rigel", x=4, y=1, parent="sec-1")
    maw = BlackHole(id="bh-maw", name="The Maw", x=4, y=1, parent="sec-1")
    planets = [
        Planet(id="pl-1", name="Vega I", parent=vega.id),
        Planet(id="pl-2", name="Vega II", parent=vega.id),
        Planet(id="pl-3", name="Rigel Prime", parent=rigel.id),
        Planet(id="pl-4", name="Drifter", parent=vega.id, parent_entity="sector"),
    ]
    return build_world(
        name="Beta", columns=4, rows=3, systems=[vega, rigel], black_holes=[maw], planets=planets
    )
