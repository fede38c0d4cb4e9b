"""Data models for the sector viewer."""

from .planet import Planet
from .sector import Sector
from .system import BlackHole, System
from .world import World

__all__ = [
    "Sector",
    "System",
    "BlackHole",
    "Planet",
    "World",
]
