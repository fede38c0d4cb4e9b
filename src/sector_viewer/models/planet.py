"""Planet data model."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Planet:
    """A planet owned by a single system.

    Ownership is stored as the parent's identifier plus an entity tag; the
    relation is resolved by lookup in the world, never by direct reference.
    """

    id: str
    name: str
    parent: str  # Owning entity id
    parent_entity: str = "system"  # Only "system" parents are listed as children
    is_hidden: bool = False
    created: Optional[str] = None
    updated: Optional[str] = None
    creator: Optional[str] = None
    attributes: Optional[Any] = None
