from __future__ import annotations

from .entities import (
    Event,
    EventType,
    FamilyTree,
    Person,
    PersonEntity,
    PersonRegistry,
)
from .tree_builder import build_family_tree

__all__ = [
    "Event",
    "EventType",
    "FamilyTree",
    "Person",
    "PersonEntity",
    "PersonRegistry",
    "build_family_tree",
]
