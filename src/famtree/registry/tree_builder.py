"""
Family tree builder.

Runs the construction phases in order over a complete record list:

    Phase 1  build_registry   identities + events
    Phase 2  link_entities    parent ids + children lists
    Phase 3  assemble_tree    child order, root, frozen FamilyTree

Nothing is published until all three phases finish.
"""

from __future__ import annotations

from typing import Iterable

from famtree.registry.assemble import ROOT_ANCHOR_ID, assemble_tree
from famtree.registry.build_registry import RecordLike, build_registry
from famtree.registry.entities import FamilyTree
from famtree.registry.link_entities import link_entities


def build_family_tree(
    records: Iterable[RecordLike],
    *,
    root_anchor_id: str = ROOT_ANCHOR_ID,
) -> FamilyTree:
    registry, owned, stats = build_registry(records)
    stats.update(link_entities(registry, owned))
    return assemble_tree(registry, root_anchor_id=root_anchor_id, stats=stats)
