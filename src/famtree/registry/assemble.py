from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from famtree.logging import get_logger
from famtree.registry.entities import (
    FamilyTree,
    Person,
    PersonEntity,
    PersonRegistry,
    birth_year,
)

log = get_logger(__name__)

ROOT_ANCHOR_ID = "0"


def _birth_sort_key(person: PersonEntity):
    year = birth_year(person.events)
    return (year is None, year or 0)


def sort_children(registry: PersonRegistry) -> None:
    """Order every children list by birth year, unknown years last (stable)."""
    for person in registry.persons.values():
        person.children.sort(key=lambda cid: _birth_sort_key(registry.persons[cid]))


def select_root(registry: PersonRegistry, root_anchor_id: str = ROOT_ANCHOR_ID) -> Optional[PersonEntity]:
    """
    Pick the top of the tree.

    1. the root-anchor person, if it has no resolved parent
    2. the parentless person with the earliest known birth year
       (first encountered on ties, or when no candidate has a year)
    3. the first person in registry order
    """
    if not len(registry):
        return None

    anchor = registry.get(root_anchor_id)
    if anchor is not None and not registry.has_resolved_parent(anchor):
        return anchor

    candidates = [p for p in registry.persons.values() if not registry.has_resolved_parent(p)]
    if candidates:
        # min() keeps the first of equal keys
        return min(candidates, key=_birth_sort_key)

    return next(iter(registry.persons.values()))


def freeze(person: PersonEntity) -> Person:
    return Person(
        id=person.id,
        name=person.name,
        events=tuple(person.events),
        children=tuple(person.children),
        parent_id=person.parent_id,
    )


def assemble_tree(
    registry: PersonRegistry,
    *,
    root_anchor_id: str = ROOT_ANCHOR_ID,
    stats: Optional[Mapping[str, Any]] = None,
) -> FamilyTree:
    """Sort children, choose the root and freeze the registry into a FamilyTree."""
    sort_children(registry)
    root = select_root(registry, root_anchor_id)

    tree_stats: Dict[str, Any] = dict(stats or {})
    tree_stats["persons"] = len(registry)
    tree_stats["parentless"] = sum(
        1 for p in registry.persons.values() if not registry.has_resolved_parent(p)
    )

    persons: Dict[str, Person] = {pid: freeze(p) for pid, p in registry.persons.items()}

    if root is None:
        log.warning("No persons ingested; tree has no root")
    else:
        log.info("Root selected: %r (id=%s)", root.name, root.id)

    return FamilyTree(persons, root.id if root else None, tree_stats)


def roots(tree: FamilyTree) -> List[Person]:
    """Every person without a resolvable parent, in registry order."""
    return [p for p in tree if tree.parent_of(p) is None]
