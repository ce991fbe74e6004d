from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from famtree.loader.records import RawRecord
from famtree.logging import get_logger
from famtree.registry.entities import PersonEntity, PersonRegistry

log = get_logger(__name__)


def names_match(name: str, hint: str) -> bool:
    """Equal, or either one contains the other. Case-sensitive."""
    return name == hint or hint in name or name in hint


def find_parent_by_hint(
    registry: PersonRegistry,
    hint: str,
    *,
    exclude: Optional[str] = None,
) -> Optional[PersonEntity]:
    """
    First person in registry order whose name matches ``hint``.

    Short or common fragments match more than one person; the first one wins.
    """
    if not hint:
        return None
    for person in registry.persons.values():
        if person.id == exclude or not person.name:
            continue
        if names_match(person.name, hint):
            return person
    return None


def find_parent_by_hints(
    registry: PersonRegistry,
    parent1: str,
    parent2: str,
    *,
    exclude: Optional[str] = None,
) -> Optional[PersonEntity]:
    return (
        find_parent_by_hint(registry, parent1, exclude=exclude)
        or find_parent_by_hint(registry, parent2, exclude=exclude)
    )


def _assign_from_record(registry: PersonRegistry, person: PersonEntity, record: RawRecord) -> None:
    if record.parent_id is not None:
        # "0" is the root anchor's id like any other id, never "no parent"
        if record.parent_id != person.id:
            person.parent_id = record.parent_id
        return

    parent = find_parent_by_hints(registry, record.parent1, record.parent2, exclude=person.id)
    if parent is not None:
        person.parent_id = parent.id


def _fix_up_from_events(registry: PersonRegistry, person: PersonEntity) -> bool:
    hinted = next((e for e in person.events if e.parent_hints), None)
    if hinted is None:
        return False

    parent = find_parent_by_hints(registry, hinted.parent1, hinted.parent2, exclude=person.id)
    if parent is None:
        return False

    person.parent_id = parent.id
    return True


def link_entities(
    registry: PersonRegistry,
    owned: Iterable[Tuple[PersonEntity, RawRecord]],
) -> Dict[str, int]:
    """
    Phase 2: resolve parent links once every identity exists.

    Design:
      - per record: explicit parent id, else first hint, else second hint
      - fix-up: persons left without a resolvable parent retry the hints
        carried by their own events
      - children lists are rebuilt from the final parent ids

    Idempotent over the children lists: they are cleared before rebuilding.
    """
    for person, record in owned:
        _assign_from_record(registry, person, record)

    fixed = 0
    for person in registry.persons.values():
        if registry.has_resolved_parent(person):
            continue
        if _fix_up_from_events(registry, person):
            fixed += 1

    for person in registry.persons.values():
        person.children.clear()

    unresolved = 0
    for person in registry.persons.values():
        if person.parent_id is None:
            continue
        parent = registry.get(person.parent_id)
        if parent is None:
            unresolved += 1
            log.debug("Unresolved parent %r for %r", person.parent_id, person.name)
            continue
        if person.id not in parent.children:
            parent.children.append(person.id)

    stats = {"fixed_by_hint": fixed, "unresolved_parents": unresolved}
    log.info("Links resolved: fixed_by_hint=%d unresolved=%d", fixed, unresolved)
    return stats
