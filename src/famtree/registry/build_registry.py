from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union

from famtree.loader.records import RawRecord
from famtree.logging import get_logger
from famtree.registry.entities import Event, EventType, PersonEntity, PersonRegistry

log = get_logger(__name__)

RecordLike = Union[RawRecord, Mapping[str, Any]]


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------

def as_record(record: RecordLike) -> RawRecord:
    if isinstance(record, RawRecord):
        return record
    return RawRecord.from_mapping(record)


def event_from_record(record: RawRecord) -> Event:
    return Event(
        type=EventType.from_tag(record.event_type),
        label=record.event_type,
        date=record.date,
        partner=record.partner,
        partner_span=record.partner_span,
        parent1=record.parent1,
        parent2=record.parent2,
    )


def resolve_identity(registry: PersonRegistry, record: RawRecord) -> PersonEntity:
    """
    Find or create the person a record talks about.

    Order: explicit anchor id, then an existing person with the exact same
    name, then a new person keyed by the name itself.
    """
    if record.anchor_id is not None:
        person = registry.get(record.anchor_id)
        if person is None:
            person = PersonEntity(id=record.anchor_id, name=record.person)
            registry.register(person)
            log.debug("New person %r from anchor id %s", record.person, record.anchor_id)
        return person

    person = registry.find_by_name(record.person)
    if person is not None:
        return person

    person = PersonEntity(id=record.person, name=record.person)
    registry.register(person)
    log.debug("New person %r keyed by name", record.person)
    return person


# ----------------------------------------------------------------------
# Phase 1: identities
# ----------------------------------------------------------------------

def build_registry(
    records: Iterable[RecordLike],
) -> Tuple[PersonRegistry, List[Tuple[PersonEntity, RawRecord]], Dict[str, int]]:
    """
    Phase 1: establish every identity and accumulate events.

    Returns the registry, the (person, record) pairs in input order for the
    link pass, and ingestion counters.
    """
    registry = PersonRegistry()
    owned: List[Tuple[PersonEntity, RawRecord]] = []
    stats = {"records": 0, "skipped_records": 0}

    for raw in records:
        stats["records"] += 1
        record = as_record(raw)

        if not record.has_person:
            stats["skipped_records"] += 1
            continue

        person = resolve_identity(registry, record)
        person.events.append(event_from_record(record))
        owned.append((person, record))

    log.info(
        "Registry built: records=%d persons=%d skipped=%d",
        stats["records"],
        len(registry),
        stats["skipped_records"],
    )
    return registry, owned, stats
