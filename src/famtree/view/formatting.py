"""
Display strings for one person card.

A card shows the name, the life span in years, one line per marriage (with
the divorce year when a matching divorce exists), other events, and the
number of descendants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from famtree.dates.normalizer import extract_year, format_partner_span
from famtree.registry.entities import Event, EventType, FamilyTree, Person
from famtree.registry.link_entities import names_match

MARRIAGE_PREFIX = "M"
UNKNOWN_DATE = "unknown"

# Shown by life_span and marriage_lines, not as plain event lines
_SUMMARIZED_TYPES = {EventType.BIRTH, EventType.DEATH, EventType.MARRIAGE, EventType.DIVORCE}


@dataclass(frozen=True, slots=True)
class PersonCard:
    id: str
    name: str
    life_span: str = ""
    marriages: Tuple[str, ...] = ()
    other_events: Tuple[str, ...] = ()
    descendants: int = 0
    descendant_label: str = ""


def life_span(person: Person) -> str:
    """``(* 1850 - † 1920)``, either half alone, or ``""``."""
    birth = person.first_event(EventType.BIRTH)
    death = person.first_event(EventType.DEATH)

    parts = []
    if birth is not None and birth.date:
        parts.append(f"* {extract_year(birth.date)}")
    if death is not None and death.date:
        parts.append(f"† {extract_year(death.date)}")

    return f"({' - '.join(parts)})" if parts else ""


def unique_events(events: Iterable[Event]) -> List[Event]:
    """Events repeated across source rows, kept once per (type, date, partner)."""
    seen: Dict[Tuple[EventType, str, str], Event] = {}
    for event in events:
        seen.setdefault((event.type, event.date, event.partner), event)
    return list(seen.values())


def _marriage_sort_key(event: Event):
    year = extract_year(event.date)
    return (int(year) if year.isdigit() else 0, event.date)


def _divorce_for(marriage: Event, divorces: List[Event]) -> Optional[Event]:
    for divorce in divorces:
        if divorce.partner == marriage.partner:
            return divorce
        if marriage.partner and divorce.partner and names_match(marriage.partner, divorce.partner):
            return divorce
    return None


def marriage_lines(person: Person) -> List[str]:
    """``M1: 1875 - 1890 Otto Schmidt *1954`` style lines, oldest first."""
    events = unique_events(person.events)
    marriages = sorted(
        (e for e in events if e.type is EventType.MARRIAGE), key=_marriage_sort_key
    )
    divorces = [e for e in events if e.type is EventType.DIVORCE]

    lines = []
    for index, marriage in enumerate(marriages, start=1):
        parts = [f"{MARRIAGE_PREFIX}{index}:"]
        if marriage.date:
            divorce = _divorce_for(marriage, divorces)
            if divorce is not None and divorce.date:
                parts.append(f"{extract_year(marriage.date)} - {extract_year(divorce.date)}")
            else:
                parts.append(extract_year(marriage.date))
        if marriage.partner:
            parts.append(marriage.partner)
        if marriage.partner_span:
            parts.append(format_partner_span(marriage.partner_span))
        lines.append(" ".join(parts))
    return lines


def other_event_lines(person: Person) -> List[str]:
    lines = []
    for event in unique_events(person.events):
        if event.type in _SUMMARIZED_TYPES:
            continue
        label = event.label or event.type.value
        when = extract_year(event.date) if event.date else UNKNOWN_DATE
        lines.append(f"{label}: {when}")
    return lines


def descendant_label(count: int) -> str:
    if count <= 0:
        return ""
    return f"{count} descendant" if count == 1 else f"{count} descendants"


def person_card(tree: FamilyTree, person: Person) -> PersonCard:
    count = tree.descendant_count(person)
    return PersonCard(
        id=person.id,
        name=person.name,
        life_span=life_span(person),
        marriages=tuple(marriage_lines(person)),
        other_events=tuple(other_event_lines(person)),
        descendants=count,
        descendant_label=descendant_label(count),
    )
