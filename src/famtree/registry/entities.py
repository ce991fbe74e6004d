from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from famtree.dates.normalizer import year_of


# -----------------------------
# Events
# -----------------------------

class EventType(str, Enum):
    BIRTH = "Birth"
    DEATH = "Death"
    MARRIAGE = "Marriage"
    DIVORCE = "Divorce"
    OTHER = "Other"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "EventType":
        if not tag:
            return cls.OTHER
        return EVENT_TYPE_MAP.get(str(tag).strip().casefold(), cls.OTHER)


# Accepted type tags (the source spreadsheet is German)
EVENT_TYPE_MAP: Dict[str, EventType] = {
    "birth": EventType.BIRTH,
    "geburt": EventType.BIRTH,
    "death": EventType.DEATH,
    "tod": EventType.DEATH,
    "marriage": EventType.MARRIAGE,
    "heirat": EventType.MARRIAGE,
    "divorce": EventType.DIVORCE,
    "scheidung": EventType.DIVORCE,
}


@dataclass(frozen=True, slots=True)
class Event:
    """
    One life event taken from one source record.

    ``parent1``/``parent2`` are free-text parent names; they only matter while
    links are resolved.
    """
    type: EventType
    label: str = ""
    date: str = ""
    partner: str = ""
    partner_span: str = ""
    parent1: str = ""
    parent2: str = ""

    @property
    def parent_hints(self) -> Tuple[str, ...]:
        return tuple(h for h in (self.parent1, self.parent2) if h)


def birth_year(events: Iterable[Event]) -> Optional[int]:
    """Year of the first dated Birth event, or None."""
    for e in events:
        if e.type is EventType.BIRTH and e.date:
            return year_of(e.date)
    return None


# -----------------------------
# Build-time entity
# -----------------------------

@dataclass(slots=True)
class PersonEntity:
    """
    Mutable person used while the registry is being built and linked.
    """
    id: str
    name: str
    events: List[Event] = field(default_factory=list)
    children: List[str] = field(default_factory=list)
    parent_id: Optional[str] = None


@dataclass(slots=True)
class PersonRegistry:
    """
    In-memory person store indexed by identifier, in discovery order.
    """
    persons: Dict[str, PersonEntity] = field(default_factory=dict)

    def register(self, person: PersonEntity) -> None:
        self.persons[person.id] = person

    def get(self, person_id: Optional[str]) -> Optional[PersonEntity]:
        if person_id is None:
            return None
        return self.persons.get(person_id)

    def find_by_name(self, name: str) -> Optional[PersonEntity]:
        for person in self.persons.values():
            if person.name == name:
                return person
        return None

    def has_resolved_parent(self, person: PersonEntity) -> bool:
        return person.parent_id is not None and person.parent_id in self.persons

    def __len__(self) -> int:
        return len(self.persons)


# -----------------------------
# Finished graph
# -----------------------------

@dataclass(frozen=True, slots=True)
class Person:
    id: str
    name: str
    events: Tuple[Event, ...] = ()
    children: Tuple[str, ...] = ()
    parent_id: Optional[str] = None

    def events_of(self, event_type: EventType) -> Tuple[Event, ...]:
        return tuple(e for e in self.events if e.type is event_type)

    def first_event(self, event_type: EventType) -> Optional[Event]:
        for e in self.events:
            if e.type is event_type:
                return e
        return None

    @property
    def birth_year(self) -> Optional[int]:
        return birth_year(self.events)


class FamilyTree:
    """
    Immutable family graph returned by the builder.

    Persons keep registry (discovery) order. Children are stored as ids on
    each person and already sorted by birth year.
    """

    __slots__ = ("_persons", "_root_id", "_stats", "_descendants")

    def __init__(
        self,
        persons: Mapping[str, Person],
        root_id: Optional[str],
        stats: Optional[Mapping[str, Any]] = None,
    ):
        self._persons = MappingProxyType(dict(persons))
        self._root_id = root_id
        self._stats = MappingProxyType(dict(stats or {}))
        self._descendants: Dict[str, int] = {}

    # -- lookups ---------------------------------------------------------

    @property
    def persons(self) -> Mapping[str, Person]:
        return self._persons

    @property
    def stats(self) -> Mapping[str, Any]:
        return self._stats

    @property
    def root(self) -> Optional[Person]:
        if self._root_id is None:
            return None
        return self._persons.get(self._root_id)

    def get(self, person_id: Optional[str]) -> Optional[Person]:
        if person_id is None:
            return None
        return self._persons.get(person_id)

    def find_by_name(self, name: str) -> Optional[Person]:
        """First person whose name matches exactly, in registry order."""
        for person in self._persons.values():
            if person.name == name:
                return person
        return None

    def parent_of(self, person: Person) -> Optional[Person]:
        return self.get(person.parent_id)

    def children_of(self, person: Person) -> List[Person]:
        return [self._persons[c] for c in person.children if c in self._persons]

    def descendant_count(self, person: Person) -> int:
        """
        Number of distinct persons below ``person``.

        Iterative with a visited set, so cyclic parent data terminates. The
        result is cached; the tree never changes after construction.
        """
        cached = self._descendants.get(person.id)
        if cached is not None:
            return cached

        seen = {person.id}
        stack = list(person.children)
        count = 0
        while stack:
            child_id = stack.pop()
            if child_id in seen or child_id not in self._persons:
                continue
            seen.add(child_id)
            count += 1
            stack.extend(self._persons[child_id].children)

        self._descendants[person.id] = count
        return count

    # -- container protocol ---------------------------------------------

    def __len__(self) -> int:
        return len(self._persons)

    def __iter__(self) -> Iterator[Person]:
        return iter(self._persons.values())

    def __contains__(self, person_id: object) -> bool:
        return person_id in self._persons

    def __repr__(self) -> str:
        return f"FamilyTree(persons={len(self._persons)}, root={self._root_id!r})"
