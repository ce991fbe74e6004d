"""
Person search.

No index is kept: every query scans the whole tree, which holds a few
thousand persons at most. ``search`` is a pure function of the tree and the
query, so a caller that debounces keystrokes only needs to show the result of
the latest call.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from famtree.registry.entities import EventType, FamilyTree, Person

MIN_QUERY_LENGTH = 2
MAX_RESULTS = 20

NAME = "name"
SPOUSE = "spouse"


@dataclass(frozen=True, slots=True)
class SearchMatch:
    person: Person
    reason: str
    matched_spouse: Optional[str] = None


def _match_person(person: Person, needle: str) -> Optional[SearchMatch]:
    if needle in person.name.casefold():
        return SearchMatch(person=person, reason=NAME)

    for marriage in person.events_of(EventType.MARRIAGE):
        if marriage.partner and needle in marriage.partner.casefold():
            return SearchMatch(person=person, reason=SPOUSE, matched_spouse=marriage.partner)
    return None


def search(
    tree: FamilyTree,
    query: str,
    *,
    limit: int = MAX_RESULTS,
    min_length: int = MIN_QUERY_LENGTH,
) -> List[SearchMatch]:
    """
    Find persons by name, then by spouse name.

    Ranking: name hits before spouse hits, then names starting with the query,
    then case-insensitive name order.
    """
    query = (query or "").strip()
    if len(query) < min_length:
        return []

    needle = query.casefold()
    matches = [m for m in (_match_person(p, needle) for p in tree) if m is not None]

    matches.sort(
        key=lambda m: (
            m.reason != NAME,
            not m.person.name.casefold().startswith(needle),
            m.person.name.casefold(),
        )
    )
    return matches[:limit]


def highlight(text: str, query: str, template: str = "[{}]") -> str:
    """Wrap every case-insensitive occurrence of ``query`` in ``template``."""
    if not query or not text:
        return text
    pattern = re.compile(re.escape(query), re.IGNORECASE)
    return pattern.sub(lambda m: template.format(m.group(0)), text)
