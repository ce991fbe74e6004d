from __future__ import annotations

from .formatting import (
    PersonCard,
    descendant_label,
    life_span,
    marriage_lines,
    other_event_lines,
    person_card,
    unique_events,
)

__all__ = [
    "PersonCard",
    "descendant_label",
    "life_span",
    "marriage_lines",
    "other_event_lines",
    "person_card",
    "unique_events",
]
