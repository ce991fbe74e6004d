"""
Raw record normalization.

Source rows come from a spreadsheet export and carry German column names;
English and snake_case names are accepted as well. Each row is mapped onto
``RawRecord`` before ingestion, so the registry builder never deals with
column naming.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from famtree.dates.normalizer import normalize_date


# Canonical field -> accepted column names, first present wins
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "person": ("Person", "person", "name"),
    "anchor_id": ("AnchorId", "anchor_id", "id"),
    "event_type": ("Ereignis", "Event", "event", "type"),
    "date": ("Datum", "Date", "date"),
    "partner": ("Partner", "partner"),
    "partner_span": ("PartnerGeburtTod", "partner_span"),
    "parent1": ("Eltern1", "parent1"),
    "parent2": ("Eltern2", "parent2"),
    "parent_id": ("ParentId", "parent_id"),
}


def _pick(mapping: Mapping[str, Any], field_name: str) -> Any:
    for key in FIELD_ALIASES[field_name]:
        if key in mapping and mapping[key] is not None:
            return mapping[key]
    return None


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def normalize_id(value: Any) -> Optional[str]:
    """
    String form of an anchor/parent id, or None when absent.

    ``0`` is a real id. Integral floats from spreadsheet exports lose their
    ``.0`` so ``3.0`` and ``"3"`` name the same person.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value).strip()
    return text or None


@dataclass(frozen=True, slots=True)
class RawRecord:
    person: str
    anchor_id: Optional[str] = None
    event_type: str = ""
    date: str = ""
    partner: str = ""
    partner_span: str = ""
    parent1: str = ""
    parent2: str = ""
    parent_id: Optional[str] = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "RawRecord":
        return cls(
            person=_text(_pick(mapping, "person")),
            anchor_id=normalize_id(_pick(mapping, "anchor_id")),
            event_type=_text(_pick(mapping, "event_type")),
            date=normalize_date(_pick(mapping, "date")),
            partner=_text(_pick(mapping, "partner")),
            partner_span=_text(_pick(mapping, "partner_span")),
            parent1=_text(_pick(mapping, "parent1")),
            parent2=_text(_pick(mapping, "parent2")),
            parent_id=normalize_id(_pick(mapping, "parent_id")),
        )

    @property
    def has_person(self) -> bool:
        return bool(self.person)
