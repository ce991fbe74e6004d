"""
json_exporter.py
Structured JSON exporter for FamilyTree objects.

This exporter:
- Converts dataclasses, enums and tuples to plain JSON structures
- Keeps registry order for persons and birth order for children
- Adds the rendered card strings so consumers need no formatting logic
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping

from famtree.logging import get_logger
from famtree.registry.entities import FamilyTree
from famtree.view.formatting import person_card

log = get_logger(__name__)


def _to_json_compatible(obj: Any) -> Any:
    """
    Plain JSON value for tree data.

    EventType is a str enum, so enums are unwrapped before the primitive
    check; frozen dataclasses go through ``asdict``; read-only mappings and
    tuples become dicts and lists.
    """
    if isinstance(obj, Enum):
        return obj.value

    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj):
        return _to_json_compatible(asdict(obj))

    if isinstance(obj, Mapping):
        return {str(k): _to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [_to_json_compatible(v) for v in obj]

    return str(obj)


def build_tree_dict(tree: FamilyTree) -> Dict[str, Any]:
    """
    Convert the tree into a JSON-safe dict.
    """
    root = tree.root
    persons = {}
    for person in tree:
        entry = _to_json_compatible(person)
        card = person_card(tree, person)
        entry["card"] = {
            "life_span": card.life_span,
            "marriages": list(card.marriages),
            "other_events": list(card.other_events),
            "descendants": card.descendants,
        }
        persons[person.id] = entry

    return {
        "root": root.id if root else None,
        "stats": _to_json_compatible(tree.stats),
        "persons": persons,
    }


def serialize_tree_to_json_string(tree: FamilyTree, indent: int | None = 2) -> str:
    if indent is None:
        return json.dumps(build_tree_dict(tree), separators=(",", ":"), ensure_ascii=False)
    return json.dumps(build_tree_dict(tree), indent=indent, ensure_ascii=False)


def export_tree_json(tree: FamilyTree, output_path: str | Path, indent: int | None = 2) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    log.info(
        "Exporting tree JSON to: %s (persons=%d, root=%s)",
        output_path,
        len(tree),
        tree.root.id if tree.root else None,
    )

    json_str = serialize_tree_to_json_string(tree, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    size_bytes = output_path.stat().st_size
    log.info("JSON export complete. size=%d bytes", size_bytes)
