import json

from famtree.exporter import build_tree_dict, export_tree_json, serialize_tree_to_json_string
from famtree.registry import build_family_tree


def test_build_tree_dict(family_tree):
    data = build_tree_dict(family_tree)

    assert data["root"] == "0"
    assert data["stats"]["persons"] == 5
    assert list(data["persons"]) == ["0", "Lena Schmidt", "2", "Karl Müller", "Fritz Müller"]

    peter = data["persons"]["0"]
    assert peter["name"] == "Peter Müller"
    assert peter["children"] == ["Karl Müller", "2", "Fritz Müller"]
    assert peter["parent_id"] is None
    assert peter["events"][0]["type"] == "Birth"
    assert peter["card"] == {
        "life_span": "(* 1850 - † 1920)",
        "marriages": ["M1: 1875 Maria Huber"],
        "other_events": [],
        "descendants": 4,
    }


def test_serialize_is_valid_json(family_tree):
    compact = serialize_tree_to_json_string(family_tree, indent=None)

    assert "\n" not in compact
    assert "Müller" in compact
    assert json.loads(compact) == json.loads(serialize_tree_to_json_string(family_tree))


def test_export_empty_tree(tmp_path):
    out = tmp_path / "nested" / "tree.json"
    export_tree_json(build_family_tree([]), out)

    assert json.loads(out.read_text(encoding="utf-8")) == {
        "root": None,
        "stats": {"records": 0, "skipped_records": 0, "fixed_by_hint": 0,
                  "unresolved_parents": 0, "persons": 0, "parentless": 0},
        "persons": {},
    }
