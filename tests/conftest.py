import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from famtree.registry import build_family_tree  # noqa: E402


def rec(person, event="Geburt", date=None, **fields):
    """One source row in the spreadsheet's own column names."""
    row = {"Person": person, "Ereignis": event}
    if date is not None:
        row["Datum"] = date
    keys = {
        "anchor": "AnchorId",
        "parent_id": "ParentId",
        "partner": "Partner",
        "span": "PartnerGeburtTod",
        "parent1": "Eltern1",
        "parent2": "Eltern2",
    }
    for name, value in fields.items():
        row[keys[name]] = value
    return row


@pytest.fixture
def family_records():
    """
    Peter (anchor 0) is the root. Anna and Karl are his children, found via
    ParentId "0" and via a name hint; Lena is Anna's child and is listed before
    her mother so the link can only be made once every identity exists.
    """
    return [
        rec("Peter Müller", "Geburt", 1850, anchor="0"),
        rec("Lena Schmidt", "Geburt", 1905, parent1="Anna Schmidt"),
        rec("Anna Schmidt", "Geburt", 1880, anchor="2", parent_id="0"),
        rec("Anna Schmidt", "Heirat", 1902, anchor="2", partner="Otto Schmidt", span="*1876"),
        rec("Karl Müller", "Geburt", 1878, parent1="Peter Müller"),
        rec("Peter Müller", "Tod", 1920, anchor="0"),
        rec("Fritz Müller", "Taufe", None, parent2="Peter Müller"),
        rec("Peter Müller", "Heirat", 1875, anchor="0", partner="Maria Huber"),
    ]


@pytest.fixture
def family_tree(family_records):
    return build_family_tree(family_records)


@pytest.fixture
def records_document(tmp_path, family_records):
    import json

    path = tmp_path / "stammbaum.json"
    path.write_text(json.dumps({"data": family_records}), encoding="utf-8")
    return path
