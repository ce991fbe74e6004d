import json

import httpx
import pytest

from conftest import rec

from famtree.config import FTConfig
from famtree.core.context import BuildContext
from famtree.core.exceptions import MalformedSource, SourceUnavailable, TreeBuildError
from famtree.core.pipeline import Pipeline, build_tree_from_source
from famtree.logging import get_logger


def test_build_from_file(records_document):
    tree = build_tree_from_source(str(records_document))

    assert len(tree) == 5
    assert tree.root.name == "Peter Müller"


def test_build_from_url(family_records):
    def handler(request):
        return httpx.Response(200, json=family_records)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    tree = build_tree_from_source("https://example.org/stammbaum.json", client=client)

    assert tree.root.id == "0"
    assert tree.descendant_count(tree.root) == 4


def test_root_anchor_comes_from_config(tmp_path):
    path = tmp_path / "records.json"
    path.write_text(
        json.dumps([rec("Old", "Geburt", 1700), rec("Anchored", "Geburt", 1800, anchor="5")]),
        encoding="utf-8",
    )

    assert build_tree_from_source(str(path), config=FTConfig({})).root.name == "Old"
    cfg = FTConfig({"tree": {"root_anchor_id": 5}})
    assert build_tree_from_source(str(path), config=cfg).root.name == "Anchored"


def test_missing_file_is_reported(tmp_path):
    with pytest.raises(SourceUnavailable):
        build_tree_from_source(str(tmp_path / "missing.json"))


def test_failures_are_recorded_on_the_context(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    ctx = BuildContext(config=FTConfig({}), logger=get_logger("test_pipeline"), source=str(path))

    with pytest.raises(MalformedSource):
        Pipeline(ctx).run()
    assert len(ctx.errors) == 1


def test_unexpected_errors_become_tree_build_errors(monkeypatch, records_document):
    def explode(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("famtree.core.pipeline.build_family_tree", explode)
    ctx = BuildContext(
        config=FTConfig({}), logger=get_logger("test_pipeline"), source=str(records_document)
    )

    with pytest.raises(TreeBuildError) as excinfo:
        Pipeline(ctx).run()
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_stats_copied_to_context(records_document):
    ctx = BuildContext(
        config=FTConfig({}), logger=get_logger("test_pipeline"), source=str(records_document)
    )
    Pipeline(ctx).run()

    assert ctx.stats["persons"] == 5
    assert ctx.errors == []
