import json

from typer.testing import CliRunner

from famtree.cli.app import app

runner = CliRunner()


def test_stats(records_document):
    result = runner.invoke(app, ["stats", "--source", str(records_document)])

    assert result.exit_code == 0
    assert "Family Tree Statistics" in result.stdout
    assert "Peter Müller" in result.stdout


def test_show_root(records_document):
    result = runner.invoke(app, ["show", "-s", str(records_document)])

    assert result.exit_code == 0
    assert "Path: Peter Müller" in result.stdout
    assert "Karl Müller" in result.stdout
    assert "4 descendants" in result.stdout
    assert "?path" not in result.stdout


def test_show_restores_breadcrumb(records_document):
    result = runner.invoke(
        app, ["show", "-s", str(records_document), "--path", "Peter Müller > Anna Schmidt"]
    )

    assert result.exit_code == 0
    assert "Path: Peter Müller > Anna Schmidt" in result.stdout
    assert "M1: 1902 Otto Schmidt *1876" in result.stdout
    assert "Lena Schmidt" in result.stdout
    assert "?path=" in result.stdout


def test_show_person_by_id(records_document):
    result = runner.invoke(app, ["show", "-s", str(records_document), "--person", "Lena Schmidt"])

    assert result.exit_code == 0
    assert "Path: Peter Müller > Anna Schmidt > Lena Schmidt" in result.stdout


def test_show_empty_document(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("[]", encoding="utf-8")

    result = runner.invoke(app, ["show", "-s", str(path)])

    assert result.exit_code == 0
    assert "No persons found" in result.stdout


def test_search(records_document):
    result = runner.invoke(app, ["search", "Otto", "-s", str(records_document)])

    assert result.exit_code == 0
    assert "Anna Schmidt" in result.stdout
    assert "spouse" in result.stdout


def test_search_without_matches(records_document):
    result = runner.invoke(app, ["search", "Zebedäus", "-s", str(records_document)])

    assert result.exit_code == 0
    assert "No matches found" in result.stdout


def test_export_to_stdout(records_document):
    result = runner.invoke(app, ["export", "-s", str(records_document)])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["root"] == "0"
    assert len(data["persons"]) == 5


def test_export_to_file(records_document, tmp_path):
    out = tmp_path / "tree.json"
    result = runner.invoke(app, ["export", "-s", str(records_document), "-o", str(out), "--pretty"])

    assert result.exit_code == 0
    assert json.loads(out.read_text(encoding="utf-8"))["persons"]["2"]["name"] == "Anna Schmidt"


def test_missing_source_exits_with_error(tmp_path):
    result = runner.invoke(app, ["stats", "-s", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
