import json

import httpx
import pytest

from famtree.core.exceptions import FamTreeError, MalformedSource, SourceUnavailable
from famtree.loader.source import extract_records, is_url, load_document

URL = "https://example.org/stammbaum.json"


def _client(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_is_url():
    assert is_url(URL)
    assert is_url("http://localhost/x.json")
    assert not is_url("data/stammbaum.json")


def test_load_document_over_http():
    payload = {"data": [{"Person": "Peter"}]}

    def handler(request):
        assert request.url == URL
        return httpx.Response(200, json=payload)

    assert load_document(URL, client=_client(handler)) == payload


def test_http_error_status_is_source_unavailable():
    client = _client(lambda request: httpx.Response(404, text="missing"))

    with pytest.raises(SourceUnavailable) as info:
        load_document(URL, client=client)

    assert info.value.status_code == 404
    assert info.value.location == URL
    assert "404" in str(info.value)


def test_transport_failure_is_source_unavailable():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SourceUnavailable):
        load_document(URL, client=_client(handler))


def test_invalid_json_is_malformed():
    client = _client(lambda request: httpx.Response(200, text="<html>nope</html>"))

    with pytest.raises(MalformedSource):
        load_document(URL, client=client)


def test_load_document_from_file(tmp_path):
    path = tmp_path / "records.json"
    path.write_text(json.dumps([{"Person": "Peter"}]), encoding="utf-8")

    assert load_document(str(path)) == [{"Person": "Peter"}]


def test_missing_file_is_source_unavailable(tmp_path):
    with pytest.raises(SourceUnavailable):
        load_document(str(tmp_path / "nope.json"))


def test_source_errors_share_a_base():
    assert issubclass(SourceUnavailable, FamTreeError)
    assert issubclass(MalformedSource, FamTreeError)


def test_extract_records_bare_list():
    records = [{"Person": "A"}, {"Person": "B"}]
    assert extract_records(records) == records


def test_extract_records_wrapped():
    assert extract_records({"data": [{"Person": "A"}]}) == [{"Person": "A"}]
    assert extract_records({"records": [{"Person": "B"}]}) == [{"Person": "B"}]


def test_extract_records_drops_non_objects():
    assert extract_records([{"Person": "A"}, "junk", 3, None]) == [{"Person": "A"}]


@pytest.mark.parametrize("document", [{"rows": []}, {"data": "x"}, "text", 42, None])
def test_extract_records_rejects_other_shapes(document):
    with pytest.raises(MalformedSource):
        extract_records(document)
