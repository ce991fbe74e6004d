"""
Source Loader

Fetches the record document from a URL or a local file and checks that it is
shaped as a record collection.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional

import httpx

from famtree.core.exceptions import MalformedSource, SourceUnavailable
from famtree.logging import get_logger

log = get_logger(__name__)

DEFAULT_WRAPPER_KEYS = ("data", "records")
DEFAULT_TIMEOUT = 10.0


def is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def _fetch_url(url: str, *, client: Optional[httpx.Client], timeout: float) -> str:
    log.info("Fetching record document: %s", url)
    try:
        if client is not None:
            response = client.get(url, timeout=timeout)
        else:
            response = httpx.get(url, timeout=timeout, follow_redirects=True)
    except httpx.HTTPError as exc:
        raise SourceUnavailable(f"Could not fetch {url}: {exc}", location=url) from exc

    if not response.is_success:
        raise SourceUnavailable(
            f"Could not fetch {url}: HTTP status {response.status_code}",
            location=url,
            status_code=response.status_code,
        )
    return response.text


def _read_file(location: str) -> str:
    path = Path(location).expanduser()
    log.info("Reading record document: %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SourceUnavailable(f"Could not read {path}: {exc}", location=str(path)) from exc


def load_document(
    location: str,
    *,
    client: Optional[httpx.Client] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Any:
    """
    Load and JSON-decode the record document at ``location``.

    Raises SourceUnavailable for transport failures, non-success statuses and
    unreadable files; MalformedSource when the body is not JSON.
    """
    location = str(location)
    if is_url(location):
        body = _fetch_url(location, client=client, timeout=timeout)
    else:
        body = _read_file(location)

    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        raise MalformedSource(f"{location} is not valid JSON: {exc}") from exc


def extract_records(
    document: Any,
    wrapper_keys: Iterable[str] = DEFAULT_WRAPPER_KEYS,
) -> List[Mapping[str, Any]]:
    """
    Return the record list from a bare array or a wrapping object.

    Items that are not JSON objects are dropped.
    """
    records = document
    if isinstance(document, Mapping):
        records = None
        for key in wrapper_keys:
            if key in document:
                records = document[key]
                break
        if records is None:
            raise MalformedSource(
                "Document object has none of the record fields: "
                + ", ".join(wrapper_keys)
            )

    if not isinstance(records, list):
        raise MalformedSource(
            f"Expected a list of records, got {type(records).__name__}"
        )

    kept = [r for r in records if isinstance(r, Mapping)]
    dropped = len(records) - len(kept)
    if dropped:
        log.warning("Dropped %d non-object entries from the record list", dropped)

    log.debug("Extracted %d records", len(kept))
    return kept
