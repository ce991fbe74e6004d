"""
Loader package public API.

Fetch the record document, unwrap the record list, and normalize rows.
"""

from __future__ import annotations

from .records import FIELD_ALIASES, RawRecord, normalize_id
from .source import extract_records, is_url, load_document

__all__ = [
    "FIELD_ALIASES",
    "RawRecord",
    "extract_records",
    "is_url",
    "load_document",
    "normalize_id",
]
