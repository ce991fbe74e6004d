from __future__ import annotations

from .engine import MAX_RESULTS, MIN_QUERY_LENGTH, NAME, SPOUSE, SearchMatch, highlight, search

__all__ = [
    "MAX_RESULTS",
    "MIN_QUERY_LENGTH",
    "NAME",
    "SPOUSE",
    "SearchMatch",
    "highlight",
    "search",
]
