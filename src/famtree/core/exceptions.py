from __future__ import annotations

from typing import Optional


class FamTreeError(Exception):
    """Base exception for family tree construction failures."""


class SourceError(FamTreeError):
    """The record document could not be turned into a record collection."""


class SourceUnavailable(SourceError):
    """Raised when the record document cannot be fetched or read."""

    def __init__(self, message: str, *, location: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.location = location
        self.status_code = status_code


class MalformedSource(SourceError):
    """Raised when the document is not JSON or not shaped as a record collection."""


class TreeBuildError(FamTreeError):
    """Raised when building the tree fails unexpectedly."""
