"""
Navigation state and the persistence port it travels through.

The state is just the breadcrumb: person names from the root down to the
focused person. Whatever keeps history (browser URL, session store, a test
double) only has to implement ``save`` and ``load``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple
from urllib.parse import parse_qs, urlencode

PATH_PARAM = "path"
PATH_SEPARATOR = " > "


@dataclass(frozen=True, slots=True)
class NavigationState:
    path: Tuple[str, ...] = ()

    @classmethod
    def from_names(cls, names) -> "NavigationState":
        return cls(tuple(str(n) for n in names))

    def to_query(self) -> str:
        """
        Encode as a query string, ``path=Root > Child``.

        A root-only (or empty) path encodes to ``""`` so the landing URL stays
        clean.
        """
        if len(self.path) <= 1:
            return ""
        return urlencode({PATH_PARAM: self.to_breadcrumb()})

    @classmethod
    def from_breadcrumb(cls, text: str) -> "NavigationState":
        """Parse ``"Root > Child"`` as shown in a breadcrumb bar."""
        if not text or not text.strip():
            return cls()
        return cls(tuple(part.strip() for part in text.split(PATH_SEPARATOR)))

    def to_breadcrumb(self) -> str:
        return PATH_SEPARATOR.join(self.path)

    @classmethod
    def from_query(cls, query: str) -> "NavigationState":
        values = parse_qs(query.lstrip("?")).get(PATH_PARAM)
        if not values:
            return cls()
        return cls.from_breadcrumb(values[0])

    def __bool__(self) -> bool:
        return bool(self.path)


class HistoryPort(Protocol):
    def save(self, state: NavigationState) -> None: ...

    def load(self) -> Optional[NavigationState]: ...


class InMemoryHistory:
    """History stack kept in process; supports ``back``."""

    def __init__(self, initial: Optional[NavigationState] = None):
        self._entries: List[NavigationState] = [initial] if initial else []

    def save(self, state: NavigationState) -> None:
        self._entries.append(state)

    def load(self) -> Optional[NavigationState]:
        return self._entries[-1] if self._entries else None

    def back(self) -> Optional[NavigationState]:
        """Drop the current entry and return the previous one, if any."""
        if self._entries:
            self._entries.pop()
        return self.load()

    @property
    def entries(self) -> Tuple[NavigationState, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
