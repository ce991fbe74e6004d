from __future__ import annotations

from .navigator import Navigator, RenderFrame
from .state import HistoryPort, InMemoryHistory, NavigationState

__all__ = [
    "HistoryPort",
    "InMemoryHistory",
    "NavigationState",
    "Navigator",
    "RenderFrame",
]
