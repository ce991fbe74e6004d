"""
famtree: build a navigable family tree from flat life-event records.

    from famtree import build_tree_from_source, Navigator, search

    tree = build_tree_from_source("stammbaum.json")
    nav = Navigator(tree)
    nav.navigate_to(search(tree, "anna")[0].person)
"""

from famtree.core.exceptions import (
    FamTreeError,
    MalformedSource,
    SourceUnavailable,
    TreeBuildError,
)
from famtree.core.pipeline import Pipeline, build_tree_from_source
from famtree.dates.normalizer import extract_year, format_partner_span, normalize_date
from famtree.navigation import InMemoryHistory, NavigationState, Navigator, RenderFrame
from famtree.registry import Event, EventType, FamilyTree, Person, build_family_tree
from famtree.search import SearchMatch, search
from famtree.view import PersonCard, person_card

__version__ = "0.1.0"

__all__ = [
    "Event",
    "EventType",
    "FamTreeError",
    "FamilyTree",
    "InMemoryHistory",
    "MalformedSource",
    "NavigationState",
    "Navigator",
    "Person",
    "PersonCard",
    "Pipeline",
    "RenderFrame",
    "SearchMatch",
    "SourceUnavailable",
    "TreeBuildError",
    "build_family_tree",
    "build_tree_from_source",
    "extract_year",
    "format_partner_span",
    "normalize_date",
    "person_card",
    "search",
]
