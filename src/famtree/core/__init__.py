from famtree.core.exceptions import (
    FamTreeError,
    MalformedSource,
    SourceError,
    SourceUnavailable,
    TreeBuildError,
)

__all__ = [
    "FamTreeError",
    "MalformedSource",
    "SourceError",
    "SourceUnavailable",
    "TreeBuildError",
]
