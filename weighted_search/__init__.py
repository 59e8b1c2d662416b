"""
Weighted text search scorer.

Exposes `search`, the configuration record and its defaults, and
`SCORER_REGISTRY`. Importing the package registers the `weighted_search`
scorer into the registry.
"""

from .options import DEFAULT_SEARCH_OPTIONS, SearchOptions, merge_options  # noqa: F401
from .registry import SCORER_REGISTRY  # noqa: F401

# side-effect: registers 'weighted_search'
from .aggregate import SearchBreakdown, score_breakdown, search  # noqa: F401

__all__ = [
    "DEFAULT_SEARCH_OPTIONS",
    "SCORER_REGISTRY",
    "SearchBreakdown",
    "SearchOptions",
    "merge_options",
    "score_breakdown",
    "search",
]
