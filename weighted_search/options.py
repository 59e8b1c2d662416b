"""
Search configuration.

`SearchOptions` holds the weights, multipliers and flags that drive scoring.
`DEFAULT_SEARCH_OPTIONS` is the constant default record; `merge_options`
shallow-merges a partial override over it. Values are never range-checked:
negative or fractional weights simply scale the score.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchOptions:
    """Weights and switches for the scoring strategies."""

    # points for a normalized query equal to the normalized body
    exact_match_points: float = 70
    # points per occurrence of the query inside the body
    exact_containing_match_points: float = 50
    # points for every body occurrence of a query word
    single_word_match_points: float = 1
    single_word_match_length_multiplier: float = 1.5
    # points for every distinct query word found in the body
    unique_single_word_match_points: float = 2
    unique_single_word_match_length_multiplier: float = 1.5
    # points for the longest run of consecutive matching words
    consecutive_word_match_points: float = 5
    consecutive_word_match_length_multiplier: float = 2
    # points for the character length of that run
    consecutive_word_sequence_match_points: float = 1
    consecutive_word_sequence_length_multiplier: float = 1.5
    is_case_sensitive: bool = False
    # when False, punctuation is stripped from both texts
    should_match_punctuation: bool = True
    # when True, whitespace and punctuation runs are kept as tokens
    should_match_whitespace_and_punctuation: bool = True
    should_collapse_whitespace: bool = True


DEFAULT_SEARCH_OPTIONS = SearchOptions()

_FIELD_NAMES = frozenset(f.name for f in fields(SearchOptions))


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


# camelCase spellings, e.g. "exactMatchPoints", shared with non-Python clients
OPTION_ALIASES: Dict[str, str] = {_camel_case(name): name for name in _FIELD_NAMES}


def merge_options(
    overrides: Optional[Union[SearchOptions, Mapping[str, Any]]] = None,
) -> SearchOptions:
    """Return the effective options for one search call.

    - ``None`` gives the defaults.
    - A complete ``SearchOptions`` is used as-is.
    - A mapping is merged over the defaults; keys set to ``None`` keep their
      default. Both snake_case and camelCase keys are accepted. Unknown keys
      are ignored with a warning.
    """
    if overrides is None:
        return DEFAULT_SEARCH_OPTIONS
    if isinstance(overrides, SearchOptions):
        return overrides

    changes: Dict[str, Any] = {}
    for key, value in overrides.items():
        name = OPTION_ALIASES.get(key, key)
        if name not in _FIELD_NAMES:
            logger.warning("Ignoring unknown search option %r", key)
            continue
        if value is None:
            continue
        changes[name] = value

    if not changes:
        return DEFAULT_SEARCH_OPTIONS
    return replace(DEFAULT_SEARCH_OPTIONS, **changes)
