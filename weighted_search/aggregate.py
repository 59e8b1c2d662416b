"""
Weighted relevance search for a single (query, body) pair.

Summary:
- Normalizes both texts, tokenizes them, runs each enabled strategy and sums
  the weighted contributions. Strategies whose weight (or required
  multiplier) is 0 are not run at all.

Strategies:
- exact match: normalized query equals normalized body;
- exact containing match: occurrences of the query pattern in the body;
- single word match: every body occurrence of every query word;
- unique single word match: each distinct shared word once;
- consecutive word match: longest run of adjacent matching words, and the
  character length of that run.

Score range:
- Returns a float >= 0 with no upper bound (negative only with negative
  weights). No shared state: safe to call from several threads at once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .consecutive import consecutive_word_sequence_match_score
from .exact import exact_containing_match_score, exact_match_score
from .frequency import single_word_match_score, unique_single_word_match_score
from .normalize import normalize_text
from .options import SearchOptions, merge_options
from .registry import SCORER_REGISTRY
from .tokenize import tokenize_pair

logger = logging.getLogger(__name__)

OptionsLike = Optional[Union[SearchOptions, Mapping[str, Any]]]


@dataclass(frozen=True)
class SearchBreakdown:
    """Weighted contribution of each strategy to the final score."""

    exact_match: float = 0.0
    exact_containing_match: float = 0.0
    single_word_match: float = 0.0
    unique_single_word_match: float = 0.0
    consecutive_word_match: float = 0.0
    consecutive_word_sequence_match: float = 0.0

    @property
    def total(self) -> float:
        return float(
            self.exact_match
            + self.exact_containing_match
            + self.single_word_match
            + self.unique_single_word_match
            + self.consecutive_word_match
            + self.consecutive_word_sequence_match
        )


def _enabled(points: float, multiplier: float = 1) -> bool:
    return points != 0 and multiplier != 0


def score_breakdown(query: str, body: str, options: OptionsLike = None) -> SearchBreakdown:
    """Score `body` against `query` and return each strategy's contribution.

    `options` may be a complete ``SearchOptions`` or a partial mapping merged
    over the defaults (see ``merge_options``).

    Raises ``re.error`` when the normalized query is not a valid pattern and
    the exact containing match is enabled.
    """
    opts = merge_options(options)

    formatted_query = normalize_text(query, opts)
    formatted_body = normalize_text(body, opts)

    parts = {}

    if _enabled(opts.exact_match_points):
        parts["exact_match"] = opts.exact_match_points * exact_match_score(
            formatted_query, formatted_body
        )

    if _enabled(opts.exact_containing_match_points):
        parts["exact_containing_match"] = (
            opts.exact_containing_match_points
            * exact_containing_match_score(formatted_query, formatted_body)
        )

    single_enabled = _enabled(
        opts.single_word_match_points, opts.single_word_match_length_multiplier
    )
    unique_enabled = _enabled(
        opts.unique_single_word_match_points, opts.unique_single_word_match_length_multiplier
    )
    consecutive_enabled = _enabled(
        opts.consecutive_word_match_points, opts.consecutive_word_match_length_multiplier
    ) or _enabled(
        opts.consecutive_word_sequence_match_points,
        opts.consecutive_word_sequence_length_multiplier,
    )

    if single_enabled or unique_enabled or consecutive_enabled:
        query_words, body_words = tokenize_pair(formatted_query, formatted_body, opts)

        if single_enabled:
            parts["single_word_match"] = opts.single_word_match_points * single_word_match_score(
                query_words, body_words, opts.single_word_match_length_multiplier
            )

        if unique_enabled:
            parts["unique_single_word_match"] = (
                opts.unique_single_word_match_points
                * unique_single_word_match_score(
                    query_words, body_words, opts.unique_single_word_match_length_multiplier
                )
            )

        if consecutive_enabled:
            consecutive = consecutive_word_sequence_match_score(
                query_words,
                body_words,
                opts.consecutive_word_match_length_multiplier,
                opts.consecutive_word_sequence_length_multiplier,
            )
            parts["consecutive_word_match"] = (
                opts.consecutive_word_match_points * consecutive.consecutive_word_score
            )
            parts["consecutive_word_sequence_match"] = (
                opts.consecutive_word_sequence_match_points
                * consecutive.consecutive_word_sequence_score
            )

    breakdown = SearchBreakdown(**parts)
    logger.debug("search breakdown for query %r: %s", query, breakdown)
    return breakdown


def search(query: str, body: str, options: OptionsLike = None) -> float:
    """Return the relevance score of `body` for `query`.

    Higher is more relevant. See ``score_breakdown`` for the per-strategy
    parts and ``merge_options`` for how `options` is applied.

    The query is used as a regular expression by the exact containing match;
    escape untrusted queries with ``re.escape`` before calling.
    """
    return score_breakdown(query, body, options).total


def score_weighted_search(query: str, body: str) -> float:
    """Registry entry: `search` with the default options."""
    return search(query, body)


# Register in global registry
SCORER_REGISTRY["weighted_search"] = score_weighted_search
