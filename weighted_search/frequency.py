"""
Word frequency scoring.

Both scorers weight a shared word by its length and by
`custom_word_multiplier`, which damps single punctuation characters and a
few very common words so they cannot dominate the score.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

PUNCTUATION_SYMBOLS = frozenset(" `!@#$%^&*()_+-=[]{};':\"\\|,.<>/?~")
# matched case-sensitively, whatever the case-sensitivity option
STOP_WORDS = frozenset({"the", "a", "of", "I", "and"})


def custom_word_multiplier(word: str) -> float:
    if len(word) == 1 and word in PUNCTUATION_SYMBOLS:
        return 0.1
    if word in STOP_WORDS:
        return 0.5
    return 1.0


def single_word_match_score(
    query_words: Sequence[str],
    body_words: Sequence[str],
    length_multiplier: float,
) -> float:
    """Score every body occurrence of every query word.

    A word repeated in the query is counted once per repetition, and each
    time it earns points for every one of its occurrences in the body.
    """
    body_counts = Counter(body_words)
    score = 0.0
    for word in query_words:
        occurrences = body_counts[word]
        if occurrences:
            score += occurrences * len(word) * length_multiplier * custom_word_multiplier(word)
    return score


def unique_single_word_match_score(
    query_words: Sequence[str],
    body_words: Sequence[str],
    length_multiplier: float,
) -> float:
    """Score each distinct query word found in the body exactly once."""
    body_vocabulary = set(body_words)
    shared = dict.fromkeys(word for word in query_words if word in body_vocabulary)
    return sum(
        (len(word) * length_multiplier * custom_word_multiplier(word) for word in shared),
        0.0,
    )
