"""
Consecutive word sequence scoring.

Rewards queries whose words appear in the body in the same order and
adjacency. For each query start word, the scan is bounded by how many times
that word occurs in the body, and the body index is the scan counter itself
(not the position of an occurrence):

    for i in range(len(query)):
        for k in range(count_in_body(query[i])):
            compare query[i + run] with body[k + run]

A run is only recorded when a mismatch ends it. A run that lasts until the
scan bound is exhausted is discarded, so a perfect match can score zero here.
Existing scores depend on this; keep it unless all stored scores are
recomputed.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence, Tuple


class ConsecutiveMatch(NamedTuple):
    consecutive_word_score: float
    consecutive_word_sequence_score: float


def _word_at(words: Sequence[str], index: int) -> Optional[str]:
    return words[index] if index < len(words) else None


def longest_consecutive_run(
    query_words: Sequence[str], body_words: Sequence[str]
) -> Tuple[int, int]:
    """Return ``(most_consecutive_words, longest_sequence_length)``."""
    most_words = 0
    longest_sequence = 0

    for first_query_word, start_word in enumerate(query_words):
        match_count = sum(1 for word in body_words if word == start_word)

        run = 0
        sequence = 0
        for first_body_word in range(match_count):
            query_word = _word_at(query_words, first_query_word + run)
            body_word = _word_at(body_words, first_body_word + run)
            # running off the end of either list ends the run
            if query_word is None or body_word is None or query_word != body_word:
                most_words = max(most_words, run)
                longest_sequence = max(longest_sequence, sequence)
                break

            sequence += len(body_word)
            run += 1

    return most_words, longest_sequence


def consecutive_word_sequence_match_score(
    query_words: Sequence[str],
    body_words: Sequence[str],
    word_multiplier: float,
    sequence_multiplier: float,
) -> ConsecutiveMatch:
    most_words, longest_sequence = longest_consecutive_run(query_words, body_words)
    return ConsecutiveMatch(
        consecutive_word_score=most_words * word_multiplier,
        consecutive_word_sequence_score=longest_sequence * sequence_multiplier,
    )
