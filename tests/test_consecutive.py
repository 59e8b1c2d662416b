import pytest

from weighted_search.consecutive import (
    consecutive_word_sequence_match_score,
    longest_consecutive_run,
)


def test_run_ended_by_mismatch_is_recorded():
    assert longest_consecutive_run(["a", "b", "c"], ["a", "b", "x", "a"]) == (1, 1)


def test_scan_indexes_body_by_counter():
    query = ["a", "a", "a", "x"]
    body = ["a", "z", "a", "a", "q"]
    assert longest_consecutive_run(query, body) == (2, 2)


def test_run_without_mismatch_is_not_recorded():
    assert longest_consecutive_run(["a"], ["a"]) == (0, 0)


def test_past_end_counts_as_mismatch():
    assert longest_consecutive_run(["a", "a"], ["a", "a"]) == (1, 1)


def test_empty_inputs():
    assert longest_consecutive_run([], ["a"]) == (0, 0)
    assert longest_consecutive_run(["a"], []) == (0, 0)


def test_sequence_length_counts_characters():
    query = ["ab", "ab", "cd"]
    body = ["ab", "x", "ab", "y", "cd"]
    # the first "ab" run never hits a mismatch before the scan bound, so only
    # the run starting at query[1] is recorded
    assert longest_consecutive_run(query, body) == (1, 2)


def test_multipliers_applied():
    result = consecutive_word_sequence_match_score(["a", "b", "c"], ["a", "b", "x", "a"], 2, 1.5)
    assert result.consecutive_word_score == pytest.approx(2.0)
    assert result.consecutive_word_sequence_score == pytest.approx(1.5)
