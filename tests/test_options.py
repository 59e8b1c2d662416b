import dataclasses
import logging

import pytest

from weighted_search.options import DEFAULT_SEARCH_OPTIONS, SearchOptions, merge_options


def test_defaults():
    d = DEFAULT_SEARCH_OPTIONS
    assert d.exact_match_points == 70
    assert d.exact_containing_match_points == 50
    assert d.single_word_match_points == 1
    assert d.single_word_match_length_multiplier == 1.5
    assert d.unique_single_word_match_points == 2
    assert d.unique_single_word_match_length_multiplier == 1.5
    assert d.consecutive_word_match_points == 5
    assert d.consecutive_word_match_length_multiplier == 2
    assert d.consecutive_word_sequence_match_points == 1
    assert d.consecutive_word_sequence_length_multiplier == 1.5
    assert d.is_case_sensitive is False
    assert d.should_match_punctuation is True
    assert d.should_match_whitespace_and_punctuation is True
    assert d.should_collapse_whitespace is True


def test_defaults_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_SEARCH_OPTIONS.exact_match_points = 1  # type: ignore[misc]


def test_merge_none_returns_defaults():
    assert merge_options() == DEFAULT_SEARCH_OPTIONS
    assert merge_options({}) == DEFAULT_SEARCH_OPTIONS


def test_merge_is_shallow_and_keeps_other_defaults():
    opts = merge_options({"exact_match_points": 10, "isCaseSensitive": True})
    assert opts.exact_match_points == 10
    assert opts.is_case_sensitive is True
    assert opts.exact_containing_match_points == 50
    assert DEFAULT_SEARCH_OPTIONS.exact_match_points == 70


def test_merge_none_value_falls_back_to_default():
    opts = merge_options({"singleWordMatchPoints": None, "shouldCollapseWhitespace": False})
    assert opts.single_word_match_points == 1
    assert opts.should_collapse_whitespace is False


def test_merge_accepts_negative_and_fractional_values():
    opts = merge_options({"exactMatchPoints": -2.5, "consecutive_word_match_length_multiplier": 0.25})
    assert opts.exact_match_points == -2.5
    assert opts.consecutive_word_match_length_multiplier == 0.25


def test_merge_passes_complete_options_through():
    custom = SearchOptions(exact_match_points=1)
    assert merge_options(custom) is custom


def test_merge_ignores_unknown_keys_with_warning(caplog):
    caplog.set_level(logging.WARNING, logger="weighted_search.options")
    opts = merge_options({"exactMatchPointz": 3})
    assert opts == DEFAULT_SEARCH_OPTIONS
    assert "exactMatchPointz" in caplog.text
