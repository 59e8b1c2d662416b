"""Split normalized text into tokens."""

from __future__ import annotations

from itertools import groupby
from typing import List, Tuple

from .normalize import is_whitespace_char, is_word_char
from .options import SearchOptions


def split_keeping_delimiters(text: str) -> List[str]:
    """Split on runs of non-word characters, keeping each run as a token.

    Tokens alternate word run / delimiter run and the list always starts and
    ends with a word run, which is "" when `text` starts or ends with a
    delimiter:

    >>> split_keeping_delimiters("hi, there")
    ['hi', ', ', 'there']
    >>> split_keeping_delimiters("(a)")
    ['', '(', 'a', ')', '']
    """
    runs = [(is_word, "".join(chars)) for is_word, chars in groupby(text, key=is_word_char)]
    if not runs:
        return [""]

    tokens = [chunk for _, chunk in runs]
    if not runs[0][0]:
        tokens.insert(0, "")
    if not runs[-1][0]:
        tokens.append("")
    return tokens


def split_words(text: str) -> List[str]:
    """Return maximal runs of non-whitespace characters."""
    return [
        "".join(chars)
        for is_space, chars in groupby(text, key=is_whitespace_char)
        if not is_space
    ]


def tokenize(
    text: str,
    should_match_whitespace_and_punctuation: bool,
    should_match_punctuation: bool,
) -> List[str]:
    if should_match_whitespace_and_punctuation:
        return split_keeping_delimiters(text)

    words = split_words(text)
    if not should_match_punctuation:
        # drop fragments that are whitespace only
        words = [word for word in words if any(not is_whitespace_char(ch) for ch in word)]
    return words


def tokenize_pair(query: str, body: str, options: SearchOptions) -> Tuple[List[str], List[str]]:
    """Tokenize query and body with the same mode."""
    mode = (
        options.should_match_whitespace_and_punctuation,
        options.should_match_punctuation,
    )
    return tokenize(query, *mode), tokenize(body, *mode)
