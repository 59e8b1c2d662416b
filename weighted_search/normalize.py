"""
Text normalization applied to query and body before matching.

Character classes are explicit sets rather than regular expressions so that
exactly which characters count as word, whitespace or punctuation is visible
in one place.

Steps, in order:
- case folding (unless case-sensitive);
- punctuation stripping (unless punctuation should match): `/#%&=-` become a
  space, quotes/brackets/sentence punctuation are deleted;
- whitespace collapsing: runs of two or more whitespace characters become a
  single space. Runs created by punctuation stripping are collapsed too.
"""

from __future__ import annotations

import string
from itertools import groupby

from .options import SearchOptions

WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")

# ECMAScript whitespace and line terminators
WHITESPACE_CHARS = frozenset(
    " \t\n\v\f\r\u00a0\u1680"
    + "".join(chr(cp) for cp in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# replaced by a space so that "rock-paper" still splits into two words
SPACED_PUNCTUATION = frozenset("/#%&=-")
DELETED_PUNCTUATION = frozenset(".,'!$^*;:{}`~()")


def is_word_char(ch: str) -> bool:
    return ch in WORD_CHARS


def is_whitespace_char(ch: str) -> bool:
    return ch in WHITESPACE_CHARS


def strip_punctuation(text: str) -> str:
    """Replace spaced punctuation with a space, then drop deleted punctuation."""
    spaced = "".join(" " if ch in SPACED_PUNCTUATION else ch for ch in text)
    return "".join(ch for ch in spaced if ch not in DELETED_PUNCTUATION)


def collapse_whitespace(text: str) -> str:
    """Collapse runs of 2+ whitespace characters into one space.

    A single whitespace character is kept as-is, so a lone tab stays a tab.
    Applying this twice gives the same result as applying it once.
    """
    parts = []
    for is_space, run in groupby(text, key=is_whitespace_char):
        chunk = "".join(run)
        if is_space and len(chunk) > 1:
            chunk = " "
        parts.append(chunk)
    return "".join(parts)


def normalize_text(text: str, options: SearchOptions) -> str:
    """Prepare `text` for matching according to `options`."""
    if not options.is_case_sensitive:
        text = text.lower()

    if not options.should_match_punctuation:
        text = strip_punctuation(text)

    if options.should_collapse_whitespace:
        text = collapse_whitespace(text)

    return text
