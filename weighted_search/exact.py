"""
Exact matchers.

`exact_containing_match_score` uses the query as a regular expression, not as
literal text. Characters such as `(`, `[`, `*` or `?` keep their pattern
meaning, and an invalid pattern raises `re.error`. Callers passing untrusted
queries should `re.escape` them first.
"""

from __future__ import annotations

import re


def exact_match_score(query: str, body: str) -> int:
    return 1 if query == body else 0


def exact_containing_match_score(query: str, body: str) -> int:
    """Count non-overlapping matches of the `query` pattern in `body`."""
    pattern = re.compile(query)
    return sum(1 for _ in pattern.finditer(body))
