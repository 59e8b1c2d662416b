"""
Global scorer registry.

Exposes `SCORER_REGISTRY`: a mapping from a string key to a callable of the
form `(query: str, body: str) -> float` that returns a relevance score. Scores
are unbounded above; higher means more relevant.
"""

from typing import Callable, Dict

SCORER_REGISTRY: Dict[str, Callable[[str, str], float]] = {}
