"""Media utilities public API (re-exports)."""

from .matcher import DEFAULT_BEST_MATCH, BestMatch, werkzeug_best_match

__all__ = [
    "BestMatch",
    "DEFAULT_BEST_MATCH",
    "werkzeug_best_match",
]
