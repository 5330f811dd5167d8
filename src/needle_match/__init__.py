"""Resolve abbreviated needle strings to their best match in a haystack."""

from .comparators import Comparator, cmp, cmp_lower, cmp_prefix
from .errors import MatchError, MatchErrorKind
from .models import Match, Matches, ResolvedMapping
from .resolver import best, best_func, best_values
from .search import iter_needle, needle, needles, needles_map

__all__ = [
    "Comparator",
    "Match",
    "MatchError",
    "MatchErrorKind",
    "Matches",
    "ResolvedMapping",
    "best",
    "best_func",
    "best_values",
    "cmp",
    "cmp_lower",
    "cmp_prefix",
    "iter_needle",
    "needle",
    "needles",
    "needles_map",
]
