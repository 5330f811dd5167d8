"""Resolve abbreviated needles to their single best haystack entry.

The resolver favors exact matches over lazy ones: a needle that lazily matches
several entries still resolves when one of them equals the needle exactly.
Any needle that matches nothing, or matches several entries without an exact
winner, aborts the whole resolution with a :class:`MatchError`.

Example:
    >>> best(["Apple", "Eggplant", "Pear", "Peach"], "App", "eg")["eg"].value
    'Eggplant'
"""

from __future__ import annotations

import logging
from typing import Sequence

from needle_match.comparators import Comparator, cmp_prefix
from needle_match.disambiguation import filter_matches
from needle_match.models import ResolvedMapping
from needle_match.search import needles_map

logger = logging.getLogger(__name__)


def best_func(haystack: Sequence[str], cmp: Comparator, *needles: str) -> ResolvedMapping:
    """Map every needle to its best match using a custom lazy comparator.

    Exact matches still take precedence over matches found by ``cmp``.

    Args:
        haystack: Entries to resolve against.
        cmp: Lazy comparator applied as ``cmp(entry, needle)``.
        *needles: Needles to resolve. Duplicates collapse into one key.

    Returns:
        Mapping of each distinct needle to its winning match. Empty when no
        needles are given.

    Raises:
        MatchError: For the first needle, in input order, that has no match or
            an ambiguous set of matches. No partial mapping is returned.
    """

    candidates = needles_map(haystack, cmp, *needles)
    filtered = filter_matches(candidates)
    resolved = {needle: matches[0] for needle, matches in filtered.items()}
    logger.debug("Resolved %d needles against %d haystack entries", len(resolved), len(haystack))
    return resolved


def best(
    haystack: Sequence[str],
    *needles: str,
    cmp: Comparator = cmp_prefix,
) -> ResolvedMapping:
    """Map every needle to its best match, defaulting to case-insensitive prefixes.

    See :func:`best_func` for the resolution rules and failure modes.
    """

    return best_func(haystack, cmp, *needles)


def best_values(
    haystack: Sequence[str],
    *needles: str,
    cmp: Comparator = cmp_prefix,
) -> dict[str, str]:
    """Like :func:`best`, but return matched strings instead of ``Match`` records."""

    return {needle: match.value for needle, match in best_func(haystack, cmp, *needles).items()}
