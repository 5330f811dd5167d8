"""Reduce per-needle candidate lists to one winner using exact-match precedence."""

from __future__ import annotations

import logging
from typing import Mapping

from needle_match.comparators import cmp
from needle_match.errors import MatchError
from needle_match.models import Matches

logger = logging.getLogger(__name__)


def select_best(needle: str, matches: Matches) -> Matches:
    """Validate one needle's candidates and move the winner to the front.

    Rules, applied in order:

    1. A single candidate always wins, even when it is not an exact match.
    2. No candidates is a ``NO_MATCH`` failure.
    3. With two or more candidates, an entry exactly equal to ``needle`` wins
       and is moved to the front. Without one the needle is ambiguous.

    Args:
        needle: The needle the candidates were produced for.
        matches: Candidates in haystack order.

    Returns:
        ``matches`` with the winning entry at position 0.

    Raises:
        MatchError: When there is no candidate, or several candidates and none
            equals ``needle`` exactly.
    """

    if len(matches) == 1:
        return matches

    if not matches:
        raise MatchError.no_match(needle)

    exact = matches.find(needle, cmp)
    if exact is None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%r is ambiguous between %s", needle, matches.strings())
        raise MatchError.ambiguous(needle, matches)

    logger.debug(
        "%r matched %d entries; exact match at haystack index %d wins",
        needle,
        len(matches),
        exact.index,
    )
    return matches.promote(exact)


def filter_matches(matches: Mapping[str, Matches]) -> dict[str, Matches]:
    """Apply :func:`select_best` to every needle in mapping order.

    Args:
        matches: Needle to candidate mapping, typically from
            :func:`needle_match.search.needles_map`.

    Returns:
        New mapping with each candidate list's winner at the front. The input
        mapping is left untouched.

    Raises:
        MatchError: For the first needle that cannot be resolved.
    """

    return {needle: select_best(needle, candidates) for needle, candidates in matches.items()}
