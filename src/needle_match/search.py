"""Search primitives that apply a comparator across a haystack."""

from __future__ import annotations

from typing import Iterator, Sequence

from needle_match.comparators import Comparator
from needle_match.models import Match, Matches


def iter_needle(haystack: Sequence[str], cmp: Comparator, needle: str) -> Iterator[Match]:
    """Yield every haystack entry satisfying ``cmp(entry, needle)``.

    Args:
        haystack: Entries to search, in priority order.
        cmp: Comparator applied as ``cmp(entry, needle)``.
        needle: Search key.

    Yields:
        Matches in haystack order. Each call starts a fresh scan.
    """

    for index, entry in enumerate(haystack):
        if cmp(entry, needle):
            yield Match(index=index, value=entry)


def needle(haystack: Sequence[str], cmp: Comparator, needle: str) -> Matches:
    """Find one needle in a haystack.

    Args:
        haystack: Entries to search.
        cmp: Comparator applied as ``cmp(entry, needle)``.
        needle: Search key.

    Returns:
        All satisfying entries in haystack order; empty when nothing matches.
    """

    return Matches(tuple(iter_needle(haystack, cmp, needle)))


def needles(haystack: Sequence[str], cmp: Comparator, *needles: str) -> list[Matches]:
    """Find several needles, returning one ``Matches`` per needle in input order."""

    return [needle(haystack, cmp, item) for item in needles]


def needles_map(haystack: Sequence[str], cmp: Comparator, *needles: str) -> dict[str, Matches]:
    """Like :func:`needles`, but keyed by needle string.

    Duplicate needles collapse into one key. The later occurrence's result is
    stored, and the key keeps the position of its first occurrence.

    Returns:
        Mapping of needle to its matches, in needle input order.
    """

    mapping: dict[str, Matches] = {}
    for item in needles:
        mapping[item] = needle(haystack, cmp, item)
    return mapping
