"""String comparison predicates used to match needles against a haystack.

Every comparator takes ``(a, b)`` where ``a`` is the haystack entry and ``b`` is
the needle, and returns ``True`` when the entry satisfies the needle.
"""

from __future__ import annotations

from typing import Callable

Comparator = Callable[[str, str], bool]


def cmp(a: str, b: str) -> bool:
    """Return ``True`` if ``a`` and ``b`` are identical."""

    return a == b


def cmp_lower(a: str, b: str) -> bool:
    """Return ``True`` if ``a`` and ``b`` are equal once lowercased."""

    return a.lower() == b.lower()


def cmp_prefix(a: str, b: str) -> bool:
    """Return ``True`` if ``b`` is a prefix of ``a`` when both are lowercased.

    An empty ``b`` is a prefix of every string.
    """

    return a.lower().startswith(b.lower())


COMPARATORS: dict[str, Comparator] = {
    "exact": cmp,
    "lower": cmp_lower,
    "prefix": cmp_prefix,
}
