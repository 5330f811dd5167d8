"""Data models shared by the search, disambiguation and resolver layers.

A ``Match`` records one haystack hit and ``Matches`` is the ordered collection
of hits for a single needle. Both are immutable so results can be handed to
callers without copying and compared directly in tests.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Iterator, overload

from needle_match.comparators import Comparator


@dataclass(frozen=True)
class Match:
    """One haystack entry that satisfied a comparator for a needle.

    ``index`` is the entry's position in the haystack the match was produced
    from and ``value`` is the entry itself.
    """

    index: int
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Matches(Sequence):
    """Ordered, immutable collection of matches for one needle.

    Entries keep haystack order unless :meth:`promote` moved a winner to the
    front.
    """

    items: tuple[Match, ...] = field(default_factory=tuple)

    @overload
    def __getitem__(self, index: int) -> Match: ...

    @overload
    def __getitem__(self, index: slice) -> Matches: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Matches(self.items[index])
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Match]:
        return iter(self.items)

    def find(self, needle: str, cmp: Comparator) -> Match | None:
        """Return the first match whose value satisfies ``cmp(value, needle)``.

        Args:
            needle: Search key compared against each matched value.
            cmp: Comparator applied as ``cmp(value, needle)``.

        Returns:
            The first satisfying match, or ``None`` when there is none.
        """

        for match in self.items:
            if cmp(match.value, needle):
                return match
        return None

    def exists(self, needle: str, cmp: Comparator) -> bool:
        """Return whether any match satisfies ``cmp(value, needle)``."""

        return self.find(needle, cmp) is not None

    def strings(self) -> list[str]:
        """Return matched values as a plain list in collection order."""

        return [match.value for match in self.items]

    def promote(self, match: Match) -> Matches:
        """Return a copy with ``match`` moved to the front.

        The remaining entries keep their relative order.

        Raises:
            ValueError: If ``match`` is not part of this collection.
        """

        position = self.items.index(match)
        if position == 0:
            return self
        rest = self.items[:position] + self.items[position + 1 :]
        return Matches((match, *rest))


ResolvedMapping = dict[str, Match]
