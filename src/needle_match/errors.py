"""Structured errors raised when a needle cannot be resolved."""

from __future__ import annotations

from enum import Enum

from needle_match.models import Matches


class MatchErrorKind(Enum):
    """Reason a needle failed to resolve to a single match."""

    NO_MATCH = "no_match"
    AMBIGUOUS = "ambiguous"


class MatchError(ValueError):
    """A needle matched nothing, or matched several entries with no exact winner.

    Attributes:
        message: Human-readable description, also returned by ``str()``.
        needle: The needle that failed to resolve.
        matches: Every candidate found for ``needle``. Empty for
            ``NO_MATCH``; two or more entries for ``AMBIGUOUS``.
        kind: Failure category for ``match``/``case`` dispatch.
    """

    def __init__(self, message: str, needle: str, matches: Matches, kind: MatchErrorKind) -> None:
        super().__init__(message, needle, matches, kind)
        self.message = message
        self.needle = needle
        self.matches = matches
        self.kind = kind

    @classmethod
    def no_match(cls, needle: str) -> MatchError:
        """Build the error for a needle with no candidates."""

        return cls(f"{needle} matches no fields", needle, Matches(), MatchErrorKind.NO_MATCH)

    @classmethod
    def ambiguous(cls, needle: str, matches: Matches) -> MatchError:
        """Build the error for a needle with several candidates and no exact winner."""

        return cls(
            f"{needle} matches {len(matches)} fields",
            needle,
            matches,
            MatchErrorKind.AMBIGUOUS,
        )

    @property
    def multi_match(self) -> bool:
        """Return ``True`` if the failure was caused by multiple candidates."""

        return len(self.matches) > 1

    @property
    def is_ambiguous(self) -> bool:
        """Alias of :attr:`multi_match`."""

        return self.multi_match

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"MatchError(needle={self.needle!r}, kind={self.kind.name}, "
            f"matches={self.matches.strings()!r})"
        )
