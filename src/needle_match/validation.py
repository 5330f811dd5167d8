"""Validation helpers for needle lists supplied from outside Python code."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

MAX_PREVIEW_ERRORS = 25


def duplicate_needles(needles: Sequence[str]) -> list[str]:
    """Return needles given more than once, in first-occurrence order.

    The resolver keeps only one result per distinct needle, so callers that
    care about repeated input can detect it up front.
    """

    counts = Counter(needles)
    return [item for item in counts if counts[item] > 1]


def reject_duplicate_needles(needles: Sequence[str]) -> None:
    """Validate that no needle occurs more than once.

    Args:
        needles: Needles in input order.

    Raises:
        ValueError: Listing each repeated needle and its count.
    """

    counts = Counter(needles)
    errors = [f"'{item}' given {counts[item]} times" for item in duplicate_needles(needles)]
    if errors:
        preview = "\n".join(f"- {item}" for item in errors[:MAX_PREVIEW_ERRORS])
        rest = len(errors) - min(MAX_PREVIEW_ERRORS, len(errors))
        more = f"\n- ... and {rest} more" if rest > 0 else ""
        raise ValueError(f"Needle validation failed with {len(errors)} errors:\n{preview}{more}")
