"""Haystack loading from plain-text word lists."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from pathlib import Path
from typing import Iterable


def parse_haystack_lines(lines: Iterable[str]) -> list[str]:
    """Parse haystack entries from text lines.

    Each non-blank line is one entry with surrounding whitespace removed. Lines
    starting with ``#`` are comments. File order and duplicates are kept so
    match indexes line up with the entries a user sees.

    Args:
        lines: Raw lines, with or without trailing newlines.

    Returns:
        Haystack entries in input order.
    """

    entries: list[str] = []
    for line in lines:
        entry = line.strip()
        if not entry or entry.startswith("#"):
            continue
        entries.append(entry)
    return entries


@dataclass(frozen=True)
class HaystackRepository:
    """Read-only, path-scoped haystack loaded once from a UTF-8 text file."""

    path: Path

    @cached_property
    def entries(self) -> tuple[str, ...]:
        """Load and cache haystack entries from disk.

        Returns:
            Immutable tuple of entries in file order.

        Raises:
            FileNotFoundError: If the configured haystack file does not exist.
        """

        if not self.path.exists():
            raise FileNotFoundError(f"Haystack file not found: {self.path}")

        with self.path.open("r", encoding="utf-8") as handle:
            return tuple(parse_haystack_lines(handle))
