"""Unit tests for haystack file loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from needle_match.haystack import HaystackRepository, parse_haystack_lines


def test_parse_haystack_lines_skips_blank_and_comment_lines() -> None:
    lines = iter(["# fruit\n", "Apple\n", "\n", "  Pear  \n", "Apple\n", "Peach"])

    assert parse_haystack_lines(lines) == ["Apple", "Pear", "Apple", "Peach"]


def test_repository_loads_entries_once(tmp_path: Path) -> None:
    path = tmp_path / "haystack.txt"
    path.write_text("Apple\nPear\n", encoding="utf-8")
    repo = HaystackRepository(path)

    assert repo.entries == ("Apple", "Pear")
    path.write_text("Changed\n", encoding="utf-8")
    assert repo.entries == ("Apple", "Pear")


def test_repository_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Haystack file not found"):
        HaystackRepository(tmp_path / "missing.txt").entries
