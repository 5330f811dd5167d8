"""Unit tests for the command-line interface."""

from __future__ import annotations

import inspect
import logging
from pathlib import Path
from typing import Iterator

import pytest

from needle_match import cli
from needle_match.cli import _format_table, build_arg_parser, main

PRODUCTS = ["--item", "Apple", "--item", "Eggplant", "--item", "Pear", "--item", "Peach"]


@pytest.fixture
def restore_root_level() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_format_table_pads_columns() -> None:
    table = _format_table(["needle", "match"], [["eg", "Eggplant"]])

    assert table.splitlines() == [
        "needle | match   ",
        "-------+---------",
        "eg     | Eggplant",
    ]


def test_arg_parser_defaults() -> None:
    args = build_arg_parser().parse_args([])

    assert args.needles == []
    assert args.item == []
    assert args.comparator == "prefix"
    assert args.output is None
    assert not args.reject_duplicates


def test_main_prints_resolved_table(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([*PRODUCTS, "App", "eg", "Peac"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split() == ["needle", "|", "index", "|", "match"]
    assert [line.split(" | ")[-1].strip() for line in lines[2:]] == ["Apple", "Eggplant", "Peach"]


def test_main_reports_ambiguous_candidates(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([*PRODUCTS, "Egg", "Pea"]) == 1

    err = capsys.readouterr().err.splitlines()
    assert err == ["Pea matches 2 fields", "\tPear", "\tPeach"]


def test_main_reports_missing_needle(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([*PRODUCTS, "Kiwi"]) == 1

    assert capsys.readouterr().err.splitlines() == ["Kiwi matches no fields"]


def test_main_exact_comparator(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([*PRODUCTS, "--comparator", "exact", "App"]) == 1
    assert main([*PRODUCTS, "--comparator", "lower", "pear"]) == 0
    assert "Pear" in capsys.readouterr().out


def test_main_warns_on_duplicate_needles(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="needle_match.cli"):
        assert main([*PRODUCTS, "eg", "eg"]) == 0

    assert "given more than once" in caplog.text


def test_main_rejects_duplicate_needles_when_requested() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([*PRODUCTS, "--reject-duplicates", "eg", "eg"])

    assert exc_info.value.code == 2


def test_main_missing_haystack_file_is_usage_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--haystack-file", str(tmp_path / "nope.txt"), "a"])

    assert exc_info.value.code == 2
    assert "Haystack file not found" in capsys.readouterr().err


def test_main_accepts_needles_around_options(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["App", "--item", "Apple", "--item", "Pear", "Pe"]) == 0

    out = capsys.readouterr().out
    assert [line.split(" | ")[0].strip() for line in out.splitlines()[2:]] == ["App", "Pe"]


def test_main_verbose_emits_disambiguation_debug_records(
    caplog: pytest.LogCaptureFixture, restore_root_level: None
) -> None:
    assert main([*PRODUCTS, "Pea"]) == 1
    assert "is ambiguous between" not in caplog.text

    assert main(["-v", *PRODUCTS, "Pea"]) == 1

    assert any(
        record.name == "needle_match.disambiguation"
        and record.levelno == logging.DEBUG
        and "is ambiguous between ['Pear', 'Peach']" in record.getMessage()
        for record in caplog.records
    )


def test_cli_module_has_no_script_guard() -> None:
    # Run through ``python -m needle_match``; the package's logging module
    # would shadow the stdlib one if cli.py were executed as a script.
    assert 'if __name__ == "__main__"' not in inspect.getsource(cli)


def test_private_output_helpers_are_documented() -> None:
    assert cli._print_resolution.__doc__
    assert cli._load_haystack.__doc__
