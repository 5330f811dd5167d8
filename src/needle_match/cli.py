"""CLI entrypoint for resolving abbreviated needles against a haystack."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from needle_match.comparators import COMPARATORS
from needle_match.errors import MatchError, MatchErrorKind
from needle_match.haystack import HaystackRepository
from needle_match.io.tsv_io import TSV_HEADER, write_tsv
from needle_match.logging import configure_logging
from needle_match.models import ResolvedMapping
from needle_match.resolver import best
from needle_match.validation import duplicate_needles, reject_duplicate_needles

logger = logging.getLogger(__name__)


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the resolve command.
    """

    parser = argparse.ArgumentParser(
        description="Resolve abbreviated needles to their unambiguous best haystack match."
    )
    parser.add_argument("needles", nargs="*", help="Abbreviated values to resolve.")
    parser.add_argument(
        "--haystack-file",
        type=Path,
        default=None,
        help="Text file with one haystack entry per line ('#' starts a comment line).",
    )
    parser.add_argument(
        "--item",
        action="append",
        default=[],
        help="Haystack entry; repeatable, appended after --haystack-file entries.",
    )
    parser.add_argument(
        "--comparator",
        choices=sorted(COMPARATORS),
        default="prefix",
        help="Lazy comparison used before exact-match precedence (default: prefix).",
    )
    parser.add_argument(
        "--output", type=Path, default=None, help="Write TSV here instead of printing a table."
    )
    parser.add_argument("--no-header", action="store_true", help="Do not write TSV header.")
    parser.add_argument(
        "--reject-duplicates",
        action="store_true",
        help="Fail when a needle is given more than once instead of keeping one result.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _load_haystack(
    parser: argparse.ArgumentParser,
    haystack_file: Path | None,
    items: Sequence[str],
) -> list[str]:
    """Combine file-based and inline haystack entries.

    Args:
        parser: Parser used to report a missing file as a usage error.
        haystack_file: Optional haystack file path.
        items: Inline haystack entries appended after file entries.

    Returns:
        Haystack entries in load order.

    Raises:
        SystemExit: With status 2 if ``haystack_file`` is given but missing.
    """

    entries: list[str] = []
    if haystack_file is not None:
        if not haystack_file.exists():
            parser.error(f"Haystack file not found: {haystack_file}")
        entries.extend(HaystackRepository(haystack_file).entries)
    entries.extend(items)
    return entries


def _print_resolution(mapping: ResolvedMapping, needles: Sequence[str]) -> None:
    """Print resolved matches as a table, one row per distinct needle in input order."""

    rows = [
        [needle, str(mapping[needle].index), mapping[needle].value]
        for needle in dict.fromkeys(needles)
    ]
    print(_format_table(TSV_HEADER, rows))


def _print_match_error(err: MatchError) -> None:
    """Print a resolution failure and, for ambiguous needles, every candidate."""

    print(err, file=sys.stderr)
    if err.kind is MatchErrorKind.AMBIGUOUS:
        for candidate in err.matches:
            print(f"\t{candidate}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through printed or written output.

    Returns:
        Zero on success, one when a needle cannot be resolved.
    """

    parser = build_arg_parser()
    args = parser.parse_intermixed_args(argv)

    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    haystack = _load_haystack(parser, args.haystack_file, args.item)

    if args.reject_duplicates:
        try:
            reject_duplicate_needles(args.needles)
        except ValueError as exc:
            parser.error(str(exc))
    else:
        for needle in duplicate_needles(args.needles):
            logger.warning("Needle %r given more than once; keeping a single result", needle)

    try:
        mapping = best(haystack, *args.needles, cmp=COMPARATORS[args.comparator])
    except MatchError as err:
        logger.debug("Resolution failed: %r", err)
        _print_match_error(err)
        return 1

    if args.output is not None:
        write_tsv(mapping, args.needles, output_path=args.output, include_header=not args.no_header)
        print(f"Wrote {len(mapping)} rows to {args.output}")
    else:
        _print_resolution(mapping, args.needles)
    return 0

