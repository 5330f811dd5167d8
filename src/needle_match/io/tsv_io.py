"""TSV write helpers for resolved needle mappings."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from needle_match.models import ResolvedMapping

TSV_HEADER = ["needle", "index", "match"]


def write_tsv(
    mapping: ResolvedMapping,
    needles: Sequence[str],
    output_path: Path,
    include_header: bool = True,
) -> None:
    """Write resolved matches to a TSV file in needle order.

    Args:
        mapping: Resolved needle to match mapping.
        needles: Needles in the order rows should be written. Repeated needles
            are written once, at their first position.
        output_path: Destination TSV file path.
        include_header: Whether to include a header row.
    """

    with output_path.open("w", encoding="utf-8") as handle:
        if include_header:
            handle.write("\t".join(TSV_HEADER))
            handle.write("\n")
        for needle in dict.fromkeys(needles):
            match = mapping[needle]
            handle.write("\t".join([needle, str(match.index), match.value]))
            handle.write("\n")
