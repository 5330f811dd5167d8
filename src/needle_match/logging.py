"""Shared logging helpers for needle_match entry points."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.WARNING, force: bool = False) -> None:
    """Initialise the root logger for command-line use.

    Library modules only emit DEBUG records, so the default WARNING level keeps
    normal runs quiet. Handlers are installed only when the root logger has none
    (or ``force=True``), but the root level is always set so repeated or
    embedded calls still honour ``level``.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    logging.getLogger().setLevel(level)
