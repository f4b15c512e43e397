"""Logging configuration for the command-line entry point.

Library modules only ever call ``logging.getLogger(__name__)``; handlers
are installed here, once, by the CLI.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: int) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("rentals").setLevel(level)
