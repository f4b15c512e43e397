"""Runtime configuration.

Defaults live here; the CLI's root options override them and click reads
the matching environment variables through ``envvar``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rentals.domain.model.value_objects import DEFAULT_CURRENCY

DATA_DIR_ENV = "RENTALS_DATA_DIR"
CURRENCY_ENV = "RENTALS_CURRENCY"
LOG_LEVEL_ENV = "RENTALS_LOG_LEVEL"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:

    data_dir: Path = DEFAULT_DATA_DIR
    currency: str = DEFAULT_CURRENCY
    log_level: int = logging.WARNING


def parse_log_level(raw: str) -> int:
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {raw!r}")
    return level


def verbosity_to_level(verbose: int, base: int = logging.WARNING) -> int:
    """Each -v lowers the threshold one step, down to DEBUG."""
    return max(logging.DEBUG, base - 10 * verbose)
