"""Logging helpers shared by the ledger modules.

``configure_root_logger`` installs a single stderr handler so diagnostics never
mix with ledger output on stdout. ``get_logger`` hands out module loggers.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

_LOGGER_INITIALISED = False


def _level_from_env() -> int:
    name = os.getenv("EXPENSE_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Configure the root logger once per process."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level if level is not None else _level_from_env())
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name)
