"""Logging utilities for the hmrc_rates package."""

from __future__ import annotations

import logging
from typing import Final

PACKAGE_LOGGER: Final[str] = "hmrc_rates"
LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Library code only emits records; handlers belong to the application.
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Return the logger for ``name`` without touching global logging state."""

    return logging.getLogger(name)


def configure_logging(level: int = logging.WARNING) -> None:
    """Install the package log format on the root logger (used by the CLI)."""

    logging.basicConfig(level=level, format=LOG_FORMAT)
