"""Logging helpers with consistent formatting."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from rich.logging import RichHandler

RICH_LOGS_ENV = "OTPEXTRACT_RICH_LOGS"
_OFF_VALUES = {"0", "false", "no", "off", "plain"}


def rich_logs_enabled() -> bool:
    """Rich output unless OTPEXTRACT_RICH_LOGS is set to an off value."""
    value = (os.getenv(RICH_LOGS_ENV) or "").strip().lower()
    return value not in _OFF_VALUES


def get_logger(name: str, level: int = logging.INFO, *, rich: Optional[bool] = None) -> logging.Logger:
    """Configure and return a logger.

    ``rich`` defaults to the ``OTPEXTRACT_RICH_LOGS`` flag (on unless disabled).
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    if rich is None:
        rich = rich_logs_enabled()

    if rich:
        handler: logging.Handler = RichHandler(
            level=level,
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            show_time=True,
            show_path=False,
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s %(name)s %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.propagate = False
    return logger


def set_level(name: str, level: int) -> None:
    """Adjust an already configured logger and its handlers."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
