"""Logging configuration utilities for Tent."""

import logging
import os
from typing import Optional

import click

_LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)


class ClickEchoHandler(logging.Handler):
    """Send records to whatever stderr click currently writes to."""

    def emit(self, record):
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure logging for the tent package once; later calls only adjust the level."""
    log_level = (level or os.getenv("TENT_LOG_LEVEL") or "WARNING").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        log_level = "WARNING"

    logger = logging.getLogger("tent")
    logger.setLevel(log_level)
    if logger.handlers:
        return

    handler = ClickEchoHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
