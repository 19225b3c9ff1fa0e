"""Console logging for the command-line tools."""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = " | ".join(
    (
        "<lk>{time:HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        "<c>{name}:{function}:{line}</>",
        "{message}",
    )
)


def configure_logging(level: str = "WARNING") -> None:
    """Send package logs at ``level`` and above to stderr."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
    logger.enable("seatchart")
