"""Seating chart reservations and best-block allocation."""

from __future__ import annotations

from loguru import logger

from .core.errors import InvalidDimension, OutOfRange, SeatChartError
from .core.ledger import SeatLedger
from .core.model import Block, Seat
from .core.selector import find_best_block

# silent when used as a library; the CLI turns logging back on
logger.disable("seatchart")

__all__ = [
    "Block",
    "InvalidDimension",
    "OutOfRange",
    "Seat",
    "SeatChartError",
    "SeatLedger",
    "find_best_block",
]
