"""Search for the best block of contiguous available seats."""

from __future__ import annotations

import math
from typing import Optional

from loguru import logger

from .ledger import SeatLedger
from .model import Block


def triangular_sum(n: int) -> int:
    """Sum of the integers from 0 to ``n`` inclusive."""
    if n < 0:
        raise ValueError("n must not be negative")
    return n * (n + 1) // 2


def min_achievable_cost(requested_size: int) -> int:
    """Smallest column-offset total any block of this size can have.

    This is the cost of a block centred on the middle column of the front
    row, ignoring where reserved seats and the chart edges fall.
    """
    return 2 * triangular_sum((requested_size - 1) // 2)


def find_best_block(ledger: SeatLedger, requested_size: int) -> Optional[Block]:
    """Return the available block of ``requested_size`` seats closest to the
    center of the front row, or ``None`` if there is none.

    Each row's chain of available seats is scanned with a sliding window.
    Ties keep the first block found, so the front-most and then left-most
    block wins.  Rows are skipped once no later row can beat the best cost.
    """
    if requested_size < 1 or requested_size > ledger.columns:
        return None

    best: Optional[Block] = None
    best_cost = math.inf
    floor = min_achievable_cost(requested_size)

    for row in range(1, ledger.rows + 1):
        window_size = 0
        window_cost = 0.0
        previous = None

        for seat in ledger.available_in_row(row):
            column = seat.column
            if previous is not None and previous.column != column - 1:
                # a reserved seat sits between the two
                window_size = 0
                window_cost = 0.0

            window_size += 1
            window_cost += seat.distance

            if window_size > requested_size:
                window_size -= 1
                window_cost -= ledger.seat(row, column - requested_size).distance

            if window_size == requested_size and window_cost < best_cost:
                best_cost = window_cost
                best = Block(row, column + 1 - requested_size, column)

            previous = seat

        next_floor = row + floor
        if best_cost < next_floor:
            if row < ledger.rows:
                logger.debug("Pruned rows {}-{}: best cost {} below floor {}",
                             row + 1, ledger.rows, best_cost, next_floor)
            break

    logger.debug("Best block for {} seat(s): {} (cost {})", requested_size, best, best_cost)
    return best
