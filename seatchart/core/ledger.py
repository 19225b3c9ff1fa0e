"""Seat ledger: the grid of seats and the per-row chains of available seats.

Every row keeps a doubly-linked chain of its unreserved seats ordered by
column.  Links are stored as column numbers on each :class:`Seat` rather than
as object references, so reserving a seat unlinks it in constant time and a
scan of a row only ever visits seats that are still available.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from loguru import logger

from .errors import InvalidDimension, OutOfRange
from .model import Block, Seat

RESERVED_MARK = "X"
AVAILABLE_MARK = "O"


class SeatLedger:
    """Seating chart of ``rows`` x ``columns`` seats, both 1-indexed."""

    def __init__(self, rows: int, columns: int):
        if rows < 1 or columns < 1:
            raise InvalidDimension(rows, columns)

        self._rows = rows
        self._columns = columns
        center = (columns + 1) / 2
        self._seats: List[List[Seat]] = []
        self._heads: List[Optional[int]] = []
        for row in range(1, rows + 1):
            seats = []
            for column in range(1, columns + 1):
                seats.append(Seat(
                    row=row,
                    column=column,
                    distance=(row - 1) + abs(column - center),
                    prev=column - 1 if column > 1 else None,
                    next=column + 1 if column < columns else None,
                ))
            self._seats.append(seats)
            self._heads.append(1)
        self._available = rows * columns

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    def seat_exists(self, row: int, column: int) -> bool:
        return 1 <= row <= self._rows and 1 <= column <= self._columns

    def seat(self, row: int, column: int) -> Seat:
        if not self.seat_exists(row, column):
            raise OutOfRange(row, column)
        return self._seats[row - 1][column - 1]

    def head(self, row: int) -> Optional[int]:
        """Column of the first available seat in ``row`` or ``None``."""
        if not 1 <= row <= self._rows:
            raise OutOfRange(row)
        return self._heads[row - 1]

    def available_in_row(self, row: int) -> Iterator[Seat]:
        """Yield the available seats of ``row`` in increasing column order."""
        column = self.head(row)
        seats = self._seats[row - 1]
        while column is not None:
            seat = seats[column - 1]
            yield seat
            column = seat.next

    def available_count(self) -> int:
        return self._available

    def is_reserved(self, row: int, column: int) -> bool:
        return self.seat(row, column).reserved

    def reserve_seat(self, row: int, column: int) -> bool:
        """Reserve a single seat.

        Returns ``False`` without touching the chart if the seat does not
        exist or was already reserved.
        """
        if not self.seat_exists(row, column):
            logger.debug("Reservation of R{}C{} rejected: no such seat", row, column)
            return False

        seat = self._seats[row - 1][column - 1]
        if seat.reserved:
            logger.debug("Reservation of R{}C{} rejected: already reserved", row, column)
            return False

        seat.reserved = True
        self._unlink(seat)
        self._available -= 1
        logger.debug("Reserved R{}C{} ({} seats left)", row, column, self._available)
        return True

    def _unlink(self, seat: Seat) -> None:
        seats = self._seats[seat.row - 1]
        if seat.next is not None:
            seats[seat.next - 1].prev = seat.prev
        if seat.prev is not None:
            seats[seat.prev - 1].next = seat.next
        else:
            self._heads[seat.row - 1] = seat.next
        seat.prev = None
        seat.next = None

    def reserve_group(self, block: Block) -> bool:
        """Reserve every seat of ``block`` or none of them.

        The block may have been computed before other reservations were made,
        so every seat is checked again before anything is reserved.
        """
        for column in block.columns():
            if not self.seat_exists(block.row, column) or self._seats[block.row - 1][column - 1].reserved:
                logger.warning("Group {} cannot be reserved: R{}C{} is unavailable", block, block.row, column)
                return False

        for column in block.columns():
            self.reserve_seat(block.row, column)
        return True

    def block_cost(self, block: Block) -> float:
        """Sum of the distances of the seats in ``block``."""
        return sum(self.seat(block.row, column).distance for column in block.columns())

    def render(self) -> str:
        """Tabular view of the chart: ``X`` reserved, ``O`` available."""
        lines = ["Row #"]
        for row, seats in enumerate(self._seats, start=1):
            marks = "".join(RESERVED_MARK if s.reserved else AVAILABLE_MARK for s in seats)
            lines.append(f"{row}\t{marks}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SeatLedger(rows={self._rows}, columns={self._columns}, available={self._available})"
