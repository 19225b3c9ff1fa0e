"""Exceptions raised by the seating chart engine."""

from __future__ import annotations

from typing import Optional


class SeatChartError(ValueError):
    """Base class for seating chart failures."""


class InvalidDimension(SeatChartError):
    """A chart was requested with fewer than one row or column."""

    def __init__(self, rows: int, columns: int):
        super().__init__(f"Number of rows and columns must be greater than 0 (got {rows}x{columns})")
        self.rows = rows
        self.columns = columns


class OutOfRange(SeatChartError):
    """A seat coordinate, or a whole row when ``column`` is None, does not
    exist in the chart."""

    def __init__(self, row: int, column: Optional[int] = None):
        if column is None:
            super().__init__(f"Row number does not exist : R{row}")
        else:
            super().__init__(f"Seat number does not exist : R{row}C{column}")
        self.row = row
        self.column = column
