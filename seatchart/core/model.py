from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Seat:
    """One seat of the chart plus its links in the row's available chain.

    ``prev`` and ``next`` are the columns of the nearest still-available seats
    in the same row, or ``None`` at either end of the chain.
    """
    row: int
    column: int
    distance: float
    reserved: bool = False
    prev: Optional[int] = None
    next: Optional[int] = None


@dataclass(frozen=True)
class Block:
    """A contiguous run of columns in a single row."""
    row: int
    first_column: int
    last_column: int

    def __post_init__(self):
        if self.first_column > self.last_column:
            raise ValueError(f"Block columns out of order: {self.first_column} > {self.last_column}")

    @property
    def size(self) -> int:
        return self.last_column - self.first_column + 1

    def columns(self) -> range:
        return range(self.first_column, self.last_column + 1)

    def __str__(self) -> str:
        prefix = f"R{self.row}C"
        if self.first_column == self.last_column:
            return f"{prefix}{self.first_column}"
        return f"{prefix}{self.first_column} - {prefix}{self.last_column}"
