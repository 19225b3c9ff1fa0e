"""Line-oriented reservation session.

The first input line lists seats that are already taken, as space separated
codes of the form ``R<row>C<column>``.  Every following line holds the size
of a group to seat together.  For each group the best available block is
reserved and printed, or ``Not Available`` if there is none.  Once the input
is exhausted the number of remaining seats is printed.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, TextIO

from loguru import logger

from seatchart.core.ledger import SeatLedger
from seatchart.core.selector import find_best_block

from .parser import (
    InvalidGroupSize,
    InvalidToken,
    Venue,
    parse_group_size,
    parse_reservations,
    parse_seat_token,
)

ERROR_MESSAGE = "ERROR - Invalid reservation : "
WARNING_MESSAGE = "WARNING - Seat cannot be reserved : "
INVALID_GROUP_MESSAGE = "Invalid group size in input : "
NOT_AVAILABLE = "Not Available"


def reserve_tokens(ledger: SeatLedger, tokens: Iterable[str], out: TextIO) -> None:
    for token in tokens:
        try:
            row, column = parse_seat_token(token)
        except InvalidToken:
            print(ERROR_MESSAGE + token, file=out)
            continue
        if not ledger.reserve_seat(row, column):
            print(WARNING_MESSAGE + token, file=out)


def seat_group(ledger: SeatLedger, line: str, out: TextIO) -> None:
    try:
        size = parse_group_size(line)
    except InvalidGroupSize:
        print(INVALID_GROUP_MESSAGE + line, file=out)
        return

    block = find_best_block(ledger, size)
    if block is not None and ledger.reserve_group(block):
        print(block, file=out)
    else:
        logger.info("No block of {} seat(s) available", size)
        print(NOT_AVAILABLE, file=out)


def run_session(ledger: SeatLedger, lines: Iterable[str], out: TextIO) -> int:
    """Play ``lines`` against ``ledger`` and return the remaining seat count."""
    it: Iterator[str] = (line.rstrip("\r\n") for line in lines)
    first = next(it, None)
    if first is not None:
        reserve_tokens(ledger, parse_reservations(first), out)

    for line in it:
        seat_group(ledger, line, out)

    remaining = ledger.available_count()
    print(remaining, file=out)
    return remaining


def venue_lines(venue: Venue) -> List[str]:
    """Session input equivalent to a venue file."""
    return [" ".join(venue.reservations)] + [str(g) for g in venue.groups]


def run_venue(venue: Venue, out: TextIO) -> int:
    """Replay a loaded venue file through a fresh session."""
    ledger = SeatLedger(venue.rows, venue.columns)
    return run_session(ledger, venue_lines(venue), out)
