import pytest

from seatchart.core.errors import InvalidDimension, OutOfRange, SeatChartError
from seatchart.core.ledger import SeatLedger
from seatchart.core.model import Block


def chain(ledger, row):
    return [s.column for s in ledger.available_in_row(row)]


@pytest.mark.parametrize("rows,columns", [(0, 5), (5, 0), (-1, 3), (0, 0)])
def test_invalid_dimensions(rows, columns):
    with pytest.raises(InvalidDimension):
        SeatLedger(rows, columns)


def test_initial_state():
    ledger = SeatLedger(3, 11)
    assert ledger.rows == 3
    assert ledger.columns == 11
    assert ledger.available_count() == 33
    assert chain(ledger, 2) == list(range(1, 12))
    assert not any(ledger.is_reserved(r, c) for r in range(1, 4) for c in range(1, 12))


def test_distances_odd_columns():
    ledger = SeatLedger(3, 11)
    assert ledger.seat(1, 6).distance == 0
    assert ledger.seat(1, 1).distance == 5
    assert ledger.seat(2, 1).distance == 6
    assert ledger.seat(3, 8).distance == 4


def test_distances_even_columns():
    ledger = SeatLedger(2, 4)
    assert [s.distance for s in ledger.available_in_row(1)] == [1.5, 0.5, 0.5, 1.5]
    assert ledger.seat(2, 2).distance == 1.5


def test_reserve_seat_counts_down():
    ledger = SeatLedger(3, 11)
    assert ledger.reserve_seat(1, 6)
    assert ledger.is_reserved(1, 6)
    assert ledger.available_count() == 32
    assert ledger.reserve_seat(3, 11)
    assert ledger.available_count() == 31


def test_reserve_seat_twice_is_rejected():
    ledger = SeatLedger(3, 11)
    assert ledger.reserve_seat(2, 2)
    assert not ledger.reserve_seat(2, 2)
    assert ledger.available_count() == 32


@pytest.mark.parametrize("row,column", [(0, 1), (4, 1), (1, 0), (1, 12), (-1, -1)])
def test_reserve_seat_out_of_range(row, column):
    ledger = SeatLedger(3, 11)
    assert not ledger.reserve_seat(row, column)
    assert ledger.available_count() == 33


def test_count_never_below_zero():
    ledger = SeatLedger(1, 2)
    assert ledger.reserve_seat(1, 1)
    assert ledger.reserve_seat(1, 2)
    assert not ledger.reserve_seat(1, 1)
    assert ledger.available_count() == 0
    assert chain(ledger, 1) == []
    assert ledger.head(1) is None


@pytest.mark.parametrize("row,column", [(0, 1), (4, 1), (1, 0), (1, 12)])
def test_is_reserved_out_of_range(row, column):
    ledger = SeatLedger(3, 11)
    with pytest.raises(OutOfRange) as exc_info:
        ledger.is_reserved(row, column)
    assert isinstance(exc_info.value, SeatChartError)
    assert f"R{row}C{column}" in str(exc_info.value)


def test_unlink_middle_and_head():
    ledger = SeatLedger(1, 5)
    ledger.reserve_seat(1, 3)
    assert chain(ledger, 1) == [1, 2, 4, 5]
    assert ledger.seat(1, 2).next == 4
    assert ledger.seat(1, 4).prev == 2

    ledger.reserve_seat(1, 1)
    assert ledger.head(1) == 2
    assert ledger.seat(1, 2).prev is None

    ledger.reserve_seat(1, 5)
    assert chain(ledger, 1) == [2, 4]
    assert ledger.seat(1, 4).next is None


def test_reserved_seats_are_out_of_chain():
    ledger = SeatLedger(2, 6)
    for column in (2, 3, 6):
        ledger.reserve_seat(2, column)
    for column in range(1, 7):
        in_chain = column in chain(ledger, 2)
        assert ledger.is_reserved(2, column) != in_chain
    assert chain(ledger, 1) == list(range(1, 7))


def test_reserve_group():
    ledger = SeatLedger(3, 11)
    assert ledger.reserve_group(Block(1, 5, 7))
    assert all(ledger.is_reserved(1, c) for c in (5, 6, 7))
    assert not ledger.is_reserved(1, 4)
    assert ledger.available_count() == 30
    assert chain(ledger, 1) == [1, 2, 3, 4, 8, 9, 10, 11]


def test_reserve_group_conflict_changes_nothing():
    ledger = SeatLedger(3, 11)
    ledger.reserve_seat(2, 7)
    assert not ledger.reserve_group(Block(2, 5, 8))
    assert [ledger.is_reserved(2, c) for c in range(5, 9)] == [False, False, True, False]
    assert ledger.available_count() == 32


def test_reserve_group_outside_chart():
    ledger = SeatLedger(3, 11)
    assert not ledger.reserve_group(Block(1, 10, 12))
    assert not ledger.reserve_group(Block(4, 1, 2))
    assert not ledger.is_reserved(1, 10)
    assert ledger.available_count() == 33


def test_block_cost():
    ledger = SeatLedger(3, 11)
    assert ledger.block_cost(Block(1, 5, 7)) == 2
    assert ledger.block_cost(Block(2, 5, 7)) == 5


def test_render():
    ledger = SeatLedger(2, 5)
    ledger.reserve_seat(1, 3)
    ledger.reserve_seat(2, 1)
    assert ledger.render() == "Row #\n1\tOOXOO\n2\tXOOOO\n"
    assert str(ledger) == ledger.render()


@pytest.mark.parametrize("row", [0, 4])
def test_head_out_of_range_names_row_only(row):
    ledger = SeatLedger(3, 11)
    with pytest.raises(OutOfRange) as exc_info:
        ledger.head(row)
    assert str(exc_info.value) == f"Row number does not exist : R{row}"
    assert exc_info.value.column is None
