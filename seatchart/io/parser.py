from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

import yaml

_SEAT_TOKEN = re.compile(r"R([+-]?\d+)C([+-]?\d+)")


class ParseError(ValueError):
    """Input text that cannot be turned into a chart operation."""


class InvalidToken(ParseError):
    pass


class InvalidGroupSize(ParseError):
    pass


class InvalidVenue(ParseError):
    pass


@dataclass
class Venue:
    rows: int
    columns: int
    reservations: List[str] = field(default_factory=list)
    groups: List[int] = field(default_factory=list)


def parse_seat_token(token: str) -> Tuple[int, int]:
    """Parse a seat code such as ``R1C6`` into ``(row, column)``."""
    m = _SEAT_TOKEN.fullmatch(token)
    if m is None:
        raise InvalidToken(token)
    return int(m.group(1)), int(m.group(2))


def parse_reservations(line: str) -> List[str]:
    return line.split()


def parse_group_size(line: str) -> int:
    try:
        return int(line.strip())
    except ValueError as exc:
        raise InvalidGroupSize(line) from exc


def _integer(value, what: str, path) -> int:
    # bool is an int subclass; YAML `true` is not a seat count
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidVenue(f"{path}: {what} must be an integer, got {value!r}")
    return value


def load_venue(path: str | Path) -> Venue:
    """Load a YAML venue description into a Venue object."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise InvalidVenue(f"{path}: not valid YAML ({exc})") from exc

    if not isinstance(data, dict):
        raise InvalidVenue(f"{path}: expected a mapping")
    for key in ("rows", "columns"):
        if key not in data:
            raise InvalidVenue(f"{path}: missing key {key!r}")
    rows = _integer(data["rows"], "rows", path)
    columns = _integer(data["columns"], "columns", path)

    reservations = data.get("reservations") or []
    if isinstance(reservations, str):
        reservations = parse_reservations(reservations)
    elif not isinstance(reservations, list):
        raise InvalidVenue(f"{path}: reservations must be a list or a string of seat codes")

    groups = data.get("groups") or []
    if not isinstance(groups, list):
        raise InvalidVenue(f"{path}: groups must be a list")

    return Venue(
        rows=rows,
        columns=columns,
        reservations=[str(r) for r in reservations],
        groups=[_integer(g, "group size", path) for g in groups],
    )
