import re
from typing import NamedTuple

from .config import BOARD_SIZE

# Column letter followed by a row number, whitespace already removed.
# Range checks on the row happen after the match so "A0" and "A11" are
# reported as out of range rather than as garbage.
COORD_RE = re.compile(r"^([A-Z])(\d+)$")

COLUMN_LETTERS = "".join(chr(ord("A") + i) for i in range(BOARD_SIZE))


class CoordinateError(ValueError):
    """Raised when a string cannot be read as a board coordinate."""


class Coord(NamedTuple):
    """Zero-based (row, col) position on a board."""

    row: int
    col: int


def parse_coordinate(text: str) -> Coord:
    """
    Convert a coordinate like 'A1' through 'J10' into a zero-based Coord.

    The letter names the column, the number names the row.  Letters are
    case-insensitive and any whitespace is ignored, so ' c 7 ' is C7.
    """
    compact = "".join(text.split()).upper()
    if len(compact) < 2:
        raise CoordinateError("coordinate too short")
    m = COORD_RE.match(compact)
    if not m:
        raise CoordinateError(f"expected <{COLUMN_LETTERS[0]}-{COLUMN_LETTERS[-1]}><1-{BOARD_SIZE}>")
    letter, digits = m.groups()
    if letter not in COLUMN_LETTERS:
        raise CoordinateError(f"column must be {COLUMN_LETTERS[0]}-{COLUMN_LETTERS[-1]}")
    digits = digits.lstrip("0")
    # Bound the digit run before int(); huge runs are just out of range.
    if len(digits) > len(str(BOARD_SIZE)):
        raise CoordinateError(f"row must be 1-{BOARD_SIZE}")
    row = int(digits or "0")
    if not 1 <= row <= BOARD_SIZE:
        raise CoordinateError(f"row must be 1-{BOARD_SIZE}")
    return Coord(row - 1, ord(letter) - ord("A"))


def format_coord(coord: Coord) -> str:
    """
    Convert a zero-based Coord back to its console form, e.g. Coord(4, 0) -> 'A5'.
    """
    return f"{chr(ord('A') + coord.col)}{coord.row + 1}"
