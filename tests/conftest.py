import io
import logging
import sys
from pathlib import Path

import pytest

# Ensure local `src` directory is importable before project is installed.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from salvo.battleship import Board, Orientation, Ship
from salvo.config import SHIPS
from salvo.coord_utils import Coord
from salvo.io_utils import ConsoleIO

# Suppress INFO & DEBUG logs during tests
logging.basicConfig(level=logging.WARNING)


# Console lines that place the standard fleet stacked in rows 1-5 from column A,
# each followed by the Enter that dismisses the per-ship pause.
STACKED_FLEET_LINES = [
    "A1", "H", "",
    "A2", "H", "",
    "A3", "H", "",
    "A4", "H", "",
    "A5", "H", "",
]

# Every ship cell of the stacked fleet, in console form.
STACKED_FLEET_TARGETS = [
    f"{chr(ord('A') + col)}{row + 1}" for row, (_, size) in enumerate(SHIPS) for col in range(size)
]


@pytest.fixture
def stacked_fleet():
    """Place the standard fleet on *board*: ship i horizontal in row i from column 0."""

    def _place(board: Board) -> Board:
        for row, (name, size) in enumerate(SHIPS):
            assert board.place_ship(Coord(row, 0), Orientation.HORIZONTAL, Ship(name, size))
        return board

    return _place


@pytest.fixture
def console_factory():
    """Factory returning a ConsoleIO fed with *lines* and writing to a StringIO."""

    def _factory(lines):
        text = "".join(f"{line}\n" for line in lines)
        return ConsoleIO(io.StringIO(text), io.StringIO(), clear_lines=2)

    return _factory
