"""
Text rendering of boards
––––––––––––––––––––––––
• grid_rows()          – Board → ["S . X …", …] (ships optionally revealed)
• render_board()       – one board with column letters and row numbers
• render_two_boards()  – own board and opponent view side by side
• fleet_status()       – "A B C S D" style line of ships still afloat

Fog of war: without ``reveal`` an unshot SHIP cell renders exactly like
EMPTY water.
"""

from __future__ import annotations

import logging
from typing import List

from .battleship import Board, Cell
from .config import SHIP_LETTERS

logger = logging.getLogger(__name__)

MARKS = {
    Cell.EMPTY: ".",
    Cell.SHIP: "S",
    Cell.HIT: "X",
    Cell.MISS: "O",
}


def _mark(cell: Cell, reveal: bool) -> str:
    if cell is Cell.SHIP and not reveal:
        return MARKS[Cell.EMPTY]
    return MARKS[cell]


def grid_rows(board: Board, *, reveal: bool = False) -> List[str]:
    logger.debug("grid_rows() – reveal=%s", reveal)
    return [" ".join(_mark(board.grid[r][c], reveal) for c in range(board.size)) for r in range(board.size)]


def _header(size: int) -> str:
    return "   " + " ".join(chr(ord("A") + c) for c in range(size))


def render_board(board: Board, *, reveal: bool = False) -> str:
    lines = [_header(board.size)]
    for idx, row in enumerate(grid_rows(board, reveal=reveal)):
        lines.append(f"{idx + 1:>2} {row}")
    return "\n".join(lines)


def render_two_boards(
    left: Board,
    right: Board,
    *,
    header_left: str,
    header_right: str,
    reveal_left: bool = True,
    reveal_right: bool = False,
) -> str:
    """Print two boards side-by-side with custom headers."""
    left_rows = grid_rows(left, reveal=reveal_left)
    right_rows = grid_rows(right, reveal=reveal_right)
    left_header = _header(left.size)
    board_width = len(left_header)

    lines = [f"{f'[{header_left}]'.center(board_width)}   {f'[{header_right}]'.center(board_width)}"]
    lines.append(f"{left_header}   {_header(right.size)}")
    for idx, (l_row, r_row) in enumerate(zip(left_rows, right_rows)):
        label = f"{idx + 1:>2}"
        lines.append(f"{label} {l_row}   {label} {r_row}")
    return "\n".join(lines)


def fleet_status(board: Board) -> str:
    """Letters of ships still afloat, '-' for each sunk one, in placement order."""
    return " ".join("-" if ship.is_sunk() else SHIP_LETTERS.get(ship.name, "?") for ship in board.ships)
