# placement_wizard.py
"""
Fleet placement helpers.

Manual placement is interactive over plain callables so it can be driven by
the console or by a test script:
    ok = run(board, recv_fn, notify, send_grid_fn)
Returns True when all ships are placed, False when input ends first.

Random placement retries whole layouts on a fresh board:
    place_randomly(board, rng=rng)
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Iterable

from .battleship import Board, PlacementError, Ship
from .commands import CommandParseError, parse_orientation, parse_target
from .config import LAYOUT_RETRIES, PLACEMENT_ATTEMPTS, SHIPS

logger = logging.getLogger(__name__)


def run(
    board: Board,
    recv_fn: Callable[[str], str | None],
    notify: Callable[[str], None],
    send_grid_fn: Callable[[Board], None],
    *,
    ships: Iterable[tuple[str, int]] = SHIPS,
    on_placed: Callable[[Ship], bool] | None = None,
) -> bool:
    # Clear board
    board.clear()

    for ship_name, ship_size in ships:
        placed = False
        while not placed:
            # Show current board
            send_grid_fn(board)
            notify(f"Place {ship_name} (size {ship_size})")

            line = recv_fn("Coordinate (A5): ")
            if line is None:
                return False  # input closed
            try:
                origin = parse_target(line)
            except CommandParseError as e:
                notify(str(e))
                continue

            line = recv_fn("Orientation (H/V): ")
            if line is None:
                return False
            try:
                orientation = parse_orientation(line)
            except CommandParseError as e:
                notify(str(e))
                continue

            ship = Ship(ship_name, ship_size)
            placed = board.place_ship(origin, orientation, ship)
            if not placed:
                notify("Invalid placement: overlap / out-of-bounds")

        if on_placed is not None and not on_placed(ship):
            return False

    return True


def place_randomly(
    board: Board,
    *,
    ships: Iterable[tuple[str, int]] = SHIPS,
    rng: random.Random | None = None,
    attempts: int = PLACEMENT_ATTEMPTS,
    retries: int = LAYOUT_RETRIES,
) -> None:
    """Fill *board* with a random fleet, redrawing the layout up to *retries* times.

    Raises PlacementError if no layout fits within the retry budget.
    """
    ships = list(ships)
    rnd = rng or random.Random()
    board.clear()
    for layout in range(1, retries + 1):
        try:
            board.place_ships_randomly(ships, rng=rnd, attempts=attempts)
            return
        except PlacementError as e:
            logger.warning("Random layout %d/%d failed: %s", layout, retries, e)
    raise PlacementError(f"no random layout found in {retries} tries")
