"""
battleship.py

Contains the core data structures and rules for Battleship:
 - Cell / Orientation enums for grid state and ship direction
 - Ship, which tracks its occupied coordinates and which of them were hit
 - Board, which validates placement, resolves shots and detects a sunk fleet

Nothing here reads input or prints; rendering lives in ``render`` and the
console loop in ``session``.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable

from .config import BOARD_SIZE, PLACEMENT_ATTEMPTS, SHIPS
from .coord_utils import Coord

logger = logging.getLogger(__name__)


class Cell(Enum):
    """State of a single grid square."""

    EMPTY = auto()
    SHIP = auto()
    HIT = auto()  # terminal
    MISS = auto()  # terminal

    @property
    def shot(self) -> bool:
        return self in (Cell.HIT, Cell.MISS)


class Orientation(Enum):
    HORIZONTAL = auto()  # grows along the columns
    VERTICAL = auto()  # grows along the rows

    def cells(self, origin: Coord, length: int) -> list[Coord]:
        """Return the *length* coordinates starting at *origin* in this direction."""
        if self is Orientation.HORIZONTAL:
            return [Coord(origin.row, origin.col + i) for i in range(length)]
        return [Coord(origin.row + i, origin.col) for i in range(length)]


class PlacementError(Exception):
    """Raised when random placement cannot fit a ship within its attempt budget."""


@dataclass
class Ship:
    """A named ship; ``coords`` is filled in by Board.place_ship()."""

    name: str
    length: int
    coords: list[Coord] = field(default_factory=list)
    hits: list[bool] = field(init=False)

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError(f"ship length must be positive, got {self.length}")
        self.hits = [False] * self.length

    @property
    def placed(self) -> bool:
        return len(self.coords) == self.length

    def is_sunk(self) -> bool:
        """True once every segment has been hit (never for an unplaced ship)."""
        return self.placed and all(self.hits)

    def occupies(self, point: Coord) -> int | None:
        """Return the segment index at *point*, or None if the ship is elsewhere."""
        for idx, coord in enumerate(self.coords):
            if coord == point:
                return idx
        return None


class ShotOutcome(Enum):
    OUT_OF_BOUNDS = auto()
    ALREADY_SHOT = auto()
    MISS = auto()
    HIT = auto()
    SUNK = auto()


@dataclass(frozen=True)
class ShotResult:
    """Result of Board.shoot_at(); ``sunk`` names the ship this shot finished off."""

    target: Coord
    outcome: ShotOutcome
    sunk: str | None = None

    @property
    def hit(self) -> bool:
        return self.outcome in (ShotOutcome.HIT, ShotOutcome.SUNK)

    @property
    def consumed(self) -> bool:
        """False for shots that changed nothing and so cost no turn."""
        return self.outcome not in (ShotOutcome.OUT_OF_BOUNDS, ShotOutcome.ALREADY_SHOT)

    @property
    def message(self) -> str:
        if self.outcome is ShotOutcome.OUT_OF_BOUNDS:
            return "Shot outside board."
        if self.outcome is ShotOutcome.ALREADY_SHOT:
            return "Already shot here."
        if self.outcome is ShotOutcome.MISS:
            return "Miss."
        if self.outcome is ShotOutcome.SUNK:
            return f"Hit! You sank: {self.sunk}"
        return "Hit!"


class Board:
    """
    Represents a single Battleship board with hidden ships.

    We store:
      - self.grid: one Cell per square, indexed grid[row][col]
      - self.ships: the Ship objects placed on this board, in placement order

    Every SHIP cell belongs to exactly one ship's coordinate list.  Once a
    ship cell is hit it becomes HIT for good and the owning ship records the
    hit on the matching segment.
    """

    def __init__(self, size: int = BOARD_SIZE):
        """Initialise an empty *size*x*size* board with no ships placed."""
        self.size = size
        self.grid: list[list[Cell]] = []
        self.ships: list[Ship] = []
        self.clear()

    def clear(self) -> None:
        """Reset every square to EMPTY and forget all ships."""
        self.grid = [[Cell.EMPTY for _ in range(self.size)] for _ in range(self.size)]
        self.ships = []

    def in_bounds(self, point: Coord) -> bool:
        return 0 <= point.row < self.size and 0 <= point.col < self.size

    def cell(self, point: Coord) -> Cell:
        return self.grid[point.row][point.col]

    # ------------------------------------------------------------------ #
    # Placement
    # ------------------------------------------------------------------ #

    def can_place(self, origin: Coord, orientation: Orientation, length: int) -> bool:
        """Return True if a ship of *length* fits at *origin* without leaving the board or overlapping."""
        for point in orientation.cells(origin, length):
            if not self.in_bounds(point) or self.cell(point) is Cell.SHIP:
                return False
        return True

    def place_ship(self, origin: Coord, orientation: Orientation, ship: Ship) -> bool:
        """Place *ship* at *origin*; return False and change nothing if it does not fit."""
        if ship.placed:
            raise ValueError(f"{ship.name} is already placed")
        if not self.can_place(origin, orientation, ship.length):
            logger.debug("place_ship() rejected – %s at %s %s", ship.name, origin, orientation.name)
            return False
        ship.coords = orientation.cells(origin, ship.length)
        for point in ship.coords:
            self.grid[point.row][point.col] = Cell.SHIP
        self.ships.append(ship)
        logger.debug("place_ship() – %s at %s", ship.name, ship.coords)
        return True

    def place_ships_randomly(
        self,
        ships: Iterable[tuple[str, int]] = SHIPS,
        *,
        rng: random.Random | None = None,
        attempts: int = PLACEMENT_ATTEMPTS,
    ) -> None:
        """Randomly position *ships* on the board without collisions.

        Each ship gets *attempts* random draws.  If any ship cannot be placed
        the board is cleared and PlacementError raised, so a board never ends
        up with a partial fleet.
        """
        rnd = rng or random.Random()
        for ship_name, ship_size in ships:
            ship = Ship(ship_name, ship_size)
            for _ in range(attempts):
                origin = Coord(rnd.randrange(self.size), rnd.randrange(self.size))
                orientation = rnd.choice((Orientation.HORIZONTAL, Orientation.VERTICAL))
                if self.place_ship(origin, orientation, ship):
                    break
            else:
                self.clear()
                raise PlacementError(f"could not place {ship_name} after {attempts} attempts")

    # ------------------------------------------------------------------ #
    # Shooting
    # ------------------------------------------------------------------ #

    def shoot_at(self, target: Coord) -> ShotResult:
        """Resolve a shot at *target*.  Only a first shot at an in-bounds square mutates the board."""
        if not self.in_bounds(target):
            return ShotResult(target, ShotOutcome.OUT_OF_BOUNDS)

        cell = self.cell(target)
        if cell.shot:
            return ShotResult(target, ShotOutcome.ALREADY_SHOT)

        if cell is Cell.EMPTY:
            self.grid[target.row][target.col] = Cell.MISS
            return ShotResult(target, ShotOutcome.MISS)

        self.grid[target.row][target.col] = Cell.HIT
        for ship in self.ships:
            idx = ship.occupies(target)
            if idx is not None:
                ship.hits[idx] = True
                if ship.is_sunk():
                    return ShotResult(target, ShotOutcome.SUNK, sunk=ship.name)
                return ShotResult(target, ShotOutcome.HIT)
        # A SHIP cell with no owner means the board invariant was broken.
        raise RuntimeError(f"no ship owns {target}")

    def all_sunk(self) -> bool:
        """Return True if every ship on this board has been sunk (True for an empty board)."""
        return all(ship.is_sunk() for ship in self.ships)
