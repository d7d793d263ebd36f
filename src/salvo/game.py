"""Players and the turn state machine for a two-player match.

A Game owns exactly two players.  After both fleets are placed, ``start()``
moves it to AWAITING_SHOT with player 1 to move; each ``fire()`` applies one
shot against the opponent's board and the turn rule:

* a repeat or out-of-bounds shot changes nothing and costs no turn,
* a hit keeps the same shooter (extra turn) unless it sinks the last ship,
  which ends the game,
* a miss passes the turn to the opponent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Sequence

from .battleship import Board, ShotResult
from .config import P1_NAME, P2_NAME, SHIPS
from .coord_utils import Coord, format_coord
from .events import Category, Event, Listener

logger = logging.getLogger(__name__)


class GameStateError(Exception):
    """Raised when an operation is not valid in the game's current phase."""


class Phase(Enum):
    SETUP = auto()
    AWAITING_SHOT = auto()
    GAME_OVER = auto()


@dataclass
class Player:
    name: str
    board: Board = field(default_factory=Board)
    shots_taken: int = 0


@dataclass(frozen=True)
class TurnOutcome:
    """What one call to Game.fire() did."""

    shooter: Player
    shot: ShotResult
    winner: Player | None = None

    @property
    def consumed(self) -> bool:
        return self.shot.consumed

    @property
    def extra_turn(self) -> bool:
        return self.shot.hit and self.winner is None


class Game:
    """A single match between two players sharing the standard fleet."""

    def __init__(
        self,
        names: Sequence[str] = (P1_NAME, P2_NAME),
        *,
        on_event: Listener | None = None,
    ) -> None:
        if len(names) != 2:
            raise ValueError("a game needs exactly two players")
        self.ships = list(SHIPS)
        self.players = [Player(names[0]), Player(names[1])]
        self.phase = Phase.SETUP
        self._current = 0
        self._winner: Player | None = None
        self._on_event = on_event

    # ------------------------------------------------------------------ #
    # Accessors
    # ------------------------------------------------------------------ #

    @property
    def current(self) -> Player:
        return self.players[self._current]

    @property
    def opponent(self) -> Player:
        return self.players[1 - self._current]

    @property
    def winner(self) -> Player | None:
        return self._winner

    def stats(self) -> list[tuple[str, int]]:
        """(name, shots_taken) for both players, player 1 first."""
        return [(p.name, p.shots_taken) for p in self.players]

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    def fleet_complete(self, player: Player) -> bool:
        placed = sorted((s.name, s.length) for s in player.board.ships)
        return placed == sorted(self.ships)

    def start(self) -> None:
        """Leave SETUP once both boards carry the full fleet; player 1 shoots first."""
        if self.phase is not Phase.SETUP:
            raise GameStateError(f"cannot start from {self.phase.name}")
        for player in self.players:
            if not self.fleet_complete(player):
                raise GameStateError(f"{player.name} has not placed the full fleet")
        self._current = 0
        self.phase = Phase.AWAITING_SHOT
        logger.info("Game started – %s vs %s", self.players[0].name, self.players[1].name)
        self._emit(Category.SETUP, "start", current=self.current.name)

    def fire(self, target: Coord) -> TurnOutcome:
        """Current player shoots at *target* on the opponent's board."""
        if self.phase is not Phase.AWAITING_SHOT:
            raise GameStateError(f"cannot fire during {self.phase.name}")

        shooter, defender = self.current, self.opponent
        result = defender.board.shoot_at(target)
        if not result.consumed:
            logger.debug("fire() – %s repeat/invalid shot at %s", shooter.name, target)
            self._emit(
                Category.TURN,
                "repeat",
                player=shooter.name,
                coord=format_coord(target),
                result=result.outcome.name,
            )
            return TurnOutcome(shooter, result)

        shooter.shots_taken += 1
        self._emit(
            Category.TURN,
            "shot",
            player=shooter.name,
            coord=format_coord(target),
            result=result.outcome.name,
            sunk=result.sunk,
        )

        if result.hit:
            if defender.board.all_sunk():
                self._winner = shooter
                self.phase = Phase.GAME_OVER
                logger.info("Game over – %s wins after %d shots", shooter.name, shooter.shots_taken)
                self._emit(Category.SYSTEM, "game_over", winner=shooter.name, shots=dict(self.stats()))
                return TurnOutcome(shooter, result, winner=shooter)
            return TurnOutcome(shooter, result)

        self._current = 1 - self._current
        self._emit(Category.TURN, "turn", current=self.current.name)
        return TurnOutcome(shooter, result)

    def _emit(self, category: Category, type_: str, **payload) -> None:
        if self._on_event is not None:
            self._on_event(Event(category, type_, payload))
