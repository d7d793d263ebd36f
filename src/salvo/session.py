"""Console session for two players sharing one terminal.

The session is an explicit application state machine:

    MENU ──1/2──▶ SETUP ──▶ PLAYING ──▶ GAME_OVER ──▶ MENU
      │
      └──0 / end of input──────────────────────────────▶ EXIT

Console protocol
----------------
Menu            1 = new game (manual placement), 2 = new game (random), 0 = exit
Placement       a coordinate such as A5, then H or V
Turn            a coordinate such as C7 to fire, or P to pause and clear

Any malformed line is answered with an error message and the same prompt is
shown again; nothing changes and no turn is used.  End of input at any prompt
leads straight to EXIT.
"""

from __future__ import annotations

import logging
import random
from enum import Enum, auto
from typing import Sequence

from . import config as _cfg
from . import placement_wizard
from .battleship import Board, PlacementError, Ship
from .commands import CommandParseError, MenuChoice, PauseCommand, parse_menu_choice, parse_turn_command
from .events import Event
from .game import Game, Player
from .io_utils import ConsoleIO
from .render import fleet_status, render_board, render_two_boards

logger = logging.getLogger(__name__)

MENU_TEXT = "=== Battleship ===\n1) New game (manual)\n2) New game (random)\n0) Exit"


class AppState(Enum):
    MENU = auto()
    SETUP = auto()
    PLAYING = auto()
    GAME_OVER = auto()
    EXIT = auto()


class GameSession:
    """Drives menus, setup and the turn loop for any number of consecutive games."""

    def __init__(
        self,
        io: ConsoleIO | None = None,
        *,
        names: Sequence[str] = (_cfg.P1_NAME, _cfg.P2_NAME),
        rng: random.Random | None = None,
        start_with: MenuChoice | None = None,
    ) -> None:
        """Create a session.

        Args:
            io: console to talk to; stdin/stdout when omitted.
            names: the two player names.
            rng: random source for random placement (seed it for reproducible layouts).
            start_with: skip the first menu prompt and act as if this choice was typed.
        """
        self.io = io or ConsoleIO()
        self.names = tuple(names)
        self.rng = rng or random.Random(_cfg.SEED)
        self.state = AppState.MENU
        self.game: Game | None = None
        self._choice: MenuChoice | None = start_with
        self.games_played = 0

    # ------------------------------------------------------------------ #
    # Main loop
    # ------------------------------------------------------------------ #

    def run(self) -> int:
        handlers = {
            AppState.MENU: self._menu,
            AppState.SETUP: self._setup,
            AppState.PLAYING: self._play,
            AppState.GAME_OVER: self._game_over,
        }
        while self.state is not AppState.EXIT:
            prev = self.state
            self.state = handlers[self.state]()
            logger.debug("state %s -> %s", prev.name, self.state.name)
        return 0

    def _log_event(self, ev: Event) -> None:
        logger.debug("event %s/%s %r", ev.category.name, ev.type, ev.payload)

    # ------------------------------------------------------------------ #
    # MENU
    # ------------------------------------------------------------------ #

    def _menu(self) -> AppState:
        if self._choice is None:
            self.io.send(MENU_TEXT)
            line = self.io.safe_readline("Choice: ")
            if line is None:
                return AppState.EXIT
            try:
                self._choice = parse_menu_choice(line)
            except CommandParseError as e:
                self.io.send(str(e))
                return AppState.MENU
        if self._choice is MenuChoice.EXIT:
            return AppState.EXIT
        return AppState.SETUP

    # ------------------------------------------------------------------ #
    # SETUP
    # ------------------------------------------------------------------ #

    def _setup(self) -> AppState:
        randomize = self._choice is MenuChoice.RANDOM
        self._choice = None
        self.game = Game(self.names, on_event=self._log_event)

        for player in self.game.players:
            self.io.send(f"\nSetup {player.name}")
            if randomize:
                try:
                    placement_wizard.place_randomly(player.board, ships=self.game.ships, rng=self.rng)
                except PlacementError as e:
                    logger.error("Random placement failed for %s: %s", player.name, e)
                    self.io.send(f"Could not place ships randomly: {e}")
                    return AppState.MENU
                self.io.send(f"{player.name} ships placed randomly.")
            elif not self._manual_place(player):
                return AppState.EXIT
            if not self.io.pause_clear():
                return AppState.EXIT

        self.game.start()
        return AppState.PLAYING

    def _manual_place(self, player: Player) -> bool:
        self.io.send(f"{player.name} manual placement.")

        def show(board: Board) -> None:
            self.io.send(render_board(board, reveal=True))

        def placed(ship: Ship) -> bool:
            logger.debug("%s placed %s", player.name, ship.name)
            return self.io.pause_clear()

        return placement_wizard.run(
            player.board,
            self.io.safe_readline,
            self.io.send,
            show,
            ships=self.game.ships,
            on_placed=placed,
        )

    # ------------------------------------------------------------------ #
    # PLAYING
    # ------------------------------------------------------------------ #

    def _show_turn(self) -> None:
        game = self.game
        cur, opp = game.current, game.opponent
        self.io.send(f"\n--- {cur.name} ---")
        self.io.send(
            render_two_boards(
                cur.board,
                opp.board,
                header_left="Your board",
                header_right="Opponent view",
            )
        )
        self.io.send(f"Your fleet: {fleet_status(cur.board)}   Enemy fleet: {fleet_status(opp.board)}")

    def _play(self) -> AppState:
        game = self.game
        self._show_turn()
        line = self.io.safe_readline("\nShot (A5), P=pause: ")
        if line is None:
            return AppState.EXIT

        try:
            cmd = parse_turn_command(line)
        except CommandParseError as e:
            self.io.send(f"Invalid. {e}")
            return AppState.PLAYING

        if isinstance(cmd, PauseCommand):
            return AppState.PLAYING if self.io.pause_clear() else AppState.EXIT

        outcome = game.fire(cmd.target)
        self.io.send(outcome.shot.message)
        if outcome.winner is not None:
            return AppState.GAME_OVER
        if outcome.extra_turn:
            self.io.send("Shoot again!")
        return AppState.PLAYING

    # ------------------------------------------------------------------ #
    # GAME_OVER
    # ------------------------------------------------------------------ #

    def _game_over(self) -> AppState:
        game = self.game
        self.io.send(f"\n*** {game.winner.name} WINS! ***")
        self.io.send("\n=== Stats ===")
        for name, shots in game.stats():
            self.io.send(f"{name}: {shots} shots")
        self.games_played += 1
        return AppState.MENU
