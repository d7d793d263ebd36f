"""Central configuration for runtime-tunable parameters.

The board and fleet are fixed.  Everything else (random placement budget,
console presentation, player names, logging) can be overridden via environment
variables so the automated test-suite and local play can tune behaviour
without touching the code.
"""

from __future__ import annotations

import os


# ===========================================================================
# Game Constants
# ===========================================================================
# The board is always 10x10 and the fleet is always the standard five ships.
BOARD_SIZE: int = 10

# Standard ship roster: list of (name, size) tuples, placed in this order.
SHIPS = [
    ("Carrier", 5),
    ("Battleship", 4),
    ("Cruiser", 3),
    ("Submarine", 3),
    ("Destroyer", 2),
]

# Unique single-letter representations for each ship, used by fleet summaries.
SHIP_LETTERS = {
    "Carrier": "A",  # "A" for Aircraft carrier to avoid clash with Cruiser's "C"
    "Battleship": "B",
    "Cruiser": "C",
    "Submarine": "S",
    "Destroyer": "D",
}


# ===========================================================================
# Random Placement
# ===========================================================================
# SALVO_PLACEMENT_ATTEMPTS: Random (row, col, orientation) draws tried per ship.
#   Defaults to 500.
#   Example: export SALVO_PLACEMENT_ATTEMPTS=50
PLACEMENT_ATTEMPTS: int = int(os.getenv("SALVO_PLACEMENT_ATTEMPTS", "500"))

# SALVO_LAYOUT_RETRIES: How many times the whole fleet is redrawn on a fresh
#   board when a single ship runs out of attempts.
#   Defaults to 10.
LAYOUT_RETRIES: int = int(os.getenv("SALVO_LAYOUT_RETRIES", "10"))

# SALVO_SEED: Seed for the placement RNG, giving reproducible random layouts.
#   Unset by default (fresh entropy every game).
#   Example: export SALVO_SEED=1234
SEED: int | None = int(os.environ["SALVO_SEED"]) if os.getenv("SALVO_SEED") else None


# ===========================================================================
# Console Presentation
# ===========================================================================
# SALVO_CLEAR_LINES: Number of blank lines printed by the pause/clear prompt.
#   Defaults to 40.
CLEAR_LINES: int = int(os.getenv("SALVO_CLEAR_LINES", "40"))

# SALVO_P1_NAME / SALVO_P2_NAME: Display names of the two players.
P1_NAME: str = os.getenv("SALVO_P1_NAME", "Player 1")
P2_NAME: str = os.getenv("SALVO_P2_NAME", "Player 2")


# ===========================================================================
# Debugging and Logging
# ===========================================================================
# SALVO_DEBUG: If "1", enables detailed debug logging across modules.
#   Defaults to "0" (warnings and errors only).
#   Example: export SALVO_DEBUG=1
DEBUG: bool = os.getenv("SALVO_DEBUG", "0") == "1"

# SALVO_LOG_FILE: Write log records to this file instead of stderr.
#   Game output always goes to stdout; logs never mix with it unless both
#   streams point at the same terminal.
LOG_FILE: str | None = os.getenv("SALVO_LOG_FILE") or None

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
