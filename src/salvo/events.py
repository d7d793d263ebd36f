"""Lightweight event model used by Game to decouple rules from presentation.

Game emits strongly-typed events to an optional listener; the console session
logs them, and tests use them to check turn sequencing without parsing
printed text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Dict

from typing_extensions import Literal


class Category(Enum):
    """High-level event categories."""

    SETUP = auto()  # game created, fleets ready
    TURN = auto()  # per-shot lifecycle (shot, turn change)
    SYSTEM = auto()  # game over


EventType = Literal["start", "shot", "repeat", "turn", "game_over"]


@dataclass(frozen=True, slots=True)
class Event:
    """Immutable event emitted by Game."""

    category: Category
    type: EventType
    payload: Dict[str, Any]


Listener = Callable[[Event], None]
