from dataclasses import dataclass
from enum import Enum
from typing import Union

from .battleship import Orientation
from .coord_utils import Coord, CoordinateError, parse_coordinate


class CommandParseError(ValueError):
    """Raised when a console line cannot be parsed as valid input."""


class MenuChoice(Enum):
    MANUAL = "1"
    RANDOM = "2"
    EXIT = "0"


@dataclass(frozen=True)
class ShotCommand:
    target: Coord


@dataclass(frozen=True)
class PauseCommand:
    pass


TurnCommand = Union[ShotCommand, PauseCommand]


def parse_menu_choice(line: str) -> MenuChoice:
    raw = line.strip()
    try:
        return MenuChoice(raw)
    except ValueError:
        raise CommandParseError(f"Unknown menu choice: {raw!r}") from None


def parse_orientation(line: str) -> Orientation:
    """Only the first character counts: H/h is horizontal, V/v is vertical."""
    raw = line.strip().upper()
    if raw.startswith("H"):
        return Orientation.HORIZONTAL
    if raw.startswith("V"):
        return Orientation.VERTICAL
    raise CommandParseError("Orientation must be H or V")


def parse_target(line: str) -> Coord:
    try:
        return parse_coordinate(line)
    except CoordinateError as e:
        raise CommandParseError(f"Invalid coordinate: {e}") from e


def parse_turn_command(line: str) -> TurnCommand:
    if line is None:
        raise CommandParseError("No command to parse")
    raw = line.strip()
    if not raw:
        raise CommandParseError("Empty command")
    if raw[0].upper() == "P":
        return PauseCommand()
    return ShotCommand(target=parse_target(raw))
