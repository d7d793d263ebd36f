import pytest

from salvo.battleship import Orientation
from salvo.commands import (
    CommandParseError,
    MenuChoice,
    PauseCommand,
    ShotCommand,
    parse_menu_choice,
    parse_orientation,
    parse_turn_command,
)
from salvo.coord_utils import Coord, CoordinateError, format_coord, parse_coordinate


def test_parse_coordinate_basic():
    """Letter is the column, number is the row."""
    assert parse_coordinate("A1") == Coord(0, 0)
    assert parse_coordinate("B5") == Coord(4, 1)
    assert parse_coordinate("J10") == Coord(9, 9)


def test_parse_coordinate_whitespace_and_case():
    assert parse_coordinate("  c7 ") == Coord(6, 2)
    assert parse_coordinate("c 7") == Coord(6, 2)


@pytest.mark.parametrize(
    "text", ["", " ", "A", "K1", "A0", "A00", "A11", "A100", "Ax", "1A", "AA", "A-1", "A" + "1" * 5000]
)
def test_parse_coordinate_rejects_malformed(text):
    with pytest.raises(CoordinateError):
        parse_coordinate(text)


def test_parse_coordinate_leading_zeros():
    assert parse_coordinate("A05") == Coord(4, 0)
    assert parse_coordinate("b010") == Coord(9, 1)


def test_format_coord():
    assert format_coord(Coord(4, 0)) == "A5"
    assert format_coord(Coord(9, 9)) == "J10"


def test_shot_valid_C7():
    cmd = parse_turn_command("C7")
    assert isinstance(cmd, ShotCommand)
    assert cmd.target == Coord(6, 2)


@pytest.mark.parametrize("line", ["p", "P", "pause", "  P  "])
def test_pause(line):
    assert isinstance(parse_turn_command(line), PauseCommand)


def test_shot_invalid_coord():
    with pytest.raises(CommandParseError):
        parse_turn_command("Z9")


def test_shot_with_huge_row_number():
    with pytest.raises(CommandParseError):
        parse_turn_command("A" + "1" * 5000)


def test_empty_line():
    with pytest.raises(CommandParseError):
        parse_turn_command("    ")


@pytest.mark.parametrize(
    "line, expected",
    [
        ("H", Orientation.HORIZONTAL),
        ("h", Orientation.HORIZONTAL),
        ("horizontal", Orientation.HORIZONTAL),
        ("V", Orientation.VERTICAL),
        (" vert", Orientation.VERTICAL),
    ],
)
def test_orientation(line, expected):
    assert parse_orientation(line) is expected


@pytest.mark.parametrize("line", ["", "x", "up", "1"])
def test_orientation_invalid(line):
    with pytest.raises(CommandParseError):
        parse_orientation(line)


def test_menu_choices():
    assert parse_menu_choice("1") is MenuChoice.MANUAL
    assert parse_menu_choice(" 2 ") is MenuChoice.RANDOM
    assert parse_menu_choice("0") is MenuChoice.EXIT


@pytest.mark.parametrize("line", ["", "3", "abc", "10"])
def test_menu_unknown_choice(line):
    with pytest.raises(CommandParseError):
        parse_menu_choice(line)
