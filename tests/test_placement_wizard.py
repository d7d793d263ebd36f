"""Manual placement driven by scripted input."""

from salvo import placement_wizard
from salvo.battleship import Board
from salvo.config import SHIPS
from salvo.coord_utils import Coord


def _script(lines):
    it = iter(lines)
    prompts = []

    def recv(prompt):
        prompts.append(prompt)
        return next(it, None)

    return recv, prompts


def test_places_full_fleet_and_reports_errors():
    recv, prompts = _script(
        [
            "K1",  # bad coordinate
            "A1", "X",  # bad orientation
            "H1", "H",  # carrier would run off the right edge
            "A1", "H",
            "A1", "V",  # overlaps the carrier
            "A2", "h",
            "A3", "H",
            "J1", "v",
            "E5", "H",
        ]
    )
    notes = []
    grids = []

    board = Board()
    ok = placement_wizard.run(board, recv, notes.append, grids.append)

    assert ok
    assert [(s.name, s.length) for s in board.ships] == SHIPS
    assert board.ships[0].coords[-1] == Coord(0, 4)
    assert board.ships[3].coords == [Coord(0, 9), Coord(1, 9), Coord(2, 9)]
    assert board.ships[4].coords == [Coord(4, 4), Coord(4, 5)]
    assert any(n.startswith("Invalid coordinate") for n in notes)
    assert "Orientation must be H or V" in notes
    assert notes.count("Invalid placement: overlap / out-of-bounds") == 2
    assert "Place Carrier (size 5)" in notes
    assert all(g is board for g in grids)
    assert prompts[:2] == ["Coordinate (A5): ", "Coordinate (A5): "]


def test_end_of_input_aborts():
    recv, _ = _script(["A1", "H", "A2"])
    board = Board()
    assert not placement_wizard.run(board, recv, lambda _: None, lambda _: None)
    assert len(board.ships) == 1


def test_on_placed_can_abort():
    recv, _ = _script(["A1", "H", "A2", "H"])
    placed = []

    def on_placed(ship):
        placed.append(ship.name)
        return False

    board = Board()
    assert not placement_wizard.run(board, recv, lambda _: None, lambda _: None, on_placed=on_placed)
    assert placed == ["Carrier"]


def test_starts_from_a_clear_board(stacked_fleet):
    board = stacked_fleet(Board())
    recv, _ = _script(["J1", "V", "I1", "V", "H1", "V", "G1", "V", "F1", "V"])
    assert placement_wizard.run(board, recv, lambda _: None, lambda _: None)
    assert len(board.ships) == len(SHIPS)
    assert board.ships[0].coords[0] == Coord(0, 9)
