"""Board rendering and the fog-of-war rule."""

from salvo.battleship import Board, Orientation, Ship
from salvo.coord_utils import Coord
from salvo.render import fleet_status, grid_rows, render_board, render_two_boards


def _board_with_destroyer() -> Board:
    board = Board()
    assert board.place_ship(Coord(0, 0), Orientation.HORIZONTAL, Ship("Destroyer", 2))
    return board


def test_opponent_view_hides_ships():
    board = _board_with_destroyer()
    assert "S" not in render_board(board, reveal=False)
    assert render_board(board, reveal=True).count("S") == 2


def test_hits_and_misses_always_shown():
    board = _board_with_destroyer()
    board.shoot_at(Coord(0, 0))
    board.shoot_at(Coord(5, 5))

    own = grid_rows(board, reveal=True)
    opp = grid_rows(board, reveal=False)
    assert own[0].startswith("X S")
    assert opp[0].startswith("X .")
    assert own[5].split()[5] == opp[5].split()[5] == "O"


def test_labels():
    lines = render_board(Board()).splitlines()
    assert lines[0] == "   A B C D E F G H I J"
    assert lines[1].startswith(" 1 ")
    assert lines[-1].startswith("10 ")
    assert len(lines) == 11


def test_side_by_side_hides_only_opponent_ships(stacked_fleet):
    own = stacked_fleet(Board())
    opp = stacked_fleet(Board())

    lines = render_two_boards(own, opp, header_left="Your board", header_right="Opponent view").splitlines()

    assert "[Your board]" in lines[0] and "[Opponent view]" in lines[0]
    assert len(lines) == 12
    for line in lines[2:]:
        left, right = line.split("   ")
        assert "S" not in right
    assert lines[2].split("   ")[0] == " 1 S S S S S . . . . ."


def test_fleet_status(stacked_fleet):
    board = stacked_fleet(Board())
    assert fleet_status(board) == "A B C S D"
    for point in board.ships[-1].coords:
        board.shoot_at(point)
    assert fleet_status(board) == "A B C S -"
