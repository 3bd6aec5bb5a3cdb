"""
Tests for the board, win checker, move validator and status line.
"""

import pytest

from logic.board import Move, Player, cell_location, empty_board, place
from logic.move_validator import MoveValidator, RejectReason
from logic.status import StatusKind, derive_status, status_text
from logic.win_checker import WinChecker, WinResult, evaluate_winner, is_draw


X, O, _ = "X", "O", None

DRAW_BOARD = (
    X, O, X,
    X, O, O,
    O, X, X,
)


def board_with(cells, symbol):
    """Board with the symbol on the given cells and nothing else."""
    board = empty_board()
    for index in cells:
        board = place(board, index, Player(symbol))
    return board


def test_empty_board():
    board = empty_board()
    assert len(board) == 9
    assert all(cell is None for cell in board)


@pytest.mark.parametrize("index, location", [
    (0, (0, 0)), (2, (0, 2)), (3, (1, 0)), (4, (1, 1)), (8, (2, 2)),
])
def test_cell_location(index, location):
    assert cell_location(index) == location


def test_place_copies_board():
    board = empty_board()
    new_board = place(board, 4, Player.X)
    assert new_board[4] == "X"
    assert board[4] is None


def test_player_for_step():
    assert Player.for_step(0) == Player.X
    assert Player.for_step(1) == Player.O
    assert Player.for_step(6) == Player.X
    assert Player.X.opposite() == Player.O
    assert Player.O.opposite() == Player.X


def test_move_is_frozen():
    move = Move(squares=empty_board())
    with pytest.raises(AttributeError):
        move.squares = DRAW_BOARD


@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
@pytest.mark.parametrize("symbol", ["X", "O"])
def test_every_line_wins(line, symbol):
    result = evaluate_winner(board_with(line, symbol))
    assert result == WinResult(winner=Player(symbol), line=line)


def test_no_winner():
    assert evaluate_winner(empty_board()) is None
    assert evaluate_winner((X, O, X, _, O, _, _, X, _)) is None
    assert evaluate_winner(DRAW_BOARD) is None


def test_first_line_wins_tie_break():
    # Two complete lines can only come from an invalid board, but the
    # answer still has to be stable
    board = (
        O, O, O,
        X, X, X,
        _, _, _,
    )
    assert evaluate_winner(board) == WinResult(winner=Player.O, line=(0, 1, 2))

    board = (
        X, _, O,
        X, _, O,
        X, _, O,
    )
    assert evaluate_winner(board).line == (0, 3, 6)


def test_is_draw():
    assert is_draw(DRAW_BOARD)
    assert not is_draw(empty_board())
    assert not is_draw((X, O, X, X, O, O, O, X, _))


def test_full_winning_board_is_win_not_draw():
    board = (
        X, X, X,
        O, O, X,
        X, O, O,
    )
    checker = WinChecker()
    assert checker.check_winner(board).winner == Player.X
    assert not checker.check_draw(board)
    assert checker.check_draw(DRAW_BOARD)
    assert checker.get_winning_line(board) == (0, 1, 2)
    assert checker.get_winning_line(DRAW_BOARD) is None


def test_validate_move():
    validator = MoveValidator()
    board = place(empty_board(), 4, Player.X)

    assert validator.validate_move(board, 0).is_valid

    result = validator.validate_move(board, 4)
    assert not result.is_valid
    assert result.reason == RejectReason.OCCUPIED
    assert "(1, 1)" in result.error_message


@pytest.mark.parametrize("cell_index", [-1, 9, 100, "4", 4.0, None, True])
def test_validate_move_out_of_range(cell_index):
    result = MoveValidator().validate_move(empty_board(), cell_index)
    assert not result.is_valid
    assert result.reason == RejectReason.OUT_OF_RANGE


def test_validate_move_after_win():
    board = board_with((0, 3, 6), "X")
    result = MoveValidator().validate_move(board, 4)
    assert not result.is_valid
    assert result.reason == RejectReason.GAME_OVER


def test_out_of_range_checked_before_game_over():
    board = board_with((0, 3, 6), "X")
    result = MoveValidator().validate_move(board, 9)
    assert result.reason == RejectReason.OUT_OF_RANGE


def test_get_valid_moves():
    validator = MoveValidator()
    assert validator.get_valid_moves(empty_board()) == list(range(9))
    assert validator.get_valid_moves((X, O, _, _, _, _, _, _, X)) == [2, 3, 4, 5, 6, 7]
    assert validator.get_valid_moves(board_with((2, 4, 6), "O")) == []
    assert validator.get_valid_moves(DRAW_BOARD) == []


def test_status():
    assert status_text(empty_board(), Player.X) == "Next player: X"
    assert status_text(board_with((0, 3, 6), "X"), Player.O) == "Winner: X"
    assert status_text(DRAW_BOARD, Player.O) == "Draw"


def test_status_winner_beats_draw():
    board = (
        X, X, X,
        O, O, X,
        X, O, O,
    )
    status = derive_status(board, Player.O)
    assert status.kind == StatusKind.WINNER
    assert status.player == Player.X


def test_status_draw_has_no_player():
    status = derive_status(DRAW_BOARD, Player.O)
    assert status.kind == StatusKind.DRAW
    assert status.player is None
