"""
Board representation for TicTacToe.
Defines the players, the board snapshot and the move snapshot.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig


# Row-major cells: None means empty, otherwise "X" or "O"
Board = Tuple[Optional[str], ...]


class Player(Enum):
    """The two players in the game."""
    X = GameConfig.FIRST_PLAYER_SYMBOL
    O = GameConfig.SECOND_PLAYER_SYMBOL

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @classmethod
    def for_step(cls, step: int) -> "Player":
        """
        Get the player who moves next at a history step.

        Turns are never stored: X moves on even steps, O on odd steps.
        """
        return cls.X if step % 2 == 0 else cls.O


@dataclass(frozen=True)
class Move:
    """
    A snapshot of the board after a move.
    The first history entry is the empty board (no move played).
    """
    squares: Board


def empty_board() -> Board:
    """Create a board with every cell empty."""
    return (None,) * GameConfig.BOARD_CELLS


def cell_location(cell_index: int) -> Tuple[int, int]:
    """
    Convert a cell index into its position on the grid.

    Args:
        cell_index: Row-major index (0-8).

    Returns:
        (row, col) tuple.
    """
    return divmod(cell_index, GameConfig.COL_LENGTH)


def place(board: Board, cell_index: int, player: Player) -> Board:
    """Return a copy of the board with the player's symbol placed on a cell."""
    squares = list(board)
    squares[cell_index] = player.value
    return tuple(squares)
