"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple
from dataclasses import dataclass

from .board import Board, Player
from .config import GameConfig


@dataclass(frozen=True)
class WinResult:
    """A finished line: who completed it and which cells it uses."""
    winner: Player
    line: Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells with the same symbol in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = GameConfig.WINNING_LINES

    def check_winner(self, board: Board) -> Optional[WinResult]:
        """
        Check if there's a winner.

        Lines are checked in a fixed order, so a board with more than one
        complete line always reports the same one.

        Args:
            board: The board to check.

        Returns:
            WinResult for the first complete line, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            symbol = self._check_line(board, line)
            if symbol is not None:
                return WinResult(winner=Player(symbol), line=line)

        return None

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> Optional[str]:
        """Return the symbol filling every cell of the line, if any."""
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def is_full(self, board: Board) -> bool:
        """True when no cell is empty."""
        return all(cell is not None for cell in board)

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        A full board with a complete line is a win, never a draw.

        Args:
            board: The board to check.

        Returns:
            True if the game is a draw.
        """
        if self.check_winner(board) is not None:
            return False

        return self.is_full(board)

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a tuple of cell indices, or None.
        """
        result = self.check_winner(board)
        return result.line if result is not None else None


_checker = WinChecker()


def evaluate_winner(board: Board) -> Optional[WinResult]:
    """Return the winner of a board and the line they completed, or None."""
    return _checker.check_winner(board)


def is_draw(board: Board) -> bool:
    """
    True iff every cell is filled.

    Only meaningful once evaluate_winner() has found no winner; use
    WinChecker.check_draw() to get both checks together.
    """
    return _checker.is_full(board)
