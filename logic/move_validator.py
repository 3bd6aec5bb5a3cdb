"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass

from .board import Board, cell_location
from .config import GameConfig
from .win_checker import WinChecker


class RejectReason(Enum):
    """Why a move was turned down."""
    OUT_OF_RANGE = "out_of_range"
    GAME_OVER = "game_over"
    OCCUPIED = "occupied"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[RejectReason] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. The cell index must be on the board
    2. Game must not be won already
    3. Can only place on empty cells
    """

    def __init__(self):
        self.win_checker = WinChecker()

    def validate_move(self, board: Board, cell_index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: The board the move would be played on.
            cell_index: Cell to place the symbol on (0-8).

        Returns:
            ValidationResult with is_valid, reason and error_message.
        """
        # bool is an int subclass but never a cell
        if (
            not isinstance(cell_index, int)
            or isinstance(cell_index, bool)
            or not 0 <= cell_index < GameConfig.BOARD_CELLS
        ):
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.OUT_OF_RANGE,
                error_message=(
                    f"Invalid cell {cell_index!r}. "
                    f"Must be 0-{GameConfig.BOARD_CELLS - 1}."
                ),
            )

        # A finished game accepts no more moves
        result = self.win_checker.check_winner(board)
        if result is not None:
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.GAME_OVER,
                error_message=f"Game is already over! {result.winner.value} won.",
            )

        if board[cell_index] is not None:
            row, col = cell_location(cell_index)
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.OCCUPIED,
                error_message=(
                    f"Cell ({row}, {col}) is already occupied by {board[cell_index]}"
                ),
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves on a board.

        Returns:
            List of empty cell indices, or an empty list once someone has won.
        """
        if self.win_checker.check_winner(board) is not None:
            return []

        return [index for index, cell in enumerate(board) if cell is None]
