"""
Game session for TicTacToe.

A session is what a UI talks to: it owns the current GameState and the
order the history list is shown in, and turns both into a GameView.
"""

from typing import Optional, List, Tuple
from dataclasses import dataclass

from .board import Board
from .game_state import GameState
from .history import MoveDescription, describe_moves, order_moves
from .status import Status


@dataclass(frozen=True)
class GameView:
    """Everything a UI needs to draw one frame of the game."""
    board: Board
    status: Status
    moves: List[MoveDescription]
    winning_line: Optional[Tuple[int, int, int]]
    current_step: int
    ascending: bool


class GameSession:
    """
    One game from start to finish, plus any restarts.

    The state is replaced, never modified, on every accepted action.
    """

    def __init__(self):
        self.state = GameState()
        self.ascending = True

    def make_move(self, cell_index: int) -> bool:
        """
        Play the current player's symbol on a cell.

        Returns:
            True if the move was played. False if it was rejected, in
            which case nothing changes.
        """
        new_state = self.state.make_move(cell_index)
        if new_state is None:
            return False

        self.state = new_state
        return True

    def jump_to(self, step: int):
        """Show the board as of a history step; the next move is played from it."""
        self.state = self.state.jump_to(step)

    def toggle_order(self):
        """Flip the history list between oldest-first and newest-first."""
        self.ascending = not self.ascending

    def new_game(self):
        """Start over from an empty board."""
        self.state = GameState()

    def view(self) -> GameView:
        result = self.state.win_result
        return GameView(
            board=self.state.current_board,
            status=self.state.status,
            moves=order_moves(describe_moves(self.state.history), self.ascending),
            winning_line=result.line if result is not None else None,
            current_step=self.state.step,
            ascending=self.ascending,
        )

    def print_board(self):
        self.state.print_board()
