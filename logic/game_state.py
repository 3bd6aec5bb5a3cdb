"""
Game state management for TicTacToe.
Tracks the move history and which step of it is being shown.
"""

from typing import Optional
from dataclasses import dataclass, field

from .board import Board, Player
from .config import GameConfig
from .history import History, apply_move, jump_to, new_history
from .status import Status, derive_status
from .win_checker import WinChecker, WinResult


@dataclass(frozen=True)
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The move history (board snapshots, entry 0 is the empty board)
    - The current step (which snapshot is shown and played on)

    Everything else (current player, winner, draw) is derived from these
    two fields. Moves and jumps return a new GameState.
    """

    history: History = field(default_factory=new_history)
    step: int = 0

    @property
    def current_board(self) -> Board:
        """The board at the current step."""
        return self.history[self.step].squares

    @property
    def current_player(self) -> Player:
        """Whose turn it is, from the parity of the current step."""
        return Player.for_step(self.step)

    @property
    def win_result(self) -> Optional[WinResult]:
        return WinChecker().check_winner(self.current_board)

    @property
    def winner(self) -> Optional[Player]:
        result = self.win_result
        return result.winner if result is not None else None

    @property
    def is_draw(self) -> bool:
        return WinChecker().check_draw(self.current_board)

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None or self.is_draw

    @property
    def status(self) -> Status:
        return derive_status(self.current_board, self.current_player)

    def make_move(self, cell_index: int) -> Optional["GameState"]:
        """
        Make a move at the given cell.

        Args:
            cell_index: Cell index (0-8).

        Returns:
            The new GameState, or None if the move was rejected.
        """
        result = apply_move(self.history, self.step, cell_index)
        if result is None:
            return None

        history, step = result
        return GameState(history=history, step=step)

    def jump_to(self, step: int) -> "GameState":
        """Return the state with a different step selected."""
        return GameState(history=self.history, step=jump_to(self.history, step))

    def print_board(self):
        """Print the current board to console."""
        print("\n    " + "   ".join(str(col) for col in range(GameConfig.COL_LENGTH)))
        print("  ┌" + "┬".join(["───"] * GameConfig.COL_LENGTH) + "┐")

        for row in range(GameConfig.ROW_LENGTH):
            start = row * GameConfig.COL_LENGTH
            cells = self.current_board[start:start + GameConfig.COL_LENGTH]
            row_str = "│".join(f" {cell or ' '} " for cell in cells)
            print(f"{row} │{row_str}│")

            if row < GameConfig.ROW_LENGTH - 1:
                print("  ├" + "┼".join(["───"] * GameConfig.COL_LENGTH) + "┤")

        print("  └" + "┴".join(["───"] * GameConfig.COL_LENGTH) + "┘")
        print(f"\n{self.status.text}")
