"""
Logic module for TicTacToe.
Handles the board, move history, time travel and game status.
"""

from .board import Board, Move, Player
from .errors import HistoryInvariantError, MissingMoveError, StepOutOfRange
from .game_state import GameState
from .history import (
    MoveDescription,
    apply_move,
    describe_moves,
    jump_to,
    locate_move,
    new_history,
    order_moves,
)
from .move_validator import MoveValidator, RejectReason, ValidationResult
from .session import GameSession, GameView
from .status import Status, StatusKind, derive_status, status_text
from .win_checker import WinChecker, WinResult, evaluate_winner, is_draw

__version__ = "1.0.0"
