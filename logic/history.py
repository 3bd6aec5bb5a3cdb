"""
Move history for TicTacToe.

The history is a tuple of Move snapshots: entry 0 is the empty board and
entry k is the board after k moves. Every function here returns new data
and leaves its input untouched, so a snapshot handed to the UI stays valid
after later moves.
"""

from typing import Optional, List, Tuple
from dataclasses import dataclass

from .board import Board, Move, Player, cell_location, empty_board, place
from .config import GameConfig
from .errors import MissingMoveError, StepOutOfRange
from .move_validator import MoveValidator


History = Tuple[Move, ...]


@dataclass(frozen=True)
class MoveDescription:
    """One history entry as the UI lists it."""
    step: int
    location: Optional[Tuple[int, int]]  # None for the game start
    label: str


_validator = MoveValidator()


def new_history() -> History:
    """Create a history holding only the empty board."""
    return (Move(squares=empty_board()),)


def apply_move(
    history: History,
    current_step: int,
    cell_index: int
) -> Optional[Tuple[History, int]]:
    """
    Play a move on the board at current_step.

    Any moves after current_step (left over from jumping back) are
    discarded before the new move is appended.

    Args:
        history: The current history.
        current_step: Step whose board the move is played on.
        cell_index: Cell to play (0-8).

    Returns:
        (new_history, new_step), or None if the move is rejected.
    """
    jump_to(history, current_step)
    board = history[current_step].squares

    if not _validator.validate_move(board, cell_index).is_valid:
        return None

    player = Player.for_step(current_step)
    new_move = Move(squares=place(board, cell_index, player))
    return history[:current_step + 1] + (new_move,), current_step + 1


def jump_to(history: History, step: int) -> int:
    """
    Select a step as the current one.

    The history itself is not changed; whose turn it is follows from the
    step, so there is nothing else to update.

    Raises:
        StepOutOfRange: If step is not in the history.
    """
    # bool is an int subclass but never a step
    if (
        not isinstance(step, int)
        or isinstance(step, bool)
        or not 0 <= step < len(history)
    ):
        raise StepOutOfRange(step, len(history))
    return step


def locate_move(prev_board: Board, cur_board: Board) -> Tuple[int, int]:
    """
    Find where the move between two successive boards was played.

    Raises:
        MissingMoveError: If the boards do not differ.
    """
    if len(prev_board) != len(cur_board):
        raise MissingMoveError(prev_board, cur_board)

    for index, (before, after) in enumerate(zip(prev_board, cur_board)):
        if before != after:
            return cell_location(index)

    raise MissingMoveError(prev_board, cur_board)


def describe_moves(history: History) -> List[MoveDescription]:
    """Label every history entry with the move that produced it."""
    descriptions = [
        MoveDescription(step=0, location=None, label=GameConfig.HISTORY_START_LABEL)
    ]

    for step in range(1, len(history)):
        row, col = locate_move(history[step - 1].squares, history[step].squares)
        descriptions.append(MoveDescription(
            step=step,
            location=(row, col),
            label=GameConfig.HISTORY_MOVE_LABEL.format(step=step, row=row, col=col),
        ))

    return descriptions


def order_moves(
    descriptions: List[MoveDescription],
    ascending: bool = True
) -> List[MoveDescription]:
    """Order history entries for display; each keeps its own step."""
    return sorted(descriptions, key=lambda d: d.step, reverse=not ascending)
