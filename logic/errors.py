"""
Errors raised by the game logic.

Rejected moves are not errors: they are reported through ValidationResult
and ignored by the UI. Everything here means the move history has been
corrupted by a bug, so nothing in the game catches these.
"""


class HistoryInvariantError(AssertionError):
    """Raised when the move history breaks one of its invariants"""


class StepOutOfRange(HistoryInvariantError):
    """Raised when jumping to a step that is not in the history"""

    def __init__(self, step: int, history_length: int, *args: object) -> None:
        self.step = step
        self.history_length = history_length
        super().__init__(*args)

    def __str__(self) -> str:
        return (
            f"Step {self.step} is outside the history "
            f"(valid steps are 0 to {self.history_length - 1})"
        )


class MissingMoveError(HistoryInvariantError):
    """Raised when two successive boards do not differ by a move"""

    def __init__(self, prev_board, cur_board, *args: object) -> None:
        self.prev_board = prev_board
        self.cur_board = cur_board
        super().__init__(*args)

    def __str__(self) -> str:
        return f"No move found between {self.prev_board} and {self.cur_board}"
