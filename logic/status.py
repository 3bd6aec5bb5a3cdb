"""
Status line for TicTacToe: who won, a draw, or who moves next.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass

from .board import Board, Player
from .config import GameConfig
from .win_checker import WinChecker


class StatusKind(Enum):
    WINNER = "winner"
    DRAW = "draw"
    NEXT_PLAYER = "next_player"


@dataclass(frozen=True)
class Status:
    """Game status; player is the winner or the next player (None on a draw)."""
    kind: StatusKind
    player: Optional[Player] = None

    @property
    def text(self) -> str:
        if self.kind == StatusKind.WINNER:
            return GameConfig.STATUS_WINNER.format(player=self.player.value)
        if self.kind == StatusKind.DRAW:
            return GameConfig.STATUS_DRAW
        return GameConfig.STATUS_NEXT_PLAYER.format(player=self.player.value)


_checker = WinChecker()


def derive_status(board: Board, current_player: Player) -> Status:
    """A win beats a draw, and a draw beats the next-player message."""
    result = _checker.check_winner(board)
    if result is not None:
        return Status(kind=StatusKind.WINNER, player=result.winner)

    if _checker.check_draw(board):
        return Status(kind=StatusKind.DRAW)

    return Status(kind=StatusKind.NEXT_PLAYER, player=current_player)


def status_text(board: Board, current_player: Player) -> str:
    return derive_status(board, current_player).text
