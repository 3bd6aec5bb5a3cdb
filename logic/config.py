"""
Game configuration for TicTacToe.
All the fixed settings for the board, the players and the text shown to the user.
"""


class GameConfig:
    """
    Configuration class for game settings.
    The shipped game is always 3x3; the winning lines below assume it.
    """

    # ==================== BOARD SETTINGS ====================
    ROW_LENGTH = 3
    COL_LENGTH = 3

    # Total number of cells on the board
    BOARD_CELLS = ROW_LENGTH * COL_LENGTH  # 9

    # ==================== PLAYER SETTINGS ====================
    # X always moves first (on even steps)
    FIRST_PLAYER_SYMBOL = "X"
    SECOND_PLAYER_SYMBOL = "O"

    # ==================== WINNING LINES ====================
    # Checked in this order; the first complete line wins
    WINNING_LINES = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    # ==================== TEXT SETTINGS ====================
    STATUS_WINNER = "Winner: {player}"
    STATUS_DRAW = "Draw"
    STATUS_NEXT_PLAYER = "Next player: {player}"

    HISTORY_START_LABEL = "Go to game start"
    HISTORY_MOVE_LABEL = "Go to move #{step} ({row}, {col})"
