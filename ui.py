"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (winning line highlighted)
- Game status (winner, draw or next player)
- Move history, each entry a button that jumps back to that move
- Buttons to reverse the history order and start a new game
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from logic.board import cell_location
from logic.config import GameConfig
from logic.session import GameSession, GameView


class UIConfig:
    """
    Configuration class for the window.
    Colours and fonts only; the game rules live in GameConfig.
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    WINDOW_SIZE = "640x420"
    BACKGROUND = '#1a1a2e'

    # ==================== BOARD SETTINGS ====================
    CELL_FONT = ('Segoe UI', 24, 'bold')
    CELL_BG = '#16213e'
    CELL_WIN_BG = '#065f46'
    SYMBOL_COLORS = {
        GameConfig.FIRST_PLAYER_SYMBOL: '#f87171',
        GameConfig.SECOND_PLAYER_SYMBOL: '#10b981',
    }

    # ==================== HISTORY SETTINGS ====================
    HISTORY_FONT = ('Segoe UI', 10)
    CURRENT_MOVE_FONT = ('Segoe UI', 10, 'bold')


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    The window keeps no game state of its own: every click is forwarded
    to the GameSession and the whole window is redrawn from its view.
    """

    def __init__(self, session: Optional[GameSession] = None):
        """Initialize the UI."""
        self.session = session or GameSession()
        self.history_buttons = []

        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(UIConfig.WINDOW_TITLE)
        self.root.configure(bg=UIConfig.BACKGROUND)
        self.root.geometry(UIConfig.WINDOW_SIZE)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=UIConfig.BACKGROUND)
        style.configure('TLabel', background=UIConfig.BACKGROUND, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.Y, padx=(0, 10))

        ttk.Label(left_frame, text="Game Board", style='Title.TLabel').pack(pady=(0, 10))

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        board_frame = ttk.Frame(left_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for index in range(GameConfig.BOARD_CELLS):
            row, col = cell_location(index)
            cell = tk.Button(
                board_frame,
                text="",
                font=UIConfig.CELL_FONT,
                width=3,
                height=1,
                bg=UIConfig.CELL_BG,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        control_frame = ttk.Frame(left_frame)
        control_frame.pack(pady=10)

        self.order_btn = tk.Button(
            control_frame,
            text="",
            font=('Segoe UI', 10, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._on_toggle_order
        )
        self.order_btn.pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="New Game",
            font=('Segoe UI', 10, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=self._on_new_game
        ).pack(side=tk.LEFT, padx=5)

        # Right panel - history
        right_frame = ttk.Frame(main_frame)
        right_frame.pack(side=tk.RIGHT, fill=tk.BOTH, expand=True, padx=(10, 0))

        ttk.Label(right_frame, text="Moves", style='Title.TLabel').pack(pady=(0, 10))

        self.history_frame = ttk.Frame(right_frame)
        self.history_frame.pack(fill=tk.BOTH, expand=True)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, cell_index: int):
        # Rejected moves are simply ignored
        if self.session.make_move(cell_index):
            self._refresh()

    def _on_jump(self, step: int):
        self.session.jump_to(step)
        self._refresh()

    def _on_toggle_order(self):
        self.session.toggle_order()
        self._refresh()

    def _on_new_game(self):
        """Start a new game."""
        print("Starting a new game...")
        self.session.new_game()
        self._refresh()

    def _refresh(self):
        """Redraw the whole window from the session."""
        view = self.session.view()
        self._update_board_display(view)
        self._update_history_display(view)

        self.status_label.configure(text=view.status.text)
        self.order_btn.configure(text="▲ Ascending" if view.ascending else "▼ Descending")

    def _update_board_display(self, view: GameView):
        """Update the board grid display."""
        winning_cells = set(view.winning_line or ())

        for index, symbol in enumerate(view.board):
            self.board_cells[index].configure(
                text=symbol or "",
                fg=UIConfig.SYMBOL_COLORS.get(symbol, 'white'),
                bg=UIConfig.CELL_WIN_BG if index in winning_cells else UIConfig.CELL_BG,
            )

    def _update_history_display(self, view: GameView):
        """Rebuild the list of history buttons."""
        for button in self.history_buttons:
            button.destroy()
        self.history_buttons = []

        for move in view.moves:
            is_current = move.step == view.current_step
            button = tk.Button(
                self.history_frame,
                text=move.label,
                font=UIConfig.CURRENT_MOVE_FONT if is_current else UIConfig.HISTORY_FONT,
                bg='#2d3748',
                fg='white',
                anchor='w',
                command=lambda s=move.step: self._on_jump(s)
            )
            button.pack(fill=tk.X, pady=1)
            self.history_buttons.append(button)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
