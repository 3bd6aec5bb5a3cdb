"""
Main entry point for TicTacToe.

Opens the Tkinter window by default; with --no-ui the game is played in
the console instead (h lists the commands).
"""

from typing import Optional

from logic.session import GameSession


HELP_TEXT = """Commands:
  0-8        play a cell (row-major, 0 is top-left)
  j <step>   jump to a history step
  o          reverse the history order
  n          start a new game
  h          show this help
  q          quit"""


class ConsoleGame:
    """
    Console shell for TicTacToe.

    Reads one command per line and forwards it to the GameSession.
    """

    def __init__(self, session: Optional[GameSession] = None):
        self.session = session or GameSession()
        self.is_running = False

    def start(self):
        """Start the game loop."""
        print(HELP_TEXT)
        self._show()

        self.is_running = True
        while self.is_running:
            try:
                command = input("\n> ")
            except EOFError:
                break
            self.is_running = self.handle_command(command)

    def handle_command(self, command: str) -> bool:
        """
        Run one console command.

        Returns:
            False when the user asked to quit, True otherwise.
        """
        parts = command.strip().lower().split()
        if not parts:
            return True

        name, args = parts[0], parts[1:]

        if name == "q":
            print("\nGame quit by user.")
            return False
        elif name == "h":
            print(HELP_TEXT)
        elif name == "o":
            self.session.toggle_order()
            self._show_history()
        elif name == "n":
            print("\nStarting a new game...")
            self.session.new_game()
            self._show()
        elif name == "j":
            self._jump(args)
        elif name.isdecimal():
            # Rejected moves are ignored, as a click on a taken cell would be
            if self.session.make_move(int(name)):
                self._show()
        else:
            print(f"Unknown command: {command.strip()!r} (h for help)")

        return True

    def _jump(self, args):
        """Jump to a step, checking it is in the history first."""
        history_length = len(self.session.state.history)

        if len(args) != 1 or not args[0].isdecimal() or int(args[0]) >= history_length:
            print(f"Usage: j <step>, where step is 0-{history_length - 1}")
            return

        self.session.jump_to(int(args[0]))
        self._show()

    def _show(self):
        self.session.print_board()
        self._show_history()

    def _show_history(self):
        view = self.session.view()
        print("\nHistory:")
        for move in view.moves:
            marker = "*" if move.step == view.current_step else " "
            print(f" {marker} {move.step}. {move.label}")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe with move history")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args()

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI()
        ui.run()
        return

    game = ConsoleGame()

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
