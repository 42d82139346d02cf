"""
Main script for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.
Both play the same GameSession: two players take turns on one board, and
any earlier move can be revisited and played over.
"""

import argparse
import logging
from typing import List, Optional

from logic.game_session import GameSession
from logic.game_state import format_board
from render.config import RenderConfig

logger = logging.getLogger(__name__)


HELP_TEXT = """Commands:
  1-9     play on that cell
  j N     jump to step N (0 = game start)
  h       show move history
  s       toggle history order
  n       new game
  q       quit"""


class ConsoleGame:
    """
    Console front end for a GameSession.

    Game flow:
    1. Show the board and status
    2. Read a command
    3. Apply it to the session (illegal moves are ignored)
    4. Repeat until the player quits
    """

    def __init__(self, session: Optional[GameSession] = None):
        self.session = session or GameSession()
        self.is_running = False

    def start(self):
        """Start the game loop."""
        print("\nStarting TicTacToe game...")
        print(HELP_TEXT + "\n")

        self.is_running = True
        self._show()

        while self.is_running:
            try:
                line = input("> ")
            except EOFError:
                break
            self.handle_command(line)

    def handle_command(self, line: str) -> bool:
        """
        Run one console command.

        Args:
            line: The text the player typed.

        Returns:
            True if the command was understood.
        """
        parts = line.strip().lower().split()
        if not parts:
            return False

        command = parts[0]

        if command.isdecimal() and len(parts) == 1:
            cell = int(command)
            if not 1 <= cell <= 9:
                print("Please type a cell number 1..9.")
                return False
            if self.session.on_cell_click(cell - 1):
                self._show()
            elif self.session.is_game_over:
                print("Game over. Jump back with 'j N' or start a new game with 'n'.")
            else:
                free = ", ".join(str(i + 1) for i in self.session.valid_moves)
                print(f"Illegal move, free cells: {free}")
            return True

        if command == "j" and len(parts) == 2 and parts[1].isdecimal():
            if self.session.on_history_entry_click(int(parts[1])):
                self._show()
            else:
                print(f"No step {parts[1]}, history goes up to {len(self.session.history) - 1}.")
            return True

        if command == "h":
            self._show_history()
            return True

        if command == "s":
            order = "oldest first" if self.session.on_sort_toggle_click() else "newest first"
            print(f"History order: {order}")
            self._show_history()
            return True

        if command == "n":
            self.session.reset()
            self._show()
            return True

        if command == "q":
            print("\nGame quit by user.")
            self.is_running = False
            return True

        print(HELP_TEXT)
        return False

    def _show(self):
        print()
        print(format_board(self.session.current_board))
        print(f"\n{self.session.status_text}")

    def _show_history(self):
        for step, label in self.session.move_list():
            marker = ">" if self.session.is_current_step(step) else " "
            print(f" {marker} {step}: {label}")


def cell_size(value: str) -> int:
    """argparse type for --cell-size."""
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a whole number")
    if size < RenderConfig.MIN_CELL_SIZE:
        raise argparse.ArgumentTypeError(
            f"cell size must be at least {RenderConfig.MIN_CELL_SIZE} pixels"
        )
    return size


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse the command line shared by main.py and ui.py."""
    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--cell-size",
        type=cell_size,
        default=RenderConfig.CELL_SIZE,
        help="Size of a board cell in pixels"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    return parser.parse_args(argv)


def setup_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )


def main():
    """Main entry point."""
    args = parse_args()
    setup_logging(args.log_level)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(RenderConfig(cell_size=args.cell_size))
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame()

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
