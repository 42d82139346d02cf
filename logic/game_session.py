"""
Game session for TicTacToe.
Owns the history and cursor of one game and exposes the actions a
front end (Tkinter window or console) can trigger.
"""

import logging
from typing import Optional, List, Tuple
from .game_state import Board, GameStatus, Move, Player
from .move_validator import MoveValidator
from .win_checker import WinChecker, WinResult
from . import history as hist

logger = logging.getLogger(__name__)


class GameSession:
    """
    One game, from the empty board until the window closes.

    Tracks:
    - The history of board snapshots
    - The cursor (which step is shown)
    - The move list display order

    Whose turn it is comes from the cursor, it is never stored.
    """

    def __init__(
        self,
        validator: Optional[MoveValidator] = None,
        win_checker: Optional[WinChecker] = None
    ):
        self.win_checker = win_checker or WinChecker()
        self.validator = validator or MoveValidator(self.win_checker)

        self.history: hist.History = hist.new_history()
        self.cursor = 0

        # Move list order, display only
        self.ascending = True

    # ==================== ACTIONS ====================

    def on_cell_click(self, index: int) -> bool:
        """
        Play the next player's mark on a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was played, False if it was ignored.
        """
        player = self.next_player
        new_board = self.validator.apply_move(self.current_board, index, player)
        if new_board is None:
            return False

        move = Move.from_index(index, player)
        self.history, self.cursor = hist.record_move(
            self.history, self.cursor, new_board, move
        )
        logger.info("%s played row %d, col %d (step %d)", player.value, move.row, move.col, self.cursor)
        return True

    def on_history_entry_click(self, step: int) -> bool:
        """
        Show an earlier (or later) step of the game.

        Returns:
            True if the cursor moved, False if the step does not exist.
        """
        cursor = hist.jump_to(self.history, step)
        if cursor is None:
            return False

        self.cursor = cursor
        logger.info("Jumped to step %d", cursor)
        return True

    def on_sort_toggle_click(self) -> bool:
        """Flip the move list order. Returns True when oldest-first."""
        self.ascending = not self.ascending
        return self.ascending

    def reset(self):
        """Start a new game."""
        self.history = hist.new_history()
        self.cursor = 0
        logger.info("New game")

    # ==================== DERIVED STATE ====================

    @property
    def current_board(self) -> Board:
        return hist.current_board(self.history, self.cursor)

    @property
    def next_player(self) -> Player:
        return hist.next_player(self.cursor)

    @property
    def winner(self) -> Optional[WinResult]:
        return self.win_checker.check_winner(self.current_board)

    @property
    def status(self) -> GameStatus:
        return self.win_checker.get_status(self.current_board)

    @property
    def status_text(self) -> str:
        """Text for the status line: winner, draw or next player."""
        winner = self.winner
        if winner is not None:
            return f"Winner: {winner.player.value}"
        if self.status == GameStatus.DRAW:
            return "Draw"
        return f"Next player: {self.next_player.value}"

    @property
    def last_move(self) -> Optional[Move]:
        """The move that produced the current step, if any."""
        return self.history[self.cursor].move

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def valid_moves(self) -> List[int]:
        """Cells the next player may take on the current step."""
        return self.validator.get_valid_moves(self.current_board)

    def is_current_step(self, step: int) -> bool:
        return step == self.cursor

    def move_list(self) -> List[Tuple[int, str]]:
        """
        The history as (step, label) pairs in the current display order.
        """
        return [
            (step, hist.describe_step(step, self.history[step]))
            for step in hist.ordered_steps(self.history, self.ascending)
        ]
