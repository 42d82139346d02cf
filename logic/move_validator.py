"""
Move validator for TicTacToe.
Validates that moves follow the rules and applies them to a snapshot.
"""

import logging
from typing import Optional, List
from dataclasses import dataclass
from .game_state import Board, Player, CELL_COUNT, get_empty_cells
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Index must be on the board (0-8)
    2. Can only place on empty cells
    3. Game must not be over
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board snapshot.
            index: Cell to place the mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not (0 <= index < CELL_COUNT):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{CELL_COUNT - 1}."
            )

        # Check if game is over
        winner = self.win_checker.check_winner(board)
        if winner is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already over, {winner.player.value} won!"
            )

        # Check if cell is empty
        if board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board[index].value}"
            )

        return ValidationResult(is_valid=True)

    def apply_move(
        self,
        board: Board,
        index: int,
        player: Player
    ) -> Optional[Board]:
        """
        Place a player's mark on a copy of the board.

        The input snapshot is left untouched, so earlier history entries
        stay valid.

        Args:
            board: Current board snapshot.
            index: Cell to place the mark on (0-8).
            player: Who is moving.

        Returns:
            The new snapshot, or None if the move was rejected.
        """
        result = self.validate_move(board, index)
        if not result.is_valid:
            logger.debug("Rejected move by %s: %s", player.value, result.error_message)
            return None

        return board[:index] + (player,) + board[index + 1:]

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves on a snapshot.

        Returns:
            List of empty cell indices, or [] once the game is won.
        """
        if self.win_checker.check_winner(board) is not None:
            return []

        return get_empty_cells(board)


_default_validator = MoveValidator()


def apply_move(board: Board, index: int, player: Player) -> Optional[Board]:
    """Shortcut for MoveValidator().apply_move(...)."""
    return _default_validator.apply_move(board, index, player)
