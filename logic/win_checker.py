"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple
from dataclasses import dataclass
from .game_state import Board, GameStatus, Player, is_board_full


@dataclass(frozen=True)
class WinResult:
    """Who won, and the three cells that make the winning line."""
    player: Player
    line: Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, checked in this order
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

    def check_winner(self, board: Board) -> Optional[WinResult]:
        """
        Check if there's a winner.

        Args:
            board: The board snapshot.

        Returns:
            WinResult for the first completed line, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return WinResult(player=winner, line=line)

        return None

    def _check_line(
        self,
        board: Board,
        line: Tuple[int, int, int]
    ) -> Optional[Player]:
        """
        Check if a single line has a winner.

        Returns:
            The Player owning all 3 cells, None otherwise.
        """
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.check_winner(board) is not None:
            return False

        return is_board_full(board)

    def get_status(self, board: Board) -> GameStatus:
        """Classify a snapshot as in progress, won or drawn."""
        if self.check_winner(board) is not None:
            return GameStatus.WON
        if is_board_full(board):
            return GameStatus.DRAW
        return GameStatus.IN_PROGRESS


_default_checker = WinChecker()


def detect_winner(board: Board) -> Optional[WinResult]:
    """Shortcut for WinChecker().check_winner(board)."""
    return _default_checker.check_winner(board)


# Quick test
if __name__ == "__main__":
    from .game_state import board_from_string

    print("Testing WinChecker...")

    checker = WinChecker()

    result = checker.check_winner(board_from_string("XXXOO    "))
    print(f"Test 1 (row): {result}")
    assert result == WinResult(Player.X, (0, 1, 2))

    result = checker.check_winner(board_from_string("OX OX  X "))
    print(f"Test 2 (column): {result}")
    assert result == WinResult(Player.X, (1, 4, 7))

    board = board_from_string("XOXOXOOXO")
    print(f"Test 3 (draw): status = {checker.get_status(board)}")
    assert checker.check_draw(board)

    print("\nWinChecker test done!")
