"""
Game state types for TicTacToe.
Players, board snapshots, move records and history entries.

A board snapshot is a tuple of 9 cells in row-major order:

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Player(Enum):
    """The two players in the game. X always moves first."""
    X = "X"
    O = "O"


class GameStatus(Enum):
    """Where a game currently stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


# None means empty, otherwise the Player who owns the cell
Cell = Optional[Player]
Board = Tuple[Cell, ...]

EMPTY_BOARD: Board = (None,) * CELL_COUNT


def index_to_coords(index: int) -> Tuple[int, int]:
    """
    Convert a 0-based cell index to a 1-based (row, col) pair.

    Args:
        index: Cell index (0-8).

    Returns:
        (row, col), each in 1-3.
    """
    return index // BOARD_SIZE + 1, index % BOARD_SIZE + 1


def get_empty_cells(board: Board) -> List[int]:
    """Get the indices of all empty cells."""
    return [i for i, cell in enumerate(board) if cell is None]


def is_board_full(board: Board) -> bool:
    return all(cell is not None for cell in board)


def board_from_string(text: str) -> Board:
    """
    Build a snapshot from a 9 character string such as "XX O  O  ".

    Spaces, dots and underscores are empty cells.
    """
    cells = [c for c in text if c not in "\n|"]
    if len(cells) != CELL_COUNT:
        raise ValueError(f"Board needs {CELL_COUNT} cells, got {len(cells)}")

    board = []
    for c in cells:
        if c in " ._":
            board.append(None)
        else:
            board.append(Player(c.upper()))
    return tuple(board)


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell index (0-8)
    row: int                # Row (1-3)
    col: int                # Column (1-3)

    @classmethod
    def from_index(cls, index: int, player: Player) -> "Move":
        """Create a move record for a cell index."""
        row, col = index_to_coords(index)
        return cls(player=player, index=index, row=row, col=col)


@dataclass(frozen=True)
class HistoryEntry:
    """One step of the game: the board after a move, and that move."""
    board: Board
    move: Optional[Move] = None     # None for the starting position


def format_board(board: Board) -> str:
    """
    Render a snapshot as text for the console.

    Empty cells show their 1-based number so the player knows what to type.
    """
    lines = []
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            index = row * BOARD_SIZE + col
            cell = board[index]
            cells.append(cell.value if cell is not None else str(index + 1))
        lines.append(" " + " | ".join(cells))
        if row < BOARD_SIZE - 1:
            lines.append("---+---+---")
    return "\n".join(lines)
