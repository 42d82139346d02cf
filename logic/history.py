"""
Move history for TicTacToe.

History is a tuple of HistoryEntry, starting with the empty board. A cursor
(step number) selects the entry currently shown. Every function here returns
new values and never changes the history it was given.
"""

import logging
from typing import List, Optional, Tuple
from .game_state import Board, EMPTY_BOARD, HistoryEntry, Move, Player

logger = logging.getLogger(__name__)

History = Tuple[HistoryEntry, ...]


def new_history() -> History:
    """Create the history of a fresh game: just the empty board."""
    return (HistoryEntry(board=EMPTY_BOARD),)


def record_move(
    history: History,
    cursor: int,
    board: Board,
    move: Optional[Move] = None
) -> Tuple[History, int]:
    """
    Append a new snapshot after the cursor.

    Entries after the cursor (left over from a rewind) are dropped first.

    Args:
        history: Current history.
        cursor: Current step number.
        board: Snapshot produced by the move.
        move: The move that produced it.

    Returns:
        (new history, new cursor)
    """
    kept = history[:cursor + 1]
    if len(kept) < len(history):
        logger.debug("Discarding %d future step(s)", len(history) - len(kept))

    return kept + (HistoryEntry(board=board, move=move),), cursor + 1


def jump_to(history: History, step: int) -> Optional[int]:
    """
    Move the cursor to a step without touching the history.

    Returns:
        The new cursor, or None if the step does not exist.
    """
    if not (0 <= step < len(history)):
        logger.warning("Ignoring jump to step %d, history has %d step(s)", step, len(history))
        return None
    return step


def current_board(history: History, cursor: int) -> Board:
    return history[cursor].board


def next_player(cursor: int) -> Player:
    """X plays on even steps, O on odd steps."""
    return Player.X if cursor % 2 == 0 else Player.O


def describe_step(step: int, entry: HistoryEntry) -> str:
    """Label for a history entry, e.g. "Go to move #3 (X at row 2, col 1)"."""
    if step == 0 or entry.move is None:
        return "Go to game start"

    move = entry.move
    return f"Go to move #{step} ({move.player.value} at row {move.row}, col {move.col})"


def ordered_steps(history: History, ascending: bool = True) -> List[int]:
    """Step numbers in display order, oldest first unless ascending is False."""
    steps = list(range(len(history)))
    if not ascending:
        steps.reverse()
    return steps
