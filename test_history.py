"""
Tests for move history: recording, rewinding and turn order.
"""

from logic.game_state import EMPTY_BOARD, HistoryEntry, Move, Player
from logic.history import (
    current_board,
    describe_step,
    jump_to,
    new_history,
    next_player,
    ordered_steps,
    record_move,
)
from logic.move_validator import apply_move


def play(history, cursor, *cells):
    """Play cells in order from the cursor, alternating players."""
    for index in cells:
        player = next_player(cursor)
        board = apply_move(current_board(history, cursor), index, player)
        assert board is not None
        history, cursor = record_move(history, cursor, board, Move.from_index(index, player))
    return history, cursor


def test_new_history_holds_empty_board():
    history = new_history()
    assert len(history) == 1
    assert history[0] == HistoryEntry(board=EMPTY_BOARD, move=None)


def test_record_move_appends_and_advances():
    history, cursor = play(new_history(), 0, 4)
    assert len(history) == 2
    assert cursor == 1
    assert history[1].board[4] == Player.X
    assert history[1].move == Move(Player.X, 4, 2, 2)


def test_past_snapshots_are_kept_intact():
    history, cursor = play(new_history(), 0, 4, 0, 8)
    assert history[0].board == EMPTY_BOARD
    assert history[1].board == (None, None, None, None, Player.X, None, None, None, None)
    assert history[2].board[0] == Player.O
    assert history[2].board[8] is None


def test_jump_then_record_discards_future():
    history, cursor = play(new_history(), 0, 0, 1, 2, 3)
    assert len(history) == 5
    assert cursor == 4

    cursor = jump_to(history, 2)
    assert cursor == 2
    assert len(history) == 5

    history, cursor = play(history, cursor, 8)
    assert len(history) == 4
    assert cursor == 3
    assert history[3].board[8] == Player.X
    assert history[3].board[2] is None


def test_rewind_to_start_and_replay():
    history, cursor = play(new_history(), 0, 4, 8)
    assert len(history) == 3
    assert cursor == 2

    cursor = jump_to(history, 0)
    history, cursor = play(history, cursor, 0)

    assert len(history) == 2
    assert cursor == 1
    assert history[1].board == (Player.X,) + (None,) * 8


def test_jump_out_of_range_is_rejected():
    history, _ = play(new_history(), 0, 4, 8)
    assert jump_to(history, 3) is None
    assert jump_to(history, -1) is None
    assert jump_to(history, 2) == 2


def test_jump_does_not_change_history():
    history, _ = play(new_history(), 0, 4, 8)
    before = history
    jump_to(history, 1)
    assert history == before


def test_next_player_from_cursor():
    for cursor in (0, 2, 4, 6, 8):
        assert next_player(cursor) == Player.X
    for cursor in (1, 3, 5, 7):
        assert next_player(cursor) == Player.O


def test_describe_step():
    history, _ = play(new_history(), 0, 4, 2)
    assert describe_step(0, history[0]) == "Go to game start"
    assert describe_step(1, history[1]) == "Go to move #1 (X at row 2, col 2)"
    assert describe_step(2, history[2]) == "Go to move #2 (O at row 1, col 3)"


def test_ordered_steps():
    history, _ = play(new_history(), 0, 4, 2, 6)
    assert ordered_steps(history) == [0, 1, 2, 3]
    assert ordered_steps(history, ascending=False) == [3, 2, 1, 0]
