"""
Tests for GameSession, the object the UI and console drive.
"""

from logic.game_session import GameSession
from logic.game_state import EMPTY_BOARD, GameStatus, Player


def make_session(*cells):
    session = GameSession()
    for index in cells:
        assert session.on_cell_click(index)
    return session


def test_new_session():
    session = GameSession()
    assert session.current_board == EMPTY_BOARD
    assert session.cursor == 0
    assert session.next_player == Player.X
    assert session.status_text == "Next player: X"
    assert session.last_move is None
    assert session.move_list() == [(0, "Go to game start")]


def test_players_alternate():
    session = make_session(4)
    assert session.current_board[4] == Player.X
    assert session.next_player == Player.O
    assert session.status_text == "Next player: O"

    session.on_cell_click(0)
    assert session.current_board[0] == Player.O
    assert session.next_player == Player.X


def test_click_on_occupied_cell_is_ignored():
    session = make_session(4)
    history = session.history

    assert not session.on_cell_click(4)
    assert session.history is history
    assert session.cursor == 1
    assert session.next_player == Player.O


def test_win_ends_the_game():
    # X: 0, 1, 2   O: 3, 4
    session = make_session(0, 3, 1, 4, 2)
    assert session.status == GameStatus.WON
    assert session.winner.player == Player.X
    assert session.winner.line == (0, 1, 2)
    assert session.status_text == "Winner: X"
    assert session.is_game_over

    assert not session.on_cell_click(8)
    assert len(session.history) == 6


def test_draw_is_reported():
    # X O X / X O O / O X X
    session = make_session(0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert session.winner is None
    assert session.status == GameStatus.DRAW
    assert session.status_text == "Draw"
    assert session.is_game_over


def test_rewind_leaves_finished_game():
    session = make_session(0, 3, 1, 4, 2)
    assert session.on_history_entry_click(4)

    assert session.status == GameStatus.IN_PROGRESS
    assert session.next_player == Player.X
    assert len(session.history) == 6

    # Playing from the past drops the winning move
    assert session.on_cell_click(8)
    assert len(session.history) == 6
    assert session.cursor == 5
    assert session.current_board[2] is None
    assert session.winner is None


def test_rewind_to_start_then_move():
    session = make_session(4, 8)
    assert session.on_history_entry_click(0)
    assert session.on_cell_click(0)

    assert len(session.history) == 2
    assert session.cursor == 1
    assert session.current_board == (Player.X,) + (None,) * 8


def test_jump_forward_again():
    session = make_session(4, 8, 0)
    session.on_history_entry_click(1)
    assert session.on_history_entry_click(3)
    assert session.cursor == 3
    assert session.last_move.index == 0


def test_bad_jump_is_ignored():
    session = make_session(4)
    assert not session.on_history_entry_click(5)
    assert not session.on_history_entry_click(-1)
    assert session.cursor == 1


def test_sort_toggle_only_changes_order():
    session = make_session(4, 2)
    assert [step for step, _ in session.move_list()] == [0, 1, 2]

    assert session.on_sort_toggle_click() is False
    assert [step for step, _ in session.move_list()] == [2, 1, 0]
    assert session.cursor == 2
    assert session.next_player == Player.X

    assert session.on_sort_toggle_click() is True


def test_move_list_labels():
    session = make_session(4, 2)
    assert session.move_list() == [
        (0, "Go to game start"),
        (1, "Go to move #1 (X at row 2, col 2)"),
        (2, "Go to move #2 (O at row 1, col 3)"),
    ]
    assert session.is_current_step(2)
    assert not session.is_current_step(1)


def test_reset():
    session = make_session(4, 2)
    session.on_history_entry_click(1)
    session.reset()
    assert session.history == GameSession().history
    assert session.cursor == 0


def test_valid_moves_follow_the_shown_step():
    session = make_session(0, 3, 1, 4, 2)
    assert session.valid_moves == []

    session.on_history_entry_click(2)
    assert session.valid_moves == [1, 2, 4, 5, 6, 7, 8]


def test_turn_follows_cursor_after_rewind():
    session = make_session(4, 0, 8)
    assert session.next_player == Player.O

    session.on_history_entry_click(1)
    assert session.next_player == Player.O
    session.on_history_entry_click(2)
    assert session.next_player == Player.X
