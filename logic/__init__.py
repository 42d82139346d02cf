"""
Logic module for TicTacToe.
Handles game state, rules, winner detection and move history.
"""

from .game_state import Board, GameStatus, HistoryEntry, Move, Player, EMPTY_BOARD
from .move_validator import MoveValidator, ValidationResult, apply_move
from .win_checker import WinChecker, WinResult, detect_winner
from .game_session import GameSession

__version__ = "1.0.0"
