"""
Render module for TicTacToe.
Draws the board into an image and maps clicks back to cells.
"""

from .config import RenderConfig
from .board_renderer import BoardRenderer
