"""
Render configuration for TicTacToe.
All the settings for drawing the board.
"""

import cv2
from typing import Optional


class RenderConfig:
    """
    Configuration class for board rendering.
    Colors are BGR, as OpenCV expects.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Size of each cell in pixels
    CELL_SIZE = 120

    # Smallest cell that still fits a mark and its padding
    MIN_CELL_SIZE = 30

    # Space between a mark and the cell border
    MARK_PADDING = 24

    # ==================== LINE WIDTHS ====================
    GRID_THICKNESS = 4
    MARK_THICKNESS = 10
    WIN_LINE_THICKNESS = 8

    # ==================== COLORS (BGR) ====================
    BACKGROUND_COLOR = (62, 33, 22)       # Dark navy
    GRID_COLOR = (128, 128, 128)
    X_COLOR = (113, 113, 248)             # Red
    O_COLOR = (129, 185, 16)              # Green
    LAST_MOVE_COLOR = (84, 65, 45)        # Slightly lighter cell
    WIN_CELL_COLOR = (0, 95, 120)
    WIN_LINE_COLOR = (0, 215, 255)        # Gold

    # ==================== LABELS ====================
    FONT = cv2.FONT_HERSHEY_SIMPLEX
    SHOW_CELL_NUMBERS = True
    CELL_NUMBER_SCALE = 0.5
    CELL_NUMBER_COLOR = (90, 90, 90)

    def __init__(self, cell_size: Optional[int] = None):
        if cell_size is not None:
            if cell_size < self.MIN_CELL_SIZE:
                raise ValueError(
                    f"Cell size must be at least {self.MIN_CELL_SIZE} pixels, got {cell_size}"
                )
            self.CELL_SIZE = cell_size
            self.MARK_PADDING = cell_size // 5

    @property
    def BOARD_PIXELS(self) -> int:
        """Width and height of the whole board image."""
        return self.CELL_SIZE * self.BOARD_SIZE
