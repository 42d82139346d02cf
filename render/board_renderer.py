"""
Board renderer for TicTacToe.
Draws a board snapshot into an image with OpenCV.

Pipeline:
1. Fill the background and grid lines
2. Highlight the last move and the winning cells
3. Draw X and O marks
4. Draw the winning line on top
"""

import logging
import cv2
import numpy as np
from typing import Optional, Tuple
from .config import RenderConfig

from logic.game_state import Board, Move, Player
from logic.win_checker import WinResult

logger = logging.getLogger(__name__)


class BoardRenderer:
    """
    Renders board snapshots as BGR numpy images.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Render configuration. Uses defaults if not provided.
        """
        self.config = config or RenderConfig()

    def render(
        self,
        board: Board,
        win: Optional[WinResult] = None,
        last_move: Optional[Move] = None
    ) -> np.ndarray:
        """
        Draw a board snapshot.

        Args:
            board: The snapshot to draw.
            win: Winning line to highlight, if any.
            last_move: Move to highlight, if any.

        Returns:
            BGR image of shape (BOARD_PIXELS, BOARD_PIXELS, 3).
        """
        size = self.config.BOARD_PIXELS
        image = np.zeros((size, size, 3), dtype=np.uint8)
        image[:] = self.config.BACKGROUND_COLOR

        # Cell backgrounds first so grid lines stay visible
        if last_move is not None:
            self._fill_cell(image, last_move.index, self.config.LAST_MOVE_COLOR)
        if win is not None:
            for index in win.line:
                self._fill_cell(image, index, self.config.WIN_CELL_COLOR)

        self._draw_grid(image)

        for index, cell in enumerate(board):
            if cell == Player.X:
                self._draw_x(image, index)
            elif cell == Player.O:
                self._draw_o(image, index)
            elif self.config.SHOW_CELL_NUMBERS:
                self._draw_cell_number(image, index)

        if win is not None:
            start = self.cell_center(win.line[0])
            end = self.cell_center(win.line[-1])
            cv2.line(
                image,
                start,
                end,
                self.config.WIN_LINE_COLOR,
                self.config.WIN_LINE_THICKNESS,
                cv2.LINE_AA
            )

        return image

    def cell_at(self, x: int, y: int) -> Optional[int]:
        """
        Find which cell a pixel falls in.

        Args:
            x: Pixel column.
            y: Pixel row.

        Returns:
            Cell index (0-8), or None if outside the board.
        """
        size = self.config.BOARD_PIXELS
        if not (0 <= x < size and 0 <= y < size):
            return None

        col = x // self.config.CELL_SIZE
        row = y // self.config.CELL_SIZE
        return row * self.config.BOARD_SIZE + col

    def cell_bounds(self, index: int) -> Tuple[int, int, int, int]:
        """Get (x1, y1, x2, y2) of a cell."""
        cell_size = self.config.CELL_SIZE
        row, col = divmod(index, self.config.BOARD_SIZE)
        x1 = col * cell_size
        y1 = row * cell_size
        return x1, y1, x1 + cell_size, y1 + cell_size

    def cell_center(self, index: int) -> Tuple[int, int]:
        x1, y1, x2, y2 = self.cell_bounds(index)
        return (x1 + x2) // 2, (y1 + y2) // 2

    def save(self, image: np.ndarray, path: str) -> bool:
        """
        Save a rendered board to an image file.

        Returns:
            True if the file was written.
        """
        ok = cv2.imwrite(path, image)
        if ok:
            logger.info("Saved board image to %s", path)
        else:
            logger.error("Could not write board image to %s", path)
        return bool(ok)

    def _fill_cell(self, image: np.ndarray, index: int, color):
        x1, y1, x2, y2 = self.cell_bounds(index)
        cv2.rectangle(image, (x1, y1), (x2, y2), color, -1)

    def _draw_grid(self, image: np.ndarray):
        size = self.config.BOARD_PIXELS
        cell_size = self.config.CELL_SIZE

        for i in range(1, self.config.BOARD_SIZE):
            # Vertical lines
            cv2.line(
                image,
                (i * cell_size, 0),
                (i * cell_size, size),
                self.config.GRID_COLOR,
                self.config.GRID_THICKNESS
            )
            # Horizontal lines
            cv2.line(
                image,
                (0, i * cell_size),
                (size, i * cell_size),
                self.config.GRID_COLOR,
                self.config.GRID_THICKNESS
            )

    def _draw_x(self, image: np.ndarray, index: int):
        x1, y1, x2, y2 = self.cell_bounds(index)
        pad = self.config.MARK_PADDING
        color = self.config.X_COLOR
        thickness = self.config.MARK_THICKNESS

        cv2.line(image, (x1 + pad, y1 + pad), (x2 - pad, y2 - pad), color, thickness, cv2.LINE_AA)
        cv2.line(image, (x2 - pad, y1 + pad), (x1 + pad, y2 - pad), color, thickness, cv2.LINE_AA)

    def _draw_o(self, image: np.ndarray, index: int):
        radius = self.config.CELL_SIZE // 2 - self.config.MARK_PADDING
        cv2.circle(
            image,
            self.cell_center(index),
            radius,
            self.config.O_COLOR,
            self.config.MARK_THICKNESS,
            cv2.LINE_AA
        )

    def _draw_cell_number(self, image: np.ndarray, index: int):
        x1, y1, _, _ = self.cell_bounds(index)
        cv2.putText(
            image,
            str(index + 1),
            (x1 + 8, y1 + 20),
            self.config.FONT,
            self.config.CELL_NUMBER_SCALE,
            self.config.CELL_NUMBER_COLOR,
            1
        )
