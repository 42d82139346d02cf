"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The board (click a cell to play)
- Game status (winner, draw or next player)
- Move history (click a move to go back to it)
"""

import cv2
import logging
import time
import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

# Logic imports
from logic.game_session import GameSession

# Render imports
from render.config import RenderConfig
from render.board_renderer import BoardRenderer

logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize the UI."""
        self.session = GameSession()
        self.renderer = BoardRenderer(config)

        # Last rendered board, kept for screenshots
        self.last_frame = None

        # Create UI
        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('TButton', font=('Segoe UI', 10))
        style.configure('Current.TButton', font=('Segoe UI', 10, 'bold'))

        # Left panel - Board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, padx=(0, 10))

        ttk.Label(left_frame, text="🎮 Game Board", style='Title.TLabel').pack(pady=(0, 5))

        size = self.renderer.config.BOARD_PIXELS
        self.board_canvas = tk.Canvas(
            left_frame,
            width=size,
            height=size,
            bg='#0f0f1a',
            highlightthickness=2,
            highlightbackground='#00d4ff'
        )
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_board_click)

        # Right panel
        right_frame = ttk.Frame(main_frame, width=320)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        # Game status section
        ttk.Label(right_frame, text="📊 Game Status", style='Title.TLabel').pack()

        self.status_label = ttk.Label(right_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # History section
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        history_header = ttk.Frame(right_frame)
        history_header.pack(fill=tk.X)
        ttk.Label(history_header, text="📜 Moves", style='Title.TLabel').pack(side=tk.LEFT)

        self.sort_btn = ttk.Button(history_header, text="", width=12, command=self._toggle_sort)
        self.sort_btn.pack(side=tk.RIGHT)

        self.moves_frame = ttk.Frame(right_frame)
        self.moves_frame.pack(fill=tk.BOTH, expand=True, pady=10)

        # Control buttons
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        control_frame = ttk.Frame(right_frame)
        control_frame.pack(pady=5)

        tk.Button(
            control_frame,
            text="🔄 New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="📷 Screenshot",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=self._save_screenshot
        ).pack(side=tk.LEFT, padx=5)

        # Quit button
        tk.Button(
            right_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ==================== EVENTS ====================

    def _on_board_click(self, event):
        """Play on the clicked cell."""
        index = self.renderer.cell_at(event.x, event.y)
        if index is None or self.session.is_game_over:
            return

        if self.session.on_cell_click(index):
            self._refresh()

    def _jump_to(self, step: int):
        """Go back (or forward) to a step in the history."""
        if self.session.on_history_entry_click(step):
            self._refresh()

    def _toggle_sort(self):
        self.session.on_sort_toggle_click()
        self._update_move_list()

    def _reset_game(self):
        """Reset the game."""
        self.session.reset()
        self._refresh()

    def _save_screenshot(self):
        """Save the board as a PNG next to the program."""
        if self.last_frame is None:
            return
        filename = f"tictactoe_{int(time.time())}.png"
        if self.renderer.save(self.last_frame, filename):
            self.status_label.configure(text=f"Saved: {filename}")

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting...")
        self.root.quit()
        self.root.destroy()

    # ==================== DRAWING ====================

    def _refresh(self):
        """Redraw everything from the session."""
        self._update_board_canvas()
        self.status_label.configure(text=self.session.status_text)
        self._update_move_list()

    def _update_board_canvas(self):
        """Update the board canvas with the current snapshot."""
        frame = self.renderer.render(
            self.session.current_board,
            win=self.session.winner,
            last_move=self.session.last_move
        )
        self.last_frame = frame

        # Convert BGR to RGB
        frame_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

        # Convert to PIL Image
        image = Image.fromarray(frame_rgb)
        photo = ImageTk.PhotoImage(image)

        # Update canvas
        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

        # No more moves once the shown step is won or drawn
        self.board_canvas.configure(cursor="arrow" if self.session.is_game_over else "hand2")

    def _update_move_list(self):
        """Rebuild the move buttons in the current order."""
        for child in self.moves_frame.winfo_children():
            child.destroy()

        for step, label in self.session.move_list():
            style = 'Current.TButton' if self.session.is_current_step(step) else 'TButton'
            ttk.Button(
                self.moves_frame,
                text=label,
                style=style,
                command=lambda s=step: self._jump_to(s)
            ).pack(fill=tk.X, pady=1)

        self.sort_btn.configure(text="↓ Oldest" if self.session.ascending else "↑ Newest")

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    # Same command line and logging setup as main.py
    from main import parse_args, setup_logging

    args = parse_args()
    setup_logging(args.log_level)

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI(RenderConfig(cell_size=args.cell_size))
    ui.run()


if __name__ == "__main__":
    main()
