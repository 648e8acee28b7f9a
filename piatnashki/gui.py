"""Window of the sliding puzzle: toolbar, tile field and status line."""

from __future__ import annotations

import argparse
import re
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .board import EMPTY, SIZE, Board, SessionError
from .game import Game

__all__ = ["parse_seed", "App", "main"]

SCALE = 3
SPACING = 5 * SCALE
TILE = 100 * SCALE
TILE_FONT = 40 * SCALE
TOOL = 30 * SCALE
TOOL_FONT = 7 * SCALE
STATUS_FONT = 12 * SCALE
WIN_W = SPACING * 5 + TILE * 4
TOP_H = TOOL + SPACING * 3
FIELD_H = SPACING * 5 + TILE * 4
BOTTOM_H = SPACING * 3 + STATUS_FONT
WIN_H = TOP_H + FIELD_H + BOTTOM_H

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_seed(text: str) -> Optional[int]:
    """Read a seed typed by the user.

    An empty entry means "pick a new seed" and gives None; otherwise the
    leading integer is taken, and text without one gives 0.
    """
    if not text:
        return None
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class App:
    """Widgets bound to a game; every action ends by redrawing them."""

    def __init__(self, root, game: Game) -> None:
        import tkinter as tk

        self.root = root
        self.game = game
        root.geometry(f"{WIN_W}x{WIN_H}")
        root.resizable(False, False)

        toolbar = tk.Frame(root, bd=1, relief="solid")
        toolbar.place(x=SPACING, y=SPACING, width=WIN_W - SPACING * 2, height=TOOL + SPACING * 2)
        tools: List[Tuple[str, Callable[[], None], int]] = [
            ("New", self._on_new, SPACING),
            ("Open", self._on_open, SPACING * 2 + TOOL),
            ("Save", self._on_save, SPACING * 3 + TOOL * 2),
            ("Undo", self._on_undo, SPACING * 4 + TOOL * 4),
            ("Redo", self._on_redo, SPACING * 5 + TOOL * 5),
            ("Reload", self._on_reload, SPACING * 7 + TOOL * 7),
        ]
        buttons: Dict[str, tk.Button] = {}
        for label, command, left in tools:
            button = tk.Button(toolbar, text=label, command=command, font=("Helvetica", -TOOL_FONT))
            button.place(x=left, y=SPACING, width=TOOL, height=TOOL)
            buttons[label] = button
        self._undo_button = buttons["Undo"]
        self._redo_button = buttons["Redo"]

        self._tiles: Dict[Tuple[int, int], tk.Button] = {}
        self._tile_places: Dict[Tuple[int, int], Tuple[int, int]] = {}
        for x in range(SIZE):
            for y in range(SIZE):
                tile = tk.Button(
                    root,
                    font=("Helvetica", -TILE_FONT),
                    fg="blue",
                    command=lambda x=x, y=y: self._on_press(x, y),
                )
                self._tiles[(x, y)] = tile
                self._tile_places[(x, y)] = (
                    (y + 1) * SPACING + y * TILE,
                    TOP_H + (x + 1) * SPACING + x * TILE,
                )

        status_frame = tk.Frame(root, bd=1, relief="solid")
        status_frame.place(
            x=SPACING, y=TOP_H + FIELD_H, width=WIN_W - SPACING * 2, height=STATUS_FONT + SPACING * 2
        )
        self._status = tk.Label(status_frame, anchor="w", font=("Courier", -STATUS_FONT))
        self._status.place(x=SPACING, y=0, width=WIN_W - SPACING * 4, height=STATUS_FONT + SPACING)
        self.sync()

    def sync(self) -> None:
        """Bring tiles, undo/redo buttons and the status line up to date."""
        grid = self.game.board.grid
        for (x, y), tile in self._tiles.items():
            value = grid[x][y]
            if value == EMPTY:
                tile.place_forget()
            else:
                tile.configure(text=str(value))
                left, top = self._tile_places[(x, y)]
                tile.place(x=left, y=top, width=TILE, height=TILE)
        board = self.game.board
        self._undo_button.configure(state="normal" if board.can_undo() else "disabled")
        self._redo_button.configure(state="normal" if board.can_redo() else "disabled")
        self._status.configure(text=self.game.status_text())

    def _on_press(self, x: int, y: int) -> None:
        if self.game.press(x, y) and self.game.is_solved():
            choice = self._choose(
                self.game.win_message(), ["Exit", "Start (new seed)", "Start (same seed)"]
            )
            if choice == "Start (new seed)":
                self.game.restart()
            elif choice == "Start (same seed)":
                self.game.reload()
            else:
                self.root.destroy()
                return
        self.sync()

    def _on_new(self) -> None:
        from tkinter import simpledialog

        text = simpledialog.askstring("New game", "Enter seed:", parent=self.root)
        if text is None:
            return
        self.game.restart(parse_seed(text))
        self.sync()

    def _on_open(self) -> None:
        from tkinter import filedialog, messagebox

        path = filedialog.askopenfilename(
            parent=self.root, title="Choose session file", filetypes=[("Session", "*.json")]
        )
        if not path:
            return
        try:
            self.game.board.load_session(path)
        except SessionError as exc:
            messagebox.showerror("Session", str(exc), parent=self.root)
        self.sync()

    def _on_save(self) -> None:
        from tkinter import filedialog, messagebox

        path = filedialog.asksaveasfilename(
            parent=self.root,
            title="Save session",
            initialfile=f"PT_{self.game.board.seed}.json",
            filetypes=[("Session", "*.json")],
        )
        if not path:
            return
        try:
            self.game.board.save_session(path)
        except OSError as exc:
            messagebox.showerror("Session", f"Can't write the file: {exc}", parent=self.root)

    def _on_undo(self) -> None:
        self.game.undo()
        self.sync()

    def _on_redo(self) -> None:
        self.game.redo()
        self.sync()

    def _on_reload(self) -> None:
        self.game.reload()
        self.sync()

    def _choose(self, message: str, options: Sequence[str]) -> Optional[str]:
        import tkinter as tk

        dialog = tk.Toplevel(self.root)
        dialog.title("Piatnashki")
        dialog.transient(self.root)
        chosen: List[str] = []
        tk.Label(dialog, text=message, justify="left").pack(padx=SPACING, pady=SPACING)
        row = tk.Frame(dialog)
        row.pack(padx=SPACING, pady=SPACING)

        def pick(option: str) -> None:
            chosen.append(option)
            dialog.destroy()

        for option in options:
            tk.Button(row, text=option, command=lambda o=option: pick(o)).pack(side="left", padx=SPACING)
        dialog.grab_set()
        self.root.wait_window(dialog)
        return chosen[0] if chosen else None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="piatnashki", description="Fifteen-style sliding puzzle.")
    parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    root.title("Piatnashki")
    App(root, Game(Board()))
    root.mainloop()
    return 0