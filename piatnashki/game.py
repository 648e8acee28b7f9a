"""Game rules on top of a board: moves, win detection and status texts."""

from __future__ import annotations

import itertools
import time
from typing import Optional

from .board import EMPTY, SIZE, Board, Step

__all__ = ["format_duration", "Game"]

# The last cell checked for order; the bottom row is not inspected.
_LAST_CHECKED = (SIZE - 2, SIZE - 1)


def format_duration(seconds: int) -> str:
    """Render a duration as HH:MM:SS, hours wrapping at a day."""
    return time.strftime("%H:%M:%S", time.gmtime(seconds))


class Game:
    """A playable puzzle: presses, history navigation and restarts."""

    def __init__(self, board: Optional[Board] = None) -> None:
        self.board = board if board is not None else Board()

    def press(self, x: int, y: int) -> bool:
        """Press the tile at (x, y); True if tiles moved and the move was recorded."""
        empty = self.board.empty_position()
        if (x, y) == empty:
            return False
        step = Step(empty=empty, moved=(x, y))
        if not self.board.swap_with_empty(x, y):
            return False
        self.board.add_step(step)
        return True

    def undo(self) -> Optional[Step]:
        """Take back the last move, if any."""
        return self.board.undo()

    def redo(self) -> Optional[Step]:
        """Repeat the last undone move, if any."""
        return self.board.redo()

    def restart(self, seed: Optional[int] = None) -> int:
        """Start a new game from ``seed``, or from a fresh time-based seed.

        Returns the seed in use.
        """
        if seed is None:
            seed = self.board.new_seed()
        self.board.generate(seed)
        self.board.reset_steps()
        return self.board.seed

    def reload(self) -> None:
        """Start over with the current seed."""
        self.board.generate(self.board.seed)
        self.board.reset_steps()

    def is_solved(self) -> bool:
        """True when the tiles up to the third row's end run in order."""
        cells = self.board.grid
        for x, y in itertools.product(range(SIZE), repeat=2):
            if (x, y) == (0, 0) and cells[0][0] == 0:
                continue
            if (x, y) == _LAST_CHECKED:
                return True
            nx, ny = (x + 1, 0) if y == SIZE - 1 else (x, y + 1)
            if cells[nx][ny] == EMPTY or cells[x][y] == EMPTY:
                if cells[nx][ny] - cells[x][y] != 1:
                    return False
            elif cells[nx][ny] - cells[x][y] != 1:
                return False
        return False

    def status_text(self) -> str:
        """The line shown under the field."""
        return (
            f"Steps made: {self.board.steps_count}. "
            f"Current: {self.board.current_step}. "
            f"Time spent: {format_duration(self.board.session_time())}"
        )

    def win_message(self) -> str:
        """The text offered when the puzzle is solved."""
        return (
            "You win!\n"
            f"Time spent: {format_duration(self.board.session_time())}\n"
            f"Steps made: {self.board.steps_count}\n"
            "Do you want to start a new game?"
        )