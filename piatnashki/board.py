"""Board state, move history and session files of the sliding puzzle."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass
from os import PathLike
from typing import List, Optional, Tuple, Union

from .jsonfields import FieldType, parse_fields

__all__ = ["SIZE", "EMPTY", "SessionError", "Step", "Board"]

SIZE = 4
EMPTY = -1

Position = Tuple[int, int]

_SESSION_FIELDS = {
    "seed": FieldType.INT,
    "steps": FieldType.CHAR_ARRAY,
    "time": FieldType.TIME,
    "current": FieldType.INT,
}


class SessionError(Exception):
    """A session file could not be read or replayed."""


def _check_position(x: int, y: int) -> None:
    if not (0 <= x < SIZE and 0 <= y < SIZE):
        raise ValueError(f"position ({x}, {y}) is outside the board")


def _now() -> int:
    return int(time.time())


class _CRandom:
    """The additive feedback generator behind the C library's rand()."""

    _MASK = 0xFFFFFFFF

    def __init__(self, seed: int) -> None:
        seed &= self._MASK
        if seed == 0:
            seed = 1
        word = seed - (1 << 32) if seed >= 1 << 31 else seed
        table = [word]
        for _ in range(1, 31):
            hi = abs(word) // 127773 * (1 if word >= 0 else -1)
            lo = word - hi * 127773
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += 2147483647
            table.append(word)
        table.extend(table[i - 31] for i in range(31, 34))
        for i in range(34, 344):
            table.append((table[i - 31] + table[i - 3]) & self._MASK)
        self._state = deque(table[-34:], maxlen=34)

    def next(self) -> int:
        value = (self._state[-31] + self._state[-3]) & self._MASK
        self._state.append(value)
        return value >> 1


@dataclass(frozen=True)
class Step:
    """One move: where the gap was and which cell was pressed."""

    empty: Position
    moved: Position

    def __post_init__(self) -> None:
        _check_position(*self.empty)
        _check_position(*self.moved)

    def encode(self) -> int:
        """Pack the move into one byte: gap cell index high, pressed cell low."""
        ex, ey = self.empty
        vx, vy = self.moved
        return (ey * SIZE + ex) * 16 + (vy * SIZE + vx)

    @classmethod
    def decode(cls, value: int) -> "Step":
        """Unpack a byte made by :meth:`encode`."""
        if not 0 <= value <= 255:
            raise ValueError(f"step value {value} does not fit in a byte")
        empty_idx, moved_idx = divmod(value, 16)
        return cls(
            empty=(empty_idx % SIZE, empty_idx // SIZE),
            moved=(moved_idx % SIZE, moved_idx // SIZE),
        )


class Board:
    """The 4x4 field, its move history and the session clock."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._started = _now()
        self.seed = self._started if seed is None else seed
        self._cells: List[List[int]] = [[EMPTY] * SIZE for _ in range(SIZE)]
        self._empty: Position = (0, 0)
        self._steps: List[int] = []
        self._current = 0
        self.generate()

    @property
    def grid(self) -> Tuple[Tuple[int, ...], ...]:
        """A snapshot of all cell values, row by row."""
        return tuple(tuple(row) for row in self._cells)

    @property
    def steps_count(self) -> int:
        return len(self._steps)

    @property
    def current_step(self) -> int:
        return self._current

    def generate(self, seed: Optional[int] = None) -> None:
        """Lay the tiles out as the given seed (or the current one) dictates."""
        if seed is not None:
            self.seed = seed
        rng = _CRandom(self.seed)
        free = list(range(SIZE * SIZE))
        for i in range(SIZE * SIZE - 1):
            idx = free.pop(rng.next() % (SIZE * SIZE - i))
            self._cells[idx // SIZE][idx % SIZE] = max(i - 1, 0)
        last = free[0]
        self.set_value(last // SIZE, last % SIZE, EMPTY)

    def value(self, x: int, y: int) -> int:
        _check_position(x, y)
        return self._cells[x][y]

    def set_value(self, x: int, y: int, v: int) -> None:
        _check_position(x, y)
        self._cells[x][y] = v
        if v == EMPTY:
            self._empty = (x, y)

    def empty_position(self) -> Position:
        return self._empty

    def swap_with_empty(self, x: int, y: int) -> bool:
        """Slide the tiles between the gap and (x, y) towards the gap.

        Returns False, leaving the board alone, if the cell shares neither a
        row nor a column with the gap.
        """
        _check_position(x, y)
        ex, ey = self._empty
        if ex != x and ey != y:
            return False
        while (ex, ey) != (x, y):
            nx = ex + (x > ex) - (x < ex)
            ny = ey + (y > ey) - (y < ey)
            self.set_value(ex, ey, self._cells[nx][ny])
            self.set_value(nx, ny, EMPTY)
            ex, ey = nx, ny
        return True

    def add_step(self, step: Step) -> None:
        """Record a move, dropping any steps that could have been redone."""
        del self._steps[self._current:]
        self._steps.append(step.encode())
        self._current = len(self._steps)

    def undo(self) -> Optional[Step]:
        """Take back the last move; returns it, or None if there is none."""
        if self._current == 0:
            return None
        self._current -= 1
        step = Step.decode(self._steps[self._current])
        self.swap_with_empty(*step.empty)
        return step

    def redo(self) -> Optional[Step]:
        """Repeat the next undone move; returns it, or None if there is none."""
        if self._current == len(self._steps):
            return None
        step = Step.decode(self._steps[self._current])
        self._current += 1
        self.swap_with_empty(*step.moved)
        return step

    def replay_step(self) -> bool:
        """Apply the next recorded move; False if it does not fit the board."""
        if self._current == len(self._steps):
            return True
        step = Step.decode(self._steps[self._current])
        if not self.swap_with_empty(*step.moved):
            return False
        self._current += 1
        return True

    def can_undo(self) -> bool:
        return self._current > 0

    def can_redo(self) -> bool:
        return self._current < len(self._steps)

    def reset_steps(self) -> None:
        """Forget the history and restart the clock."""
        self._steps.clear()
        self._current = 0
        self._started = _now()

    def new_seed(self) -> int:
        """Take the current time as the seed and return it."""
        self.seed = _now()
        return self.seed

    def session_time(self) -> int:
        """Seconds spent in this session."""
        return _now() - self._started

    def to_session_text(self) -> str:
        steps = ",".join(str(value) for value in self._steps)
        return (
            f'{{ "seed": {self.seed}, "time" : {self.session_time()}, '
            f'"steps": [{steps}], "current": {self._current} }}\n'
        )

    def load_session_text(self, text: str) -> None:
        """Restore a session: regenerate from its seed and replay its moves.

        Raises SessionError for empty or malformed text, and for a history
        that cannot be replayed; in that case the board is left freshly
        generated from the seed with no history.
        """
        if not text:
            raise SessionError("The file is empty!")
        try:
            fields = {field.name: field.data for field in parse_fields(text, _SESSION_FIELDS)}
        except ValueError as exc:
            raise SessionError(f"Error while reading the file: {exc}") from exc
        self.seed = fields.get("seed") or 0
        steps = fields.get("steps")
        if steps is None:
            return
        self._steps = list(steps)
        self._started = _now() - (fields.get("time") or 0)
        self._current = 0
        self.generate()
        for _ in range(fields.get("current") or 0):
            if not self.replay_step():
                self.generate()
                self._steps.clear()
                self._current = 0
                raise SessionError("Corrupted steps history!")

    def load_session(self, path: Union[str, PathLike]) -> None:
        try:
            with open(path, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as exc:
            raise SessionError(f"Can't open the file: {exc}") from exc
        self.load_session_text(text)

    def save_session(self, path: Union[str, PathLike]) -> None:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(self.to_session_text())