# piatnashki

A fifteen-style sliding puzzle: fifteen tiles and one gap on a 4×4 board.
The starting layout comes from a seed, so the same seed always gives the
same board.

## Installing

```
pip install .
```

The window is drawn with Tkinter, which ships with most Python builds. The
package has no other dependencies.

## Playing

```
piatnashki
```

The command takes no options apart from `--help`.

Click a tile in the same row or column as the gap. The tiles between the gap
and the one you clicked all slide one cell towards the gap. Clicks on tiles
that share neither a row nor a column with the gap do nothing.

The top bar has these buttons:

- **New**: start a new game. Type a seed, or leave the field empty to use
  the current time as the seed. The leading integer of what you type is
  used; text with no leading integer gives seed 0.
- **Open** / **Save**: load or store a session as a small JSON file. The
  file holds the seed, the move history, the current position in that
  history and the seconds played so far. Save suggests the name
  `PT_<seed>.json`. A file that cannot be read, or whose history does not
  replay on the board, is reported in a message box; in the second case the
  board is dealt afresh from the seed with no history.
- **Undo** / **Redo**: step back and forward through your moves. They are
  greyed out when there is nothing to undo or redo. Making a new move after
  undoing drops the moves that could have been redone.
- **Reload**: deal the current seed again and clear the history.

The bottom line reads `Steps made: N. Current: M. Time spent: HH:MM:SS`,
where N is the length of the move history and M your position in it.

A board counts as solved when the tiles of the first three rows run in
order. You are then offered to exit, start with a new seed, or start the
same seed again.

## Using it from Python

```python
from piatnashki.board import Board
from piatnashki.game import Game

game = Game(Board(seed=42))
x, y = game.board.empty_position()
game.press(x, 0 if y else 1)    # slide tiles along the gap's row
print(game.status_text())
game.undo()
game.board.save_session("PT_42.json")
```

- `piatnashki.board.Board` holds the grid (`grid`, `value`, `set_value`,
  `empty_position`), the move history (`add_step`, `undo`, `redo`,
  `can_undo`, `can_redo`, `reset_steps`), the seed (`generate`, `new_seed`)
  and session files (`save_session`, `load_session`, `to_session_text`,
  `load_session_text`). Loading raises `SessionError` when the text is
  empty, malformed or holds a history that cannot be replayed.
- `piatnashki.board.Step` is one move; `encode` packs it into a byte and
  `Step.decode` unpacks it.
- `piatnashki.game.Game` adds `press`, `undo`, `redo`, `restart`, `reload`,
  `is_solved`, `status_text` and `win_message`; `format_duration` renders
  seconds as `HH:MM:SS`.
- `piatnashki.jsonfields.parse_fields` reads the flat JSON objects that
  session files are made of.
- `piatnashki.gui.main` opens the window; `parse_seed` reads a typed seed.

## Tests

```
pip install .[test]
pytest
```