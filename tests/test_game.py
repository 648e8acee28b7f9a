from unittest.mock import patch

import pytest

from piatnashki.board import EMPTY, Board
from piatnashki.game import Game, format_duration

SOLVED = [
    [0, 0, 1, 2],
    [3, 4, 5, 6],
    [7, 8, 9, 10],
    [11, 12, 13, EMPTY],
]


def _set_grid(board, rows):
    for x, row in enumerate(rows):
        for y, value in enumerate(row):
            board.set_value(x, y, value)


def _aligned(board):
    ex, ey = board.empty_position()
    return ex, (ey + 1) % 4


def _misaligned(board):
    ex, ey = board.empty_position()
    return (ex + 1) % 4, (ey + 1) % 4


def test_format_duration_zero():
    assert format_duration(0) == "00:00:00"


def test_format_duration_hours_minutes_seconds():
    assert format_duration(3600 + 60 + 1) == "01:01:01"


def test_press_aligned_records_step():
    game = Game(Board(seed=7))
    x, y = _aligned(game.board)
    moved_value = game.board.value(x, y)
    assert game.press(x, y) is True
    assert game.board.steps_count == 1
    assert game.board.can_undo()
    assert game.board.empty_position() == (x, y)
    assert moved_value in game.board.grid[x]


def test_press_misaligned_does_nothing():
    game = Game(Board(seed=7))
    before = game.board.grid
    assert game.press(*_misaligned(game.board)) is False
    assert game.board.grid == before
    assert game.board.steps_count == 0


def test_press_on_gap_is_not_a_move():
    game = Game(Board(seed=3))
    assert game.press(*game.board.empty_position()) is False
    assert game.board.steps_count == 0


def test_undo_and_redo_round_trip():
    game = Game(Board(seed=11))
    before = game.board.grid
    game.press(*_aligned(game.board))
    after = game.board.grid
    assert game.undo() is not None
    assert game.board.grid == before
    assert game.board.can_redo()
    assert game.redo() is not None
    assert game.board.grid == after
    assert not game.board.can_redo()


def test_undo_without_history_returns_none():
    game = Game(Board(seed=11))
    assert game.undo() is None
    assert game.redo() is None


def test_press_after_undo_drops_redo_history():
    game = Game(Board(seed=5))
    game.press(*_aligned(game.board))
    game.undo()
    ex, ey = game.board.empty_position()
    assert game.press((ex + 1) % 4, ey) is True
    assert not game.board.can_redo()
    assert game.board.steps_count == 1


def test_restart_with_seed_matches_fresh_board():
    game = Game(Board(seed=1))
    game.press(*_aligned(game.board))
    assert game.restart(99) == 99
    assert game.board.grid == Board(seed=99).grid
    assert game.board.steps_count == 0
    assert game.board.current_step == 0


def test_restart_without_seed_takes_time():
    with patch("time.time", return_value=12345.0):
        game = Game(Board(seed=1))
        seed = game.restart()
    assert seed == 12345
    assert game.board.grid == Board(seed=12345).grid


def test_reload_restores_initial_layout():
    game = Game(Board(seed=21))
    initial = game.board.grid
    game.press(*_aligned(game.board))
    game.reload()
    assert game.board.grid == initial
    assert game.board.steps_count == 0


def test_solved_layout_detected():
    game = Game(Board(seed=2))
    _set_grid(game.board, SOLVED)
    assert game.is_solved() is True


def test_bottom_row_is_not_checked():
    game = Game(Board(seed=2))
    rows = [row[:] for row in SOLVED]
    rows[3] = [EMPTY, 13, 12, 11]
    _set_grid(game.board, rows)
    assert game.is_solved() is True


def test_swapped_tiles_are_not_solved():
    game = Game(Board(seed=2))
    rows = [row[:] for row in SOLVED]
    rows[1][0], rows[1][1] = rows[1][1], rows[1][0]
    _set_grid(game.board, rows)
    assert game.is_solved() is False


def test_fresh_board_with_gap_in_top_rows_is_not_solved():
    game = Game(Board(seed=2))
    rows = [row[:] for row in SOLVED]
    rows[0][3], rows[3][3] = rows[3][3], rows[0][3]
    _set_grid(game.board, rows)
    assert game.is_solved() is False


@pytest.mark.parametrize("seed", [0, 1, 42])
def test_status_text_counts(seed):
    with patch("time.time", return_value=1000.0):
        game = Game(Board(seed=seed))
        game.press(*_aligned(game.board))
        game.press(*_aligned(game.board))
        game.undo()
        text = game.status_text()
    assert text == "Steps made: 2. Current: 1. Time spent: 00:00:00"


def test_win_message_text():
    with patch("time.time", return_value=500.0):
        game = Game(Board(seed=4))
        message = game.win_message()
    assert message == (
        "You win!\nTime spent: 00:00:00\nSteps made: 0\n"
        "Do you want to start a new game?"
    )