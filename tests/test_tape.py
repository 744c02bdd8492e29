"""
Unit tests for the tape memory model.

Usage:
  python -m pytest tests/test_tape.py -v
"""

import numpy as np
import pytest

from tapevm.errors import OutOfRangeError
from tapevm.tape import INDEX_MAX, INDEX_MIN, Tape


def test_fresh_tape_has_only_cell_zero():
    tape = Tape()
    assert tape.cursor == 0
    assert tape.cells == {0: 0}


def test_read_materializes_unvisited_cell():
    tape = Tape()
    tape.cursor = 7  # bypass move_to so the cell is not created yet
    assert 7 not in tape.cells
    assert tape.read() == 0
    assert tape.cells[7] == 0
    assert tape.read() == 0


def test_move_to_materializes_and_keeps_values():
    tape = Tape()
    tape.write(42)
    tape.move_to(-3)
    assert tape.cells == {0: 42, -3: 0}
    tape.move_to(0)
    assert tape.read() == 42


def test_write_rejects_non_byte():
    tape = Tape()
    with pytest.raises(ValueError):
        tape.write(256)
    with pytest.raises(ValueError):
        tape.write(-1)


def test_move_past_index_max_fails_without_moving():
    tape = Tape()
    tape.move_to(INDEX_MAX)
    with pytest.raises(OutOfRangeError) as exc:
        tape.move_by(1)
    assert exc.value.index == INDEX_MAX + 1
    assert tape.cursor == INDEX_MAX


def test_move_past_index_min_fails():
    tape = Tape()
    tape.move_to(INDEX_MIN)
    with pytest.raises(OutOfRangeError):
        tape.move_by(-1)
    assert tape.cursor == INDEX_MIN


def test_window_reads_without_materializing():
    tape = Tape()
    tape.write(5)
    tape.move_to(2)
    tape.write(9)
    win = tape.window(-1, 4)
    assert win.dtype == np.uint8
    assert win.tolist() == [0, 5, 0, 9, 0]
    assert tape.visited() == [0, 2]


def test_window_rejects_reversed_range():
    with pytest.raises(ValueError):
        Tape().window(3, 1)


def test_equality_compares_cursor_and_cells():
    a, b = Tape(), Tape()
    assert a == b
    b.move_to(1)
    assert a != b
