"""
Tape memory model.

A sparse, two-way infinite row of byte cells with a cursor. Cells are kept in
a dict so negative indices work; a cell springs into existence (as 0) the
first time the cursor visits it.
"""

from typing import Dict, List

import numpy as np

from .errors import OutOfRangeError

# Signed 64-bit index range
INDEX_MIN = -(2 ** 63)
INDEX_MAX = 2 ** 63 - 1


class Tape:
    def __init__(self):
        self.cells: Dict[int, int] = {0: 0}
        self.cursor = 0

    def read(self) -> int:
        """Value of the current cell, materializing it at 0 if absent."""
        return self.cells.setdefault(self.cursor, 0)

    def write(self, value: int) -> None:
        if not 0 <= value <= 255:
            raise ValueError(f"cell value must be in [0, 255], got {value}")
        self.cells[self.cursor] = value

    def move_to(self, index: int) -> None:
        """Move the cursor to ``index``. Fails without moving if out of range."""
        if not INDEX_MIN <= index <= INDEX_MAX:
            raise OutOfRangeError(index)
        self.cursor = index
        self.cells.setdefault(index, 0)

    def move_by(self, delta: int) -> None:
        self.move_to(self.cursor + delta)

    def visited(self) -> List[int]:
        return sorted(self.cells)

    def window(self, start: int, stop: int) -> np.ndarray:
        """Dense copy of cells [start, stop) as uint8.

        Unvisited cells read as 0 and are not materialized.
        """
        if stop < start:
            raise ValueError("window stop must not be before start")
        return np.array([self.cells.get(i, 0) for i in range(start, stop)], dtype=np.uint8)

    def __eq__(self, other):
        if not isinstance(other, Tape):
            return NotImplemented
        return self.cursor == other.cursor and self.cells == other.cells

    def __repr__(self):
        return f"Tape(cursor={self.cursor}, cells={dict(sorted(self.cells.items()))})"
