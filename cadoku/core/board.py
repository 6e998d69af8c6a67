"""Flat 81-cell puzzle grid consumed by the presentation layer."""

from __future__ import annotations
import numbers
import numpy as np
from typing import List, Optional, Sequence

from .topology import ALL_UNITS, BOX_SIZE, CELLS, SIZE


class Puzzle:
    """
    A 9x9 Sudoku grid stored as a flat, row-major array of 81 cells.

    Each cell holds 1-9, or 0 for an empty cell. The same type is used for
    puzzles (with empty cells) and for fully filled solutions.
    """

    def __init__(self, grid: Optional[Sequence[int]] = None):
        """
        Initialize a grid.

        Args:
            grid: Optional 81 values in 0-9. If None, creates an empty grid.
        """
        if grid is not None:
            raw = np.asarray(grid)
            if raw.dtype.kind not in "iu":
                raise ValueError(f"Grid values must be integers, got dtype {raw.dtype}")
            arr = raw.astype(np.int32).reshape(-1)
            if arr.shape != (CELLS,):
                raise ValueError(f"Grid must hold {CELLS} cells, got {arr.size}")
            if arr.min() < 0 or arr.max() > SIZE:
                raise ValueError(f"Grid values must be 0-{SIZE}")
            self.grid = arr.copy()
        else:
            self.grid = np.zeros(CELLS, dtype=np.int32)

    @classmethod
    def empty(cls) -> Puzzle:
        """Return an empty grid with no cues."""
        return cls()

    def copy(self) -> Puzzle:
        new = Puzzle()
        new.grid = self.grid.copy()
        return new

    def get(self, index: int) -> int:
        """Get value at cell index (0-80). 0 means empty."""
        _check_index(index)
        return int(self.grid[index])

    def set(self, index: int, value: int) -> None:
        """Set cell index (0-80) to value (0-9). Use 0 to clear."""
        _check_index(index)
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValueError(f"Value must be an integer, got {value!r}")
        if value < 0 or value > SIZE:
            raise ValueError(f"Value must be 0-{SIZE}, got {value}")
        self.grid[index] = value

    def clear(self, index: int) -> None:
        self.set(index, 0)

    def is_zero(self, x: int, y: int) -> bool:
        """Check whether the cell at column x, row y is empty."""
        if not (0 <= x < SIZE and 0 <= y < SIZE):
            raise ValueError(f"Coordinates must be within 0-{SIZE - 1}, got ({x}, {y})")
        return bool(self.grid[x + y * SIZE] == 0)

    def filled(self) -> bool:
        """True if no cell is empty. Does not check correctness."""
        return bool(np.all(self.grid != 0))

    def count_filled_units(self) -> int:
        """Count the rows, columns and boxes (out of 27) with no empty cell."""
        return sum(1 for unit in ALL_UNITS if np.all(self.grid[list(unit)] != 0))

    def count_cues(self) -> int:
        """Count the number of nonzero cells."""
        return int(np.count_nonzero(self.grid))

    def count_empty(self) -> int:
        return CELLS - self.count_cues()

    def is_valid(self) -> bool:
        """
        Check that no unit holds a repeated digit.
        Empty cells are ignored, so a partial grid can be valid.
        """
        for unit in ALL_UNITS:
            values = self.grid[list(unit)]
            non_zero = values[values != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False
        return True

    def is_solved(self) -> bool:
        return self.filled() and self.is_valid()

    def to_list(self) -> List[int]:
        """Flat list of 81 ints, the persisted representation."""
        return [int(v) for v in self.grid]

    @classmethod
    def from_list(cls, values: Sequence[int]) -> Puzzle:
        return cls(values)

    def to_string(self) -> str:
        """Compact 81-character representation with 0 for empty cells."""
        return "".join(str(int(v)) for v in self.grid)

    @classmethod
    def from_string(cls, s: str) -> Puzzle:
        """
        Create a grid from an 81-character string.

        Args:
            s: '0' or '.' for empty cells, '1'-'9' for digits.
        """
        if len(s) != CELLS:
            raise ValueError(f"String length must be {CELLS}, got {len(s)}")
        values = []
        for c in s:
            if c in "0.":
                values.append(0)
            elif c.isdigit():
                values.append(int(c))
            else:
                raise ValueError(f"Invalid character {c!r} in puzzle string")
        return cls(values)

    @classmethod
    def from_2d_list(cls, rows: List[List[int]]) -> Puzzle:
        arr = np.asarray(rows)
        if arr.shape != (SIZE, SIZE):
            raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {arr.shape}")
        return cls(arr.reshape(-1))

    def __str__(self) -> str:
        """Pretty-print the grid."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(SIZE):
                val = self.grid[i * SIZE + j]
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"Puzzle(cues={self.count_cues()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Puzzle):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())


def _check_index(index: int) -> None:
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise ValueError(f"Cell index must be an integer, got {index!r}")
    if not 0 <= index < CELLS:
        raise ValueError(f"Cell index must be 0-{CELLS - 1}, got {index}")
