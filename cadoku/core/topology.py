"""Precomputed unit and peer tables for the 9x9 grid.

Cells are indexed 0-80 in row-major order. Every cell belongs to exactly
three units (its row, its column and its 3x3 box, in that order) and has
20 peers: the other cells sharing at least one of those units.
"""

from __future__ import annotations
from typing import List, Tuple

SIZE = 9
BOX_SIZE = 3
CELLS = SIZE * SIZE

Unit = Tuple[int, ...]


def row_of(index: int) -> int:
    return index // SIZE


def col_of(index: int) -> int:
    return index % SIZE


def box_of(index: int) -> int:
    """Box number 0-8, numbered left-to-right, top-to-bottom."""
    return (row_of(index) // BOX_SIZE) * BOX_SIZE + col_of(index) // BOX_SIZE


def _build_rows() -> List[Unit]:
    return [tuple(range(r * SIZE, r * SIZE + SIZE)) for r in range(SIZE)]


def _build_cols() -> List[Unit]:
    return [tuple(range(c, CELLS, SIZE)) for c in range(SIZE)]


def _build_boxes() -> List[Unit]:
    boxes = []
    for box_r in range(0, SIZE, BOX_SIZE):
        for box_c in range(0, SIZE, BOX_SIZE):
            boxes.append(tuple(
                (box_r + i) * SIZE + box_c + j
                for i in range(BOX_SIZE)
                for j in range(BOX_SIZE)
            ))
    return boxes


def _build_units() -> Tuple[Tuple[Unit, Unit, Unit], ...]:
    return tuple(
        (ROWS[row_of(s)], COLS[col_of(s)], BOXES[box_of(s)])
        for s in range(CELLS)
    )


def _build_peers() -> Tuple[Unit, ...]:
    peers = []
    for s in range(CELLS):
        seen = []
        for unit in UNITS[s]:
            for cell in unit:
                if cell != s and cell not in seen:
                    seen.append(cell)
        peers.append(tuple(seen))
    return tuple(peers)


ROWS: Tuple[Unit, ...] = tuple(_build_rows())
COLS: Tuple[Unit, ...] = tuple(_build_cols())
BOXES: Tuple[Unit, ...] = tuple(_build_boxes())

# All 27 distinct units: rows, then columns, then boxes.
ALL_UNITS: Tuple[Unit, ...] = ROWS + COLS + BOXES

# UNITS[s] -> (row, column, box) containing cell s
UNITS = _build_units()

# PEERS[s] -> the 20 cells sharing a unit with s, excluding s
PEERS = _build_peers()
