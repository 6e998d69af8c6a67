"""
Fixed-point constraint propagation over 81 candidate sets.

``assign`` and ``eliminate`` are mutually recursive, in the style of Peter
Norvig's solver. Both return False when a contradiction is reached; the
grid is then left partially updated and must be discarded by the caller.
"""

from __future__ import annotations
from typing import List, Optional

from ..core.board import Puzzle
from ..core.candidates import CandidateSet, DIGITS, FULL
from ..core.topology import CELLS, PEERS, UNITS

Grid = List[CandidateSet]


def new_grid() -> Grid:
    """A grid where every cell admits every digit."""
    return [FULL] * CELLS


def assign(grid: Grid, cell: int, digit: CandidateSet) -> bool:
    """
    Force ``cell`` to the singleton ``digit`` by eliminating every other candidate.

    Returns:
        False if any triggered elimination hits a contradiction.
    """
    current = grid[cell]
    if current == digit:
        return True
    for other in DIGITS:
        if other != digit and current.contains(other):
            if not eliminate(grid, cell, other):
                return False
    return True


def eliminate(grid: Grid, cell: int, digit: CandidateSet) -> bool:
    """
    Remove the single ``digit`` from ``cell`` and propagate the consequences.

    Applies the naked single rule (a cell left with one candidate removes it
    from all peers) and the hidden single rule (a digit with one remaining
    place in a unit is assigned there).

    Returns:
        False if a cell runs out of candidates or a unit has nowhere left
        for the digit.
    """
    if grid[cell].excludes(digit):
        return True

    updated = grid[cell] - digit
    if updated.is_empty():
        return False
    grid[cell] = updated

    if updated.is_singleton():
        for peer in PEERS[cell]:
            if not eliminate(grid, peer, updated):
                return False

    for unit in UNITS[cell]:
        places = [s for s in unit if grid[s].contains(digit)]
        if not places:
            return False
        if len(places) == 1:
            if not assign(grid, places[0], digit):
                return False
    return True


def grid_to_puzzle(grid: Grid) -> Optional[Puzzle]:
    """Convert a fully decided grid to a Puzzle, or None if any cell is undecided."""
    values = []
    for candidates in grid:
        digit = candidates.to_digit()
        if digit is None:
            return None
        values.append(digit)
    return Puzzle(values)


def constrain(puzzle: Puzzle) -> Optional[Puzzle]:
    """
    Deduce the full grid forced by the puzzle's cues through propagation alone.

    Returns:
        The solved grid, or None if the cues contradict each other or
        propagation leaves some cell undecided.
    """
    grid = new_grid()
    for cell, cue in enumerate(puzzle.to_list()):
        if cue != 0 and not assign(grid, cell, CandidateSet.singleton(cue)):
            return None
    return grid_to_puzzle(grid)
