"""Validation utilities for puzzles and their solutions."""

from __future__ import annotations
from typing import TYPE_CHECKING

from .topology import PEERS, SIZE

if TYPE_CHECKING:
    from .board import Puzzle


def is_valid_placement(puzzle: Puzzle, index: int, value: int) -> bool:
    """
    Check if placing a value at a cell conflicts with any peer.

    Args:
        puzzle: The grid.
        index: Cell index 0-80.
        value: Value to check (1-9).

    Returns:
        True if no peer already holds the value.
    """
    if value < 1 or value > SIZE:
        return False
    return all(puzzle.get(peer) != value for peer in PEERS[index])


def is_valid_board(puzzle: Puzzle) -> bool:
    """True if no row, column or box holds a repeated digit."""
    return puzzle.is_valid()


def validate_solution(puzzle: Puzzle, solution: Puzzle) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Returns:
        True if the solution is complete, valid and agrees with every cue.
    """
    if not solution.is_solved():
        return False
    for index in range(len(puzzle.grid)):
        cue = puzzle.get(index)
        if cue != 0 and cue != solution.get(index):
            return False
    return True


def is_trivially_solvable(puzzle: Puzzle) -> bool:
    """True if propagation alone decides every cell of the puzzle."""
    from ..solvers.propagation import constrain
    return constrain(puzzle) is not None


def has_unique_deduction(puzzle: Puzzle, solution: Puzzle) -> bool:
    """True if propagation on the puzzle reproduces exactly the given solution."""
    from ..solvers.propagation import constrain
    return constrain(puzzle) == solution
