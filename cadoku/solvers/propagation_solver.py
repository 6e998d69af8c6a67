"""Solver that relies on constraint propagation alone, with no search."""

from __future__ import annotations
from typing import Optional

from .base_solver import BaseSolver, CONTRADICTION, UNDECIDED
from .propagation import assign, grid_to_puzzle, new_grid
from ..core.board import Puzzle
from ..core.candidates import CandidateSet


class PropagationSolver(BaseSolver):
    """
    Solves a puzzle only when naked and hidden singles decide every cell.

    Puzzles that would need guessing are reported as "undecided", puzzles
    whose cues clash as "contradiction".
    """

    name = "Constraint Propagation"

    def _solve(self, puzzle: Puzzle) -> Optional[Puzzle]:
        grid = new_grid()
        for cell, cue in enumerate(puzzle.to_list()):
            if cue != 0 and not assign(grid, cell, CandidateSet.singleton(cue)):
                self.stats.outcome = CONTRADICTION
                return None
        self.stats.decided_cells = sum(1 for c in grid if c.is_singleton())
        solution = grid_to_puzzle(grid)
        if solution is None:
            self.stats.outcome = UNDECIDED
        return solution
