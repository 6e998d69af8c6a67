"""Deduction run interface and the outcome record the CLI and benchmark read."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Tuple
import time
import tracemalloc

from ..core.board import Puzzle

DECIDED = "decided"
UNDECIDED = "undecided"
CONTRADICTION = "contradiction"


@dataclass
class SolverStats:
    """
    Outcome of one deduction run over a puzzle.

    `outcome` is one of "decided", "undecided" (propagation stalled and a
    guess would be needed) or "contradiction" (the cues clash). `cues` counts
    the given cells, `decided_cells` the cells whose digit was forced,
    cues included.
    """
    solved: bool = False
    outcome: str = UNDECIDED
    cues: int = 0
    decided_cells: int = 0
    time_seconds: float = 0.0
    memory_bytes: int = 0

    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def deduced_cells(self) -> int:
        """Cells filled by propagation beyond the cues."""
        return max(self.decided_cells - self.cues, 0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "solved": self.solved,
            "outcome": self.outcome,
            "cues": self.cues,
            "decided_cells": self.decided_cells,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """
    Runs a guess-free deduction over a copy of a puzzle and records its outcome.

    Subclasses implement `_solve`, filling in `outcome` and `decided_cells`
    on `self.stats`. Timing, peak memory and the cue count are recorded here.
    """

    name: str = "BaseSolver"

    def __init__(self):
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, puzzle: Puzzle) -> Tuple[Optional[Puzzle], SolverStats]:
        """
        Deduce the puzzle's solution.

        Returns:
            Tuple of (fully deduced grid or None, stats). The caller's puzzle
            is never modified.
        """
        self.stats = SolverStats(algorithm=self.name, cues=puzzle.count_cues())

        tracemalloc.start()
        start_time = time.perf_counter()
        try:
            solution = self._solve(puzzle.copy())
            self.stats.time_seconds = time.perf_counter() - start_time
            _, self.stats.memory_bytes = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()

        self.stats.solved = solution is not None and solution.is_solved()
        if self.stats.solved:
            self.stats.outcome = DECIDED
        return solution, self.stats

    @abstractmethod
    def _solve(self, puzzle: Puzzle) -> Optional[Puzzle]:
        """Return the fully deduced grid, or None if it cannot be deduced."""

    def reset_stats(self) -> None:
        self.stats = SolverStats(algorithm=self.name)
