"""Puzzle generators built on constraint propagation."""

from __future__ import annotations
import os
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from ..core.board import Puzzle
from ..core.topology import CELLS
from ..solvers.propagation import Grid, assign, constrain, grid_to_puzzle, new_grid

MIN_HINTS = 17
MAX_HINTS = CELLS

# The direct generator stops as soon as propagation decides the grid, which
# happens within roughly 21-30 cues, so higher counts are never met exactly.
TRIVIAL_MAX_HINTS = 28
TRIVIAL_DEFAULT_HINTS = 25

_system_random = random.SystemRandom()


class Difficulty(Enum):
    """Game difficulty, which translates to the number of cues given initially."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    CHALLENGE = "challenge"

    @property
    def hints(self) -> int:
        counts = {
            Difficulty.EASY: 60,
            Difficulty.MEDIUM: 45,
            Difficulty.HARD: 30,
            Difficulty.CHALLENGE: 22,
        }
        return counts[self]


class Strategy(Enum):
    """How a puzzle is built from its solution."""
    SUBTRACTIVE = "subtractive"
    TRIVIAL = "trivial"


@dataclass
class GenerationStats:
    """Counters describing how much work a generation took."""
    restarts: int = 0
    reshuffles: int = 0
    attempts: int = 0
    constrain_calls: int = 0


def check_hints(hints: int) -> None:
    """Raise ValueError unless hints is an int within [17, 81]."""
    if isinstance(hints, bool) or not isinstance(hints, int):
        raise ValueError(f"Number of hints must be an integer, got {hints!r}")
    if not MIN_HINTS <= hints <= MAX_HINTS:
        raise ValueError(
            f"Number of hints must be between {MIN_HINTS} and {MAX_HINTS}, got {hints}"
        )


def resolve_hints(
    hints: Union[int, Difficulty, None], strategy: Strategy = Strategy.SUBTRACTIVE
) -> int:
    """
    Turn a hint count, Difficulty or None into a hint count for the strategy.

    None picks Difficulty.MEDIUM for the subtractive strategy and
    TRIVIAL_DEFAULT_HINTS for the trivial one.

    Raises:
        ValueError: if the count is out of range, or too high for the
            trivial strategy to ever reach.
    """
    strategy = Strategy(strategy)
    if hints is None:
        hints = TRIVIAL_DEFAULT_HINTS if strategy is Strategy.TRIVIAL else Difficulty.MEDIUM
    if isinstance(hints, Difficulty):
        hints = hints.hints
    check_hints(hints)
    if strategy is Strategy.TRIVIAL and hints > TRIVIAL_MAX_HINTS:
        raise ValueError(
            f"The trivial strategy cannot place {hints} hints, "
            f"use at most {TRIVIAL_MAX_HINTS}"
        )
    return hints


def random_permutation(rng: Optional[random.Random] = None) -> List[int]:
    """A uniformly random ordering of the 81 cell indices."""
    order = list(range(CELLS))
    (rng or _system_random).shuffle(order)
    return order


def generate_random_solution(
    rng: Optional[random.Random] = None,
    stats: Optional[GenerationStats] = None,
) -> Puzzle:
    """
    Generate a random, completely filled grid.

    Random digits are assigned to random undecided cells under propagation.
    A contradiction throws away all progress and starts over from an empty grid.
    """
    rng = rng or _system_random
    grid = new_grid()
    while True:
        undecided = [s for s, candidates in enumerate(grid) if not candidates.is_singleton()]
        if not undecided:
            return grid_to_puzzle(grid)
        cell = undecided[rng.randrange(len(undecided))]
        if not assign(grid, cell, grid[cell].select_random(rng)):
            grid = new_grid()
            if stats is not None:
                stats.restarts += 1


def generate_subtractive(
    hints: int,
    rng: Optional[random.Random] = None,
    stats: Optional[GenerationStats] = None,
) -> Tuple[Puzzle, Puzzle]:
    """
    Dig holes into a random solution until at most ``hints`` cues remain.

    Cells are tried in a random order; a removal is kept only if propagation
    still deduces the original solution. When a full pass leaves too many
    cues, the puzzle is reset to the solution and a new order is drawn.

    Args:
        hints: Target number of cues, 17-81.
        rng: Random source. Defaults to the system random source.
        stats: Optional counters to update.

    Returns:
        Tuple of (puzzle, solution).
    """
    check_hints(hints)
    rng = rng or _system_random
    solution = generate_random_solution(rng, stats)
    puzzle = solution.copy()
    cues = CELLS
    order = random_permutation(rng)
    i = 0
    while True:
        if cues <= hints:
            return puzzle, solution
        if i >= CELLS:
            # stuck in a local optimum, start over with a new order
            order = random_permutation(rng)
            puzzle = solution.copy()
            cues = CELLS
            i = 0
            if stats is not None:
                stats.reshuffles += 1
        candidate = puzzle.copy()
        candidate.clear(order[i])
        i += 1
        if stats is not None:
            stats.constrain_calls += 1
        if constrain(candidate) == solution:
            puzzle = candidate
            cues -= 1


def _place_cues(hints: int, rng: random.Random) -> Tuple[Puzzle, Grid, bool]:
    """
    One attempt of the direct generator.

    Returns:
        The cues placed, the candidate grid they led to, and False if an
        assignment hit a contradiction.
    """
    tiebreak = [rng.random() for _ in range(CELLS)]
    grid = new_grid()
    puzzle = Puzzle()
    cues = 0
    while cues < hints and not all(c.is_singleton() for c in grid):
        # least constrained cell first, random tiebreak within equal counts
        cell = min(range(CELLS), key=lambda s: (-grid[s].cardinality(), tiebreak[s]))
        digit = grid[cell].select_random(rng)
        puzzle.set(cell, digit.to_digit())
        cues += 1
        if not assign(grid, cell, digit):
            return puzzle, grid, False
    return puzzle, grid, True


def generate_trivial(
    hints: int,
    rng: Optional[random.Random] = None,
    stats: Optional[GenerationStats] = None,
) -> Tuple[Puzzle, Puzzle]:
    """
    Build a puzzle with exactly ``hints`` cues by only ever adding cues.

    The result can be solved by naked and hidden singles alone, so a player
    never has to guess. Attempts that contradict themselves, or that decide
    the grid with a different number of cues, are discarded.

    Returns:
        Tuple of (puzzle, solution).
    """
    check_hints(hints)
    rng = rng or _system_random
    while True:
        if stats is not None:
            stats.attempts += 1
        puzzle, grid, consistent = _place_cues(hints, rng)
        if not consistent or puzzle.count_cues() != hints:
            continue
        solution = grid_to_puzzle(grid)
        if solution is not None:
            return puzzle, solution


class PuzzleGenerator:
    """
    Generator for puzzles of a given hint count or difficulty.

    Algorithm (subtractive):
    1. Generate a complete solution by randomized propagation
    2. Remove cues in random order while propagation still deduces the solution
    3. Reshuffle and start over if stuck above the hint count

    Algorithm (trivial):
    1. Add random cues to the least constrained cells
    2. Stop once propagation decides every cell
    3. Retry unless exactly the requested number of cues was used
    """

    def __init__(self, seed: Optional[int] = None, strategy: Strategy = Strategy.SUBTRACTIVE):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility. None uses the system random source.
            strategy: Which generation algorithm to use.
        """
        self.strategy = Strategy(strategy)
        self.rng = random.Random(seed) if seed is not None else _system_random
        self.stats = GenerationStats()

    def generate(self, hints: Union[int, Difficulty, None] = None) -> Puzzle:
        """Generate a puzzle with no solution attached."""
        puzzle, _ = self.generate_with_solution(hints)
        return puzzle

    def generate_with_solution(
        self, hints: Union[int, Difficulty, None] = None
    ) -> Tuple[Puzzle, Puzzle]:
        """
        Generate a puzzle along with its solution.

        Args:
            hints: Number of cues, a Difficulty, or None for the strategy default.

        Returns:
            Tuple of (puzzle, solution).

        Raises:
            ValueError: if the trivial strategy cannot reach the hint count.
        """
        hints = resolve_hints(hints, self.strategy)
        if self.strategy is Strategy.TRIVIAL:
            return generate_trivial(hints, self.rng, self.stats)
        return generate_subtractive(hints, self.rng, self.stats)

    def generate_batch(self, count: int, hints: Union[int, Difficulty, None] = None) -> List[Puzzle]:
        return [self.generate(hints) for _ in range(count)]

    @staticmethod
    def save_to_folder(puzzles: List[Puzzle], folder_path: str, prefix: str = "puzzle") -> None:
        """
        Save a list of puzzles to a folder as individual text files.

        Args:
            puzzles: List of Puzzle objects.
            folder_path: Directory to save the puzzles.
            prefix: Prefix for the filename (default: "puzzle").
        """
        os.makedirs(folder_path, exist_ok=True)

        for i, puzzle in enumerate(puzzles, 1):
            file_path = os.path.join(folder_path, f"{prefix}_{i}.txt")
            with open(file_path, "w") as f:
                f.write(puzzle.to_string())
                f.write("\n\nPretty format:\n")
                f.write(str(puzzle))
