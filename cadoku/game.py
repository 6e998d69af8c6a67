"""Game session state: the puzzle being played and its hidden solution."""

from __future__ import annotations
import json
import random
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .core.board import Puzzle
from .core.topology import SIZE
from .generator import Difficulty, Strategy, generate_subtractive, generate_trivial, resolve_hints


@dataclass
class EntryResult:
    """Outcome of a player entering a digit."""
    accepted: bool
    unit_completed: bool = False
    won: bool = False


class GameState:
    """
    A (puzzle, solution) pair as persisted across sessions.

    Digits entered by the player are written to the puzzle only when they
    match the solution, so every nonzero cell always agrees with it.
    """

    def __init__(self, puzzle: Puzzle, solution: Puzzle):
        if not solution.is_solved():
            raise ValueError("Solution must be a completely filled, valid grid")
        for index, cue in enumerate(puzzle.to_list()):
            if cue != 0 and cue != solution.get(index):
                raise ValueError(f"Cue {cue} at cell {index} disagrees with the solution")
        self.puzzle = puzzle
        self.solution = solution

    @classmethod
    def new(
        cls,
        hints: Union[int, Difficulty, None] = None,
        strategy: Strategy = Strategy.SUBTRACTIVE,
        rng: Optional[random.Random] = None,
    ) -> GameState:
        """
        Start a game with a freshly generated puzzle.

        Raises:
            ValueError: if the hint count is invalid for the strategy.
        """
        hints = resolve_hints(hints, strategy)
        if Strategy(strategy) is Strategy.TRIVIAL:
            puzzle, solution = generate_trivial(hints, rng)
        else:
            puzzle, solution = generate_subtractive(hints, rng)
        return cls(puzzle, solution)

    @property
    def won(self) -> bool:
        return self.puzzle.filled()

    def enter(self, x: int, y: int, value: int) -> EntryResult:
        """
        Enter value at column x, row y.

        The entry is rejected, leaving the grid untouched, if the cell is
        already filled or the value is not the solution's digit.
        """
        index = x + y * SIZE
        if not self.puzzle.is_zero(x, y) or value != self.solution.get(index):
            return EntryResult(accepted=False)
        units_before = self.puzzle.count_filled_units()
        self.puzzle.set(index, value)
        return EntryResult(
            accepted=True,
            unit_completed=self.puzzle.count_filled_units() > units_before,
            won=self.won,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"puzzle": self.puzzle.to_list(), "solution": self.solution.to_list()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GameState:
        try:
            puzzle = Puzzle.from_list(data["puzzle"])
            solution = Puzzle.from_list(data["solution"])
        except KeyError as e:
            raise ValueError(f"Missing key in saved game: {e}") from e
        return cls(puzzle, solution)

    def save(self, path: str) -> None:
        with open(path, "w") as f:
            json.dump(self.to_dict(), f)

    @classmethod
    def load(cls, path: str) -> GameState:
        with open(path, "r") as f:
            return cls.from_dict(json.load(f))
