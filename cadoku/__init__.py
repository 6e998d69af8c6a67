"""Constraint-propagation Sudoku generator."""

from .core.board import Puzzle
from .game import EntryResult, GameState
from .generator import Difficulty, PuzzleGenerator, Strategy, generate_subtractive, generate_trivial
from .solvers import constrain

__version__ = "1.0.0"

__all__ = [
    "Puzzle",
    "GameState",
    "EntryResult",
    "Difficulty",
    "PuzzleGenerator",
    "Strategy",
    "constrain",
    "generate_subtractive",
    "generate_trivial",
]
