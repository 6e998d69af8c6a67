"""Generator module for creating puzzles."""

from .generator import (
    Difficulty,
    GenerationStats,
    PuzzleGenerator,
    Strategy,
    TRIVIAL_MAX_HINTS,
    generate_random_solution,
    generate_subtractive,
    generate_trivial,
    resolve_hints,
)

__all__ = [
    "Difficulty",
    "GenerationStats",
    "PuzzleGenerator",
    "Strategy",
    "TRIVIAL_MAX_HINTS",
    "generate_random_solution",
    "generate_subtractive",
    "generate_trivial",
    "resolve_hints",
]
