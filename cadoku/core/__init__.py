"""Core module for grid representation, topology and validation."""

from .board import Puzzle
from .candidates import CandidateSet, InvalidStateError
from .validator import is_valid_placement, is_valid_board, validate_solution

__all__ = [
    "Puzzle",
    "CandidateSet",
    "InvalidStateError",
    "is_valid_placement",
    "is_valid_board",
    "validate_solution",
]
