"""Propagation engine and solver facade."""

from .base_solver import BaseSolver, SolverStats
from .propagation import assign, constrain, eliminate, new_grid
from .propagation_solver import PropagationSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "PropagationSolver",
    "assign",
    "constrain",
    "eliminate",
    "new_grid",
]
