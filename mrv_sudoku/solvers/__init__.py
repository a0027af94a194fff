"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .mrv_solver import MRVSolver, solve

__all__ = [
    "BaseSolver",
    "SolverStats",
    "MRVSolver",
    "solve",
]
