"""Sudoku solver using singleton propagation and MRV backtracking."""

from .core.board import SudokuBoard, InvalidGridError
from .solvers import MRVSolver, solve

__all__ = ["SudokuBoard", "InvalidGridError", "MRVSolver", "solve"]
