"""Core module for Sudoku board representation, constraints and validation."""

from .board import SudokuBoard, InvalidGridError
from .constraints import row_digits, column_digits, block_digits, candidates
from .validator import is_valid_placement, validate_solution

__all__ = [
    "SudokuBoard",
    "InvalidGridError",
    "row_digits",
    "column_digits",
    "block_digits",
    "candidates",
    "is_valid_placement",
    "validate_solution",
]
