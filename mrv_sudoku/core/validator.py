"""Validation utilities for Sudoku puzzles."""

from __future__ import annotations
from typing import TYPE_CHECKING

from .constraints import candidates

if TYPE_CHECKING:
    from .board import SudokuBoard


def is_valid_placement(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at the empty cell (row, col) is valid.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Value to check (1 to 9).

    Returns:
        True if the placement is valid.
    """
    if value < 1 or value > board.size:
        return False
    if not board.is_empty(row, col):
        return False
    return value in candidates(row, col, board)


def preserves_clues(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """Check that every given clue of the puzzle is unchanged in the solution."""
    mask = puzzle.grid != 0
    return bool((puzzle.grid[mask] == solution.grid[mask]).all())


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    return preserves_clues(puzzle, solution) and solution.is_solved()
