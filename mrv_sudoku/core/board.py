"""Sudoku board representation for the standard 9x9 grid."""

from __future__ import annotations
import numpy as np
from typing import List, Optional, Set, Union, Sequence

from .constraints import candidates

GridLike = Union[np.ndarray, Sequence[Sequence[int]]]


class InvalidGridError(ValueError):
    """Raised when a grid is not a 9x9 array of digits 0-9."""


class SudokuBoard:
    """
    Represents a 9x9 Sudoku board with 3x3 blocks.

    Cells hold 0 for "unknown" or a digit 1-9. The grid is stored row-major
    in a numpy array that the board owns; input grids are always copied.
    """

    SIZE = 9
    BOX_SIZE = 3

    def __init__(self, grid: Optional[GridLike] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial grid (9x9 array or nested list).
                  If None, creates an empty board.

        Raises:
            InvalidGridError: If the grid is not 9x9 or holds values outside 0-9.
        """
        self.size = self.SIZE
        self.box_size = self.BOX_SIZE

        if grid is not None:
            self.grid = self._coerce_grid(grid)
        else:
            self.grid = np.zeros((self.SIZE, self.SIZE), dtype=np.int32)

    @classmethod
    def _coerce_grid(cls, grid: GridLike) -> np.ndarray:
        try:
            arr = np.array(grid)
        except ValueError as e:
            # ragged nested lists
            raise InvalidGridError(f"Grid must be a 9x9 array of digits: {e}") from e

        if arr.shape != (cls.SIZE, cls.SIZE):
            raise InvalidGridError(
                f"Grid shape must be ({cls.SIZE}, {cls.SIZE}), got {arr.shape}"
            )
        if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.integer):
            raise InvalidGridError(f"Grid values must be integers, got dtype {arr.dtype}")
        if arr.min() < 0 or arr.max() > cls.SIZE:
            raise InvalidGridError(
                f"Grid values must be in 0-{cls.SIZE}, "
                f"got range {arr.min()}..{arr.max()}"
            )
        return arr.astype(np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard()
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < 0 or value > self.size:
            raise InvalidGridError(f"Value must be 0-{self.size}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = 0

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.grid[row, col] == 0

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row = (row // self.box_size) * self.box_size
        box_col = (col // self.box_size) * self.box_size
        return self.grid[box_row:box_row + self.box_size,
                        box_col:box_col + self.box_size].flatten()

    def get_candidates(self, row: int, col: int) -> Set[int]:
        """
        Get all valid candidate values for an empty cell.

        Returns:
            Set of digits 1-9 that can be placed at (row, col).
            Returns empty set if cell is not empty.
        """
        if not self.is_empty(row, col):
            return set()

        return candidates(row, col, self.grid)

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        # Check all rows
        for i in range(self.size):
            row = self.get_row(i)
            non_zero = row[row != 0]
            if len(non_zero) != len(set(non_zero)):
                return False

        # Check all columns
        for j in range(self.size):
            col = self.get_col(j)
            non_zero = col[col != 0]
            if len(non_zero) != len(set(non_zero)):
                return False

        # Check all boxes
        for box_row in range(0, self.size, self.box_size):
            for box_col in range(0, self.size, self.box_size):
                box = self.get_box(box_row, box_col)
                non_zero = box[box != 0]
                if len(non_zero) != len(set(non_zero)):
                    return False

        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Convert board to an 81-character string, 0 for empty cells."""
        return ''.join(str(int(v)) for v in self.grid.flatten())

    def to_list(self) -> List[List[int]]:
        """Convert board to a nested list of Python ints."""
        return self.grid.tolist()

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters. 0 or . for empty, 1-9 for values.
               Whitespace is ignored.

        Raises:
            InvalidGridError: On wrong length or unexpected characters.
        """
        s = ''.join(s.split())
        if len(s) != cls.SIZE * cls.SIZE:
            raise InvalidGridError(
                f"String length must be {cls.SIZE * cls.SIZE}, got {len(s)}"
            )

        values = []
        for idx, c in enumerate(s):
            if c == '.':
                values.append(0)
            elif c in '0123456789':
                values.append(int(c))
            else:
                raise InvalidGridError(f"Unexpected character {c!r} at position {idx}")

        grid = np.array(values, dtype=np.int32).reshape(cls.SIZE, cls.SIZE)
        return cls(grid)

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (self.box_size * 2 + 1)) + '+') * self.box_size

        for i in range(self.size):
            if i % self.box_size == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(self.size):
                val = self.grid[i, j]
                row_str += ' .' if val == 0 else f' {val}'

                if (j + 1) % self.box_size == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)
