"""
Constraint queries over a 9x9 grid.

Each function takes the grid last and works on either a raw 9x9 numpy array
or anything exposing one as ``.grid`` (a SudokuBoard). Nothing here mutates
the grid or caches results; a candidate set is stale as soon as any peer
cell changes.
"""

from __future__ import annotations
import numpy as np
from typing import Set, Tuple, Any

BOX_SIZE = 3
DIGITS = frozenset(range(1, 10))


def _as_array(grid: Any) -> np.ndarray:
    return getattr(grid, "grid", grid)


def block_origin(row: int, col: int) -> Tuple[int, int]:
    """Top-left cell of the 3x3 block containing (row, col)."""
    return BOX_SIZE * (row // BOX_SIZE), BOX_SIZE * (col // BOX_SIZE)


def row_digits(row: int, grid: Any) -> Set[int]:
    """All values in the row, 0 included if the row has empty cells."""
    return set(_as_array(grid)[row, :].tolist())


def column_digits(col: int, grid: Any) -> Set[int]:
    """All values in the column, 0 included if the column has empty cells."""
    return set(_as_array(grid)[:, col].tolist())


def block_digits(row: int, col: int, grid: Any) -> Set[int]:
    """All values in the 3x3 block containing (row, col)."""
    box_row, box_col = block_origin(row, col)
    block = _as_array(grid)[box_row:box_row + BOX_SIZE, box_col:box_col + BOX_SIZE]
    return set(block.flatten().tolist())


def candidates(row: int, col: int, grid: Any) -> Set[int]:
    """
    Digits still allowed at the empty cell (row, col).

    Computed as {1..9} minus everything already present in the cell's row,
    column and block. Only meaningful for empty cells: on a filled cell the
    cell's own digit is excluded along with its peers.

    Returns:
        A fresh set; callers needing ascending order should sort it.
    """
    used = row_digits(row, grid) | column_digits(col, grid) | block_digits(row, col, grid)
    return set(DIGITS - used)
