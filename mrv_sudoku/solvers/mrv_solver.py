"""Backtracking solver with singleton propagation and MRV branching."""

from __future__ import annotations
import logging
from typing import Optional, Tuple, Set

from .base_solver import BaseSolver
from ..core.board import SudokuBoard, GridLike
from ..core.constraints import candidates

log = logging.getLogger(__name__)


class MRVSolver(BaseSolver):
    """
    Recursive backtracking solver.

    Each search level repeatedly scans the grid in row-major order, filling
    every cell that has a single candidate (forced placement) until a scan
    fills nothing. It then branches on the empty cell with the fewest
    candidates (Minimum Remaining Values), trying digits in ascending order
    on a fresh copy of the board per branch.

    Stats:
    - iterations: search invocations
    - nodes_explored: branch points (cells guessed on)
    - backtracks: branches that led to no solution
    - extra["forced_placements"]: cells filled by propagation
    - extra["max_depth"]: deepest recursion level reached
    """

    name = "MRV+Propagation"

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """Solve using propagation and MRV backtracking."""
        self.stats.extra["forced_placements"] = 0
        self.stats.extra["max_depth"] = 0

        if not board.is_valid():
            # Conflicting clues can never be completed
            log.debug("Given clues conflict, no solution")
            return None

        return self._search(board, depth=0)

    def _search(self, board: SudokuBoard, depth: int) -> Optional[SudokuBoard]:
        """
        Solve ``board`` in place from its current state.

        Returns the completed board, or None if this state has no completion.
        """
        self.stats.iterations += 1
        if depth > self.stats.extra["max_depth"]:
            self.stats.extra["max_depth"] = depth

        while True:
            best_cell: Optional[Tuple[int, int]] = None
            best_candidates: Set[int] = set()
            forced = 0

            for row in range(board.size):
                for col in range(board.size):
                    if not board.is_empty(row, col):
                        continue

                    cell_candidates = candidates(row, col, board.grid)
                    if not cell_candidates:
                        log.debug("Dead end at (%d, %d), depth %d", row, col, depth)
                        return None

                    if len(cell_candidates) == 1:
                        board.set(row, col, next(iter(cell_candidates)))
                        forced += 1
                        continue

                    if best_cell is None or len(cell_candidates) < len(best_candidates):
                        best_cell = (row, col)
                        best_candidates = cell_candidates

            self.stats.extra["forced_placements"] += forced

            if best_cell is None:
                # Every empty cell was filled by this pass, or there were none
                return board

            if forced == 0:
                break

        row, col = best_cell
        self.stats.nodes_explored += 1
        log.debug(
            "Branching on (%d, %d) with candidates %s, depth %d",
            row, col, sorted(best_candidates), depth
        )

        for value in sorted(best_candidates):
            branch = board.copy()
            branch.set(row, col, value)
            result = self._search(branch, depth + 1)
            if result is not None:
                return result
            self.stats.backtracks += 1

        return None


def solve(grid: GridLike | SudokuBoard) -> Tuple[bool, Optional[SudokuBoard]]:
    """
    Solve a 9x9 Sudoku grid.

    Args:
        grid: A SudokuBoard, or a 9x9 nested list / numpy array with 0 for
              empty cells.

    Returns:
        ``(True, solution)`` with a completed board, or ``(False, None)`` if
        the grid has no completion. The input is never modified.

    Raises:
        InvalidGridError: If the grid is not 9x9 or holds values outside 0-9.
    """
    board = grid if isinstance(grid, SudokuBoard) else SudokuBoard(grid)
    solution, stats = MRVSolver().solve(board)
    if not stats.solved:
        return False, None
    return True, solution
