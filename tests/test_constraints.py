"""Tests for the row/column/block constraint queries."""

import numpy as np
import pytest
from mrv_sudoku.core.board import SudokuBoard
from mrv_sudoku.core.constraints import (
    block_origin, row_digits, column_digits, block_digits, candidates
)
from mrv_sudoku.puzzles import SAMPLE_PUZZLE


@pytest.fixture
def sample():
    return SudokuBoard(SAMPLE_PUZZLE)


class TestUnitDigits:
    """Digits present in a row, column or block."""

    def test_row_digits_include_zero(self, sample):
        assert row_digits(0, sample) == {0, 6, 7}

    def test_full_row_has_no_zero(self):
        board = SudokuBoard()
        for col in range(9):
            board.set(2, col, col + 1)
        assert row_digits(2, board) == set(range(1, 10))

    def test_column_digits(self, sample):
        assert column_digits(0, sample) == {0, 6, 3, 8}

    def test_block_digits(self, sample):
        assert block_digits(0, 0, sample) == {0, 5, 9, 1}
        # any cell of the block gives the same answer
        assert block_digits(2, 2, sample) == block_digits(1, 0, sample)

    def test_block_digits_bottom_right(self, sample):
        assert block_digits(8, 8, sample) == {0, 9, 1}

    def test_accepts_raw_array(self, sample):
        assert row_digits(5, sample.grid) == row_digits(5, sample)

    def test_returns_python_ints(self, sample):
        assert all(type(v) is int for v in row_digits(4, sample))

    @pytest.mark.parametrize("row,col,origin", [
        (0, 0, (0, 0)),
        (2, 2, (0, 0)),
        (3, 5, (3, 3)),
        (8, 6, (6, 6)),
        (4, 8, (3, 6)),
    ])
    def test_block_origin(self, row, col, origin):
        assert block_origin(row, col) == origin


class TestCandidates:
    """Candidate sets for empty cells."""

    def test_empty_grid_allows_everything(self):
        grid = np.zeros((9, 9), dtype=np.int32)
        assert candidates(4, 4, grid) == set(range(1, 10))

    def test_sample_cell(self, sample):
        # row 0 has 6, 7; column 0 has 6, 3, 8; block has 5, 9, 1
        assert candidates(0, 0, sample) == {2, 4}

    def test_excludes_row_column_block(self):
        board = SudokuBoard()
        board.set(0, 8, 1)   # same row
        board.set(8, 0, 2)   # same column
        board.set(1, 1, 3)   # same block
        board.set(5, 5, 4)   # unrelated
        assert candidates(0, 0, board) == {4, 5, 6, 7, 8, 9}

    def test_single_candidate(self):
        board = SudokuBoard()
        for col, digit in enumerate([1, 2, 3, 4, 5, 6, 7, 8]):
            board.set(0, col, digit)
        assert candidates(0, 8, board) == {9}

    def test_no_candidates(self):
        board = SudokuBoard()
        for col, digit in enumerate([1, 2, 3, 4, 5, 6, 7, 8]):
            board.set(0, col, digit)
        board.set(5, 8, 9)
        assert candidates(0, 8, board) == set()

    def test_fresh_set_each_call(self, sample):
        first = candidates(0, 0, sample)
        first.clear()
        assert candidates(0, 0, sample) == {2, 4}

    def test_does_not_mutate_grid(self, sample):
        before = sample.copy()
        candidates(6, 6, sample)
        assert sample == before
