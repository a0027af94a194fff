"""Unit tests for Sudoku board and validation."""

import pytest
import numpy as np
from mrv_sudoku.core.board import SudokuBoard, InvalidGridError
from mrv_sudoku.core.validator import (
    is_valid_placement, validate_solution, preserves_clues
)

SOLVED = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_empty() == 81
        assert board.count_filled() == 0

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        assert board.get(0, 0) == 5
        assert not board.is_empty(0, 0)

        board.clear(0, 0)
        assert board.is_empty(0, 0)

    def test_set_rejects_out_of_range(self):
        board = SudokuBoard()
        with pytest.raises(InvalidGridError):
            board.set(0, 0, 10)

    def test_get_candidates(self):
        """Test getting valid candidates for a cell."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        board.set(0, 1, 3)

        # Cell (0, 2) should not have 5 or 3 as candidates
        candidates = board.get_candidates(0, 2)
        assert 5 not in candidates
        assert 3 not in candidates
        assert len(candidates) == 7  # 1-9 minus 5 and 3

    def test_candidates_of_filled_cell_empty(self):
        board = SudokuBoard()
        board.set(4, 4, 1)
        assert board.get_candidates(4, 4) == set()

    def test_is_valid(self):
        """Test board validation."""
        board = SudokuBoard()
        assert board.is_valid()  # Empty board is valid

        board.set(0, 0, 5)
        board.set(0, 1, 5)  # Duplicate in row
        assert not board.is_valid()

    def test_is_valid_detects_block_duplicate(self):
        board = SudokuBoard()
        board.set(0, 0, 7)
        board.set(2, 2, 7)
        assert not board.is_valid()

    def test_from_string(self):
        """Test creating board from string."""
        puzzle_str = "0" * 80 + "9"  # 80 zeros and a 9 at the end
        board = SudokuBoard.from_string(puzzle_str)
        assert board.get(8, 8) == 9

    def test_from_string_dots_and_whitespace(self):
        board = SudokuBoard.from_string(("5........\n" * 9))
        assert board.get(3, 0) == 5
        assert board.count_filled() == 9

    def test_from_string_rejects_bad_input(self):
        with pytest.raises(InvalidGridError):
            SudokuBoard.from_string("123")
        with pytest.raises(InvalidGridError):
            SudokuBoard.from_string("x" + "0" * 80)

    def test_to_string(self):
        """Test converting board to string."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        s = board.to_string()
        assert len(s) == 81
        assert s[0] == '5'

    def test_to_list(self):
        board = SudokuBoard.from_string(SOLVED)
        rows = board.to_list()
        assert rows[0] == [5, 3, 4, 6, 7, 8, 9, 1, 2]
        assert all(type(v) is int for v in rows[0])

    def test_copy(self):
        """Test board copy."""
        board = SudokuBoard()
        board.set(4, 4, 7)
        copy = board.copy()

        assert copy.get(4, 4) == 7

        # Modify copy, original should be unchanged
        copy.set(4, 4, 8)
        assert board.get(4, 4) == 7

    def test_constructor_copies_input(self):
        data = np.zeros((9, 9), dtype=np.int32)
        board = SudokuBoard(data)
        board.set(0, 0, 3)
        assert data[0, 0] == 0

    def test_str_has_block_separators(self):
        board = SudokuBoard.from_string(SOLVED)
        lines = str(board).splitlines()
        assert len(lines) == 13
        assert lines[0] == "+-------+-------+-------+"
        assert lines[1] == "| 5 3 4 | 6 7 8 | 9 1 2 |"


class TestGridValidation:
    """Malformed grids are rejected at construction."""

    @pytest.mark.parametrize("grid", [
        [[0] * 9] * 8,
        [[0] * 8] * 9,
        [[0] * 9] * 8 + [[0] * 8],
        [],
    ])
    def test_wrong_shape(self, grid):
        with pytest.raises(InvalidGridError):
            SudokuBoard(grid)

    def test_value_out_of_range(self):
        grid = [[0] * 9 for _ in range(9)]
        grid[3][3] = 10
        with pytest.raises(InvalidGridError):
            SudokuBoard(grid)

        grid[3][3] = -1
        with pytest.raises(InvalidGridError):
            SudokuBoard(grid)

    def test_non_integer_values(self):
        grid = [[0.5] * 9 for _ in range(9)]
        with pytest.raises(InvalidGridError):
            SudokuBoard(grid)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            SudokuBoard([[1, 2, 3]])


class TestValidator:
    """Tests for validation utilities."""

    def test_is_valid_placement(self):
        """Test placement validation."""
        board = SudokuBoard()
        board.set(0, 0, 5)

        # Can't place 5 in same row
        assert not is_valid_placement(board, 0, 5, 5)

        # Can't place 5 in same column
        assert not is_valid_placement(board, 5, 0, 5)

        # Can't place 5 in same box
        assert not is_valid_placement(board, 1, 1, 5)

        # Can place different value
        assert is_valid_placement(board, 0, 5, 7)

    def test_validate_solution(self):
        solution = SudokuBoard.from_string(SOLVED)
        puzzle = solution.copy()
        puzzle.clear(0, 0)
        puzzle.clear(8, 8)
        assert validate_solution(puzzle, solution)

    def test_validate_solution_rejects_changed_clue(self):
        solution = SudokuBoard.from_string(SOLVED)
        puzzle = SudokuBoard()
        puzzle.set(0, 0, 1)
        assert not preserves_clues(puzzle, solution)
        assert not validate_solution(puzzle, solution)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
