"""Built-in puzzles, kept in memory."""

from __future__ import annotations
from typing import Dict, List

from .core.board import SudokuBoard

SAMPLE_PUZZLE: List[List[int]] = [
    [0, 0, 0, 0, 6, 0, 7, 0, 0],
    [0, 5, 9, 0, 0, 0, 0, 0, 0],
    [0, 1, 0, 2, 0, 0, 0, 0, 0],
    [0, 0, 0, 1, 0, 0, 0, 0, 0],
    [6, 0, 0, 5, 0, 0, 0, 0, 0],
    [3, 0, 0, 0, 0, 0, 4, 6, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 9, 1],
    [8, 0, 0, 7, 4, 0, 0, 0, 0],
]

PUZZLES: Dict[str, str] = {
    "sample": "".join(str(v) for row in SAMPLE_PUZZLE for v in row),
    "easy": (
        "530070000"
        "600195000"
        "098000060"
        "800060003"
        "400803001"
        "700020006"
        "060000280"
        "000419005"
        "000080079"
    ),
    "logic": (
        "003020600"
        "900305001"
        "001806400"
        "008102900"
        "700000008"
        "006708200"
        "002609500"
        "800203009"
        "005010300"
    ),
    "empty": "0" * 81,
}


def get_puzzle(name: str) -> SudokuBoard:
    """
    Look up a built-in puzzle by name.

    Raises:
        KeyError: If no puzzle has that name.
    """
    try:
        puzzle = PUZZLES[name]
    except KeyError:
        raise KeyError(
            f"Unknown puzzle {name!r}; known puzzles: {', '.join(sorted(PUZZLES))}"
        ) from None
    return SudokuBoard.from_string(puzzle)
