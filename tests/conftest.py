"""Shared puzzles for the test suite."""

import pytest

from mrv_sudoku.core.board import SudokuBoard


# A known solvable puzzle with a unique solution
TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

# The solution to the test puzzle
TEST_SOLUTION = (
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

# Two 5s in the first row
CONTRADICTORY_PUZZLE = "55" + TEST_PUZZLE[2:]

# TEST_PUZZLE with a wrong but locally legal clue at (0, 2); the unique
# solution needs a 4 there, so no solution exists
UNSOLVABLE_PUZZLE = TEST_PUZZLE[:2] + "1" + TEST_PUZZLE[3:]


@pytest.fixture
def test_board():
    return SudokuBoard.from_string(TEST_PUZZLE)


@pytest.fixture
def solved_board():
    return SudokuBoard.from_string(TEST_SOLUTION)
