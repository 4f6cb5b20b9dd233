"""Validation utilities for Sudoku puzzles."""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Tuple

from .board import SIZE, peers

if TYPE_CHECKING:
    from .board import SudokuBoard


def is_valid_placement(board: SudokuBoard, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) is valid.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Value to check (1 to 9).

    Returns:
        True if the placement is valid.
    """
    if value < 1 or value > SIZE:
        return False

    # Check row
    if value in board.get_row(row):
        return False

    # Check column
    if value in board.get_col(col):
        return False

    # Check box
    if value in board.get_box(row, col):
        return False

    return True


def find_conflicts(board: SudokuBoard) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
    """
    List every pair of peer cells holding the same non-zero value.

    Each pair is reported once, as ((r1, c1), (r2, c2)) with the first cell
    preceding the second in row-major order.
    """
    conflicts = []
    for row in range(SIZE):
        for col in range(SIZE):
            value = board.get(row, col)
            if value == 0:
                continue
            for r, c in peers(row, col):
                if (r, c) > (row, col) and board.get(r, c) == value:
                    conflicts.append(((row, col), (r, c)))
    return sorted(conflicts)


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    # Check that solution respects original clues
    for i in range(SIZE):
        for j in range(SIZE):
            if not puzzle.is_empty(i, j):
                if puzzle.get(i, j) != solution.get(i, j):
                    return False

    # Check that solution is complete and valid
    return solution.is_solved()
