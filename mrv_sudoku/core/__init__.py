"""Core module for Sudoku board representation, validation and loading."""

from .board import SudokuBoard, peers
from .validator import is_valid_placement, find_conflicts, validate_solution
from .puzzles import CLASSIC_PUZZLE, classic_puzzle, load_puzzles, parse_puzzles

__all__ = [
    "SudokuBoard",
    "peers",
    "is_valid_placement",
    "find_conflicts",
    "validate_solution",
    "CLASSIC_PUZZLE",
    "classic_puzzle",
    "load_puzzles",
    "parse_puzzles",
]
