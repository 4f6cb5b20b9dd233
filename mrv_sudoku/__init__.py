"""Sudoku solver using candidate propagation and MRV backtracking."""

from .core import SudokuBoard, classic_puzzle, load_puzzles, validate_solution
from .solvers import CandidateSearch, MRVSolver, SolverStats

__version__ = "1.0.0"

__all__ = [
    "SudokuBoard",
    "classic_puzzle",
    "load_puzzles",
    "validate_solution",
    "CandidateSearch",
    "MRVSolver",
    "SolverStats",
]
