"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .candidate_search import CandidateSearch
from .mrv_solver import MRVSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "CandidateSearch",
    "MRVSolver",
]
