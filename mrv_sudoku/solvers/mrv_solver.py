"""MRV solver: candidate propagation plus backtracking behind the solver interface."""

from __future__ import annotations
from typing import Optional

from .base_solver import BaseSolver
from .candidate_search import CandidateSearch
from ..core.board import SudokuBoard


class MRVSolver(BaseSolver):
    """
    Solver backed by CandidateSearch.

    Features:
    - Per-cell candidate sets kept current by propagation
    - Minimum Remaining Values (MRV) heuristic for cell selection
    - Snapshot or undo-log restoration on backtrack
    """

    name = "MRV+Propagation"

    def __init__(self, undo_log: bool = False):
        """
        Initialize the MRV solver.

        Args:
            undo_log: If True, restore state from a per-cell undo trail
                      instead of full snapshots.
        """
        super().__init__()
        self.undo_log = undo_log

    def _solve(self, board: SudokuBoard) -> Optional[SudokuBoard]:
        """Solve using candidate propagation and backtracking."""
        search = CandidateSearch(board.grid, undo_log=self.undo_log)
        solved = search.solve()

        self.stats.iterations = search.iterations
        self.stats.backtracks = search.backtracks
        self.stats.nodes_explored = search.nodes_explored
        self.stats.dead_ends = search.dead_ends
        self.stats.extra["undo_log"] = self.undo_log

        if solved:
            return SudokuBoard(search.grid)
        return None
