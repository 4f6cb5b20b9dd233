"""Candidate-set search: constraint propagation with MRV backtracking."""

from __future__ import annotations
import logging
from typing import List, Optional, Tuple, Union

import numpy as np

from ..core.board import SIZE, DIGITS, check_grid, peers

log = logging.getLogger(__name__)

Cell = Tuple[int, int]
# (row, col, previous value, previous candidate vector)
TrailEntry = Tuple[int, int, int, np.ndarray]


class CandidateSearch:
    """
    Owns a 9x9 grid plus a candidate set per cell and searches for a solution.

    Candidates live in a boolean array of shape (9, 9, 10): ``candidates[r, c, d]``
    is True while digit ``d`` may still go in (r, c). Index 0 is never set.
    A filled cell holding ``v`` has the candidate set ``{v}``.

    Search:
    - Minimum Remaining Values cell selection, row-major tie-break
    - Propagation of every placement to the cell's 20 peers
    - Recursive backtracking, restoring state when a placement's subtree fails

    State is restored either from full snapshots of grid and candidates
    (default) or, with ``undo_log=True``, from a trail recording only the
    cells each placement touched. Both give identical results.
    """

    def __init__(self, grid, undo_log: bool = False):
        """
        Build the search state from a puzzle grid.

        Args:
            grid: 9x9 array-like of ints in 0-9 (0 = empty). Copied, not aliased.
                  Contradictory clues are accepted; solve() will return False.
            undo_log: Restore from a per-cell undo trail instead of snapshots.

        Raises:
            ValueError: if the grid has the wrong shape or out-of-range values.
        """
        self.grid = check_grid(grid)
        self.undo_log = undo_log
        self.candidates = np.ones((SIZE, SIZE, SIZE + 1), dtype=bool)
        self.candidates[:, :, 0] = False
        self._trail: List[TrailEntry] = []
        self.reset_counters()
        self._init_candidates()

    def reset_counters(self) -> None:
        """Zero the search statistics."""
        self.iterations = 0
        self.nodes_explored = 0
        self.backtracks = 0
        self.dead_ends = 0

    def _init_candidates(self) -> None:
        for row in range(SIZE):
            for col in range(SIZE):
                val = int(self.grid[row, col])
                if val != 0:
                    self.candidates[row, col, :] = False
                    self.candidates[row, col, val] = True
                    self.propagate(row, col, val)
                else:
                    for num in DIGITS:
                        if not self.is_safe(row, col, num):
                            self.candidates[row, col, num] = False
        self._trail = []

    def is_safe(self, row: int, col: int, val: int) -> bool:
        """
        Check whether no peer of (row, col) holds ``val`` in the grid.

        Reads the grid only, never the candidate sets. The cell's own value
        is not a peer, so a placed digit stays safe at its own cell.
        """
        for r, c in peers(row, col):
            if self.grid[r, c] == val:
                return False
        return True

    def propagate(self, row: int, col: int, val: int) -> None:
        """Remove ``val`` from the candidates of every peer of (row, col)."""
        for r, c in peers(row, col):
            if self.candidates[r, c, val]:
                self._record(r, c)
                self.candidates[r, c, val] = False

    def place(self, row: int, col: int, val: int) -> None:
        """Write ``val`` into (row, col), narrow its candidates and propagate."""
        self._record(row, col)
        self.grid[row, col] = val
        self.candidates[row, col, :] = False
        self.candidates[row, col, val] = True
        self.propagate(row, col, val)

    def candidate_count(self, row: int, col: int) -> int:
        return int(np.count_nonzero(self.candidates[row, col]))

    def candidate_digits(self, row: int, col: int) -> List[int]:
        """Remaining candidates of (row, col) in ascending order."""
        return [int(d) for d in np.flatnonzero(self.candidates[row, col])]

    def count_empty(self) -> int:
        return int(np.count_nonzero(self.grid == 0))

    def select_next_cell(self) -> Optional[Cell]:
        """
        Pick the empty cell with the fewest candidates.

        Ties go to the first cell in row-major order, so an empty cell with
        no candidates left is always returned ahead of any other.

        Returns:
            (row, col), or None when every cell is filled.
        """
        empty = self.grid == 0
        if not empty.any():
            return None

        counts = np.count_nonzero(self.candidates, axis=2)
        counts = np.where(empty, counts, SIZE + 1)
        # argmin reports the first minimum of the flattened (row-major) array
        row, col = divmod(int(np.argmin(counts)), SIZE)
        return row, col

    def clues_consistent(self) -> bool:
        """
        Check that every filled cell still admits its own digit.

        Propagation from a peer holding the same digit clears it, which only
        happens when two clues contradict each other.
        """
        for row, col in np.argwhere(self.grid != 0):
            if not self.candidates[row, col, self.grid[row, col]]:
                return False
        return True

    def solve(self) -> bool:
        """
        Run the search from the current state.

        Returns:
            True when the grid is complete and peer-consistent. False when no
            solution exists; the grid is then left as it was before the call.
        """
        self.reset_counters()
        log.debug("Searching: %d empty cells, undo_log=%s", self.count_empty(), self.undo_log)

        if not self.clues_consistent():
            log.debug("Clues conflict with each other, nothing to search")
            return False

        solved = self._backtrack()
        self._trail = []

        log.debug(
            "Search %s after %d iterations, %d backtracks, %d dead ends",
            "solved" if solved else "exhausted",
            self.iterations, self.backtracks, self.dead_ends,
        )
        return solved

    def _backtrack(self) -> bool:
        """
        Recursive backtracking step.

        Returns True if solution found, False otherwise.
        """
        self.iterations += 1

        cell = self.select_next_cell()
        if cell is None:
            # No empty cells - solution found!
            return True

        row, col = cell
        digits = self.candidate_digits(row, col)

        # Dead end: fail without trying anything at this cell
        if not digits:
            self.dead_ends += 1
            return False

        self.nodes_explored += 1

        for val in digits:
            saved = self._save()
            self.place(row, col, val)

            if self._backtrack():
                return True

            self._restore(saved)
            self.backtracks += 1

        return False

    def _record(self, row: int, col: int) -> None:
        if self.undo_log:
            self._trail.append(
                (row, col, int(self.grid[row, col]), self.candidates[row, col].copy())
            )

    def _save(self) -> Union[int, Tuple[np.ndarray, np.ndarray]]:
        if self.undo_log:
            return len(self._trail)
        return self.grid.copy(), self.candidates.copy()

    def _restore(self, saved: Union[int, Tuple[np.ndarray, np.ndarray]]) -> None:
        if self.undo_log:
            while len(self._trail) > saved:
                row, col, value, cands = self._trail.pop()
                self.grid[row, col] = value
                self.candidates[row, col] = cands
        else:
            self.grid, self.candidates = saved
