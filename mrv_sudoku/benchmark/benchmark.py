"""Batch solving of puzzle collections with timing summaries."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
import json
import logging
import os

from tqdm import tqdm

from ..core.board import SudokuBoard
from ..core.validator import validate_solution
from ..solvers import BaseSolver, MRVSolver

log = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from solving a single puzzle."""
    puzzle_id: int
    puzzle: str
    algorithm: str
    solved: bool
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    dead_ends: int
    solution: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "puzzle": self.puzzle,
            "algorithm": self.algorithm,
            "solved": self.solved,
            "solution": self.solution,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "dead_ends": self.dead_ends,
            **self.extra
        }


class Benchmark:
    """
    Solves a collection of puzzles one after another and collects metrics.

    Every returned solution is checked against its puzzle; a solution that
    fails the check is recorded as unsolved with an error note.
    """

    def __init__(self, puzzles: List[SudokuBoard], solver: Optional[BaseSolver] = None):
        """
        Initialize the benchmark.

        Args:
            puzzles: Puzzles to solve, in order.
            solver: Solver instance to use (default: MRVSolver()).
        """
        self.puzzles = puzzles
        self.solver = solver or MRVSolver()
        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Solve every puzzle.

        Returns:
            List of BenchmarkResult objects, one per puzzle.
        """
        self.results = []

        for puzzle_id, puzzle in enumerate(
            tqdm(self.puzzles, desc="Solving", disable=not show_progress)
        ):
            self.results.append(self._run_single(puzzle_id, puzzle))

        return self.results

    def _run_single(self, puzzle_id: int, puzzle: SudokuBoard) -> BenchmarkResult:
        """Run the solver on a single puzzle."""
        solution, stats = self.solver.solve(puzzle)
        extra = dict(stats.extra)
        solved = stats.solved

        if solution is not None and not validate_solution(puzzle, solution):
            log.warning("Puzzle %d: solution does not match its clues", puzzle_id)
            extra["error"] = "Invalid solution"
            solved = False

        return BenchmarkResult(
            puzzle_id=puzzle_id,
            puzzle=puzzle.to_string(),
            algorithm=stats.algorithm,
            solved=solved,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            dead_ends=stats.dead_ends,
            solution=solution.to_string() if solved else None,
            extra=extra
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary: Dict[str, Any] = {
            "algorithm": self.solver.name,
            "total_puzzles": len(self.results),
        }
        if not self.results:
            return summary

        solved = [r for r in self.results if r.solved]
        times = [r.time_seconds for r in self.results]
        memory = [r.memory_bytes for r in self.results]
        backtracks = [r.backtracks for r in self.results]

        summary.update({
            "total_solved": len(solved),
            "accuracy": len(solved) / len(self.results) * 100,
            "avg_time_seconds": sum(times) / len(times),
            "max_time_seconds": max(times),
            "min_time_seconds": min(times),
            "avg_memory_mb": sum(memory) / len(memory) / (1024 * 1024),
            "avg_backtracks": sum(backtracks) / len(backtracks),
            "max_backtracks": max(backtracks),
        })
        return summary

    def save_results(self, output_dir: str) -> None:
        """Save per-puzzle results and the summary as JSON."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        log.info("Results saved to %s", output_dir)
