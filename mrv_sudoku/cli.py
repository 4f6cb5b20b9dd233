"""Command-line interface for the Sudoku solver."""

import argparse
import logging
import sys
from typing import List, Optional

from .benchmark import Benchmark
from .core.board import SudokuBoard
from .core.puzzles import classic_puzzle, load_puzzles
from .core.validator import find_conflicts
from .solvers import MRVSolver

log = logging.getLogger(__name__)

NO_SOLUTION = "No solution found."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mrv-sudoku",
        description="Sudoku solver using candidate propagation and MRV backtracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve the built-in puzzle
  mrv-sudoku solve

  # Solve a puzzle given on the command line
  mrv-sudoku solve --puzzle "0030206..."

  # Solve every puzzle in a file and save timings
  mrv-sudoku bench --file puzzles.txt --output results/
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve Sudoku puzzles")
    source = solve_parser.add_mutually_exclusive_group()
    source.add_argument(
        "--puzzle", "-p", type=str, default=None,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    source.add_argument(
        "--file", "-f", type=str, default=None,
        help="File with one or more puzzles"
    )
    solve_parser.add_argument(
        "--undo-log", action="store_true",
        help="Backtrack with an undo log instead of full snapshots"
    )
    solve_parser.add_argument(
        "--stats", "-s", action="store_true",
        help="Show solving statistics"
    )

    # Bench command
    bench_parser = subparsers.add_parser("bench", help="Batch solve a puzzle file")
    bench_parser.add_argument(
        "--file", "-f", type=str, required=True,
        help="File with one or more puzzles"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output directory for JSON results"
    )
    bench_parser.add_argument(
        "--undo-log", action="store_true",
        help="Backtrack with an undo log instead of full snapshots"
    )
    bench_parser.add_argument(
        "--no-progress", action="store_true",
        help="Hide the progress bar"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "solve":
        return cmd_solve(args)
    return cmd_bench(args)


def _read_puzzles(args) -> List[SudokuBoard]:
    if args.puzzle is not None:
        return [SudokuBoard.from_string(args.puzzle)]
    if args.file is not None:
        return load_puzzles(args.file)
    return [classic_puzzle()]


def cmd_solve(args) -> int:
    """Handle the solve command."""
    try:
        puzzles = _read_puzzles(args)
    except (OSError, ValueError) as e:
        print(f"Error reading puzzle: {e}")
        return 1

    solver = MRVSolver(undo_log=args.undo_log)
    status = 0

    for i, board in enumerate(puzzles, 1):
        if len(puzzles) > 1:
            print(f"--- Puzzle {i} ({board.count_filled()} clues) ---")
        print("Input puzzle:")
        print(board)
        print()

        solution, stats = solver.solve(board)

        if stats.solved:
            print(solution)
        else:
            print(NO_SOLUTION)
            status = 1
            for first, second in find_conflicts(board):
                log.warning("Clues at %s and %s conflict", first, second)

        if args.stats:
            print(f"  Time: {stats.time_seconds:.4f}s")
            print(f"  Iterations: {stats.iterations:,}")
            print(f"  Backtracks: {stats.backtracks:,}")
            print(f"  Dead ends: {stats.dead_ends:,}")
            print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
        print()

    return status


def cmd_bench(args) -> int:
    """Handle the bench command."""
    try:
        puzzles = load_puzzles(args.file)
    except (OSError, ValueError) as e:
        print(f"Error reading puzzles: {e}")
        return 1

    benchmark = Benchmark(puzzles, MRVSolver(undo_log=args.undo_log))
    benchmark.run(show_progress=not args.no_progress)
    summary = benchmark.get_summary()

    print("=" * 60)
    print(f"RESULTS: {summary['algorithm']}")
    print("=" * 60)
    print(f"Puzzles: {summary['total_puzzles']}")
    if benchmark.results:
        print(f"Solved: {summary['total_solved']} ({summary['accuracy']:.1f}%)")
        print(f"Avg Time: {summary['avg_time_seconds']:.4f}s")
        print(f"Max Time: {summary['max_time_seconds']:.4f}s")
        print(f"Avg Backtracks: {summary['avg_backtracks']:.1f}")
        print(f"Avg Memory: {summary['avg_memory_mb']:.2f} MB")

    if args.output:
        benchmark.save_results(args.output)
        print(f"Results saved to {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
