"""Puzzle loading: the embedded classic puzzle and puzzle files."""

from __future__ import annotations
import logging
from typing import List

from .board import SIZE, SudokuBoard

log = logging.getLogger(__name__)

# The puzzle the solver ships with, used when no other input is given.
CLASSIC_PUZZLE = (
    "001004500"
    "000536000"
    "000080200"
    "600040000"
    "050820007"
    "302007000"
    "400070000"
    "100000085"
    "003000060"
)

_SEPARATORS = str.maketrans("", "", "|+- \t")


def parse_puzzles(text: str, source: str = "<string>") -> List[SudokuBoard]:
    """
    Parse every puzzle in a block of text.

    Two layouts are accepted and may be mixed:
    - one puzzle per line, 81 characters (0 or . for empty cells);
    - a grid block of 9 lines with 9 cells each, optionally decorated with
      the |, -, + separators used by the board's pretty-printer.

    Blank lines and lines starting with # are skipped. Lines made only of
    separators are ignored.

    Raises:
        ValueError: naming the offending line when a puzzle is malformed.
    """
    puzzles = []
    pending: List[str] = []
    pending_start = 0

    for lineno, raw in enumerate(text.splitlines(), 1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        cells = line.translate(_SEPARATORS)
        if not cells:
            continue

        if len(cells) == SIZE * SIZE and not pending:
            try:
                puzzles.append(SudokuBoard.from_string(cells))
            except ValueError as e:
                raise ValueError(f"{source}:{lineno}: {e}") from e
            continue

        if len(cells) != SIZE:
            raise ValueError(
                f"{source}:{lineno}: expected {SIZE} or {SIZE * SIZE} cells, got {len(cells)}"
            )

        if not pending:
            pending_start = lineno
        pending.append(cells)
        if len(pending) == SIZE:
            try:
                puzzles.append(SudokuBoard.from_string("".join(pending)))
            except ValueError as e:
                raise ValueError(f"{source}:{pending_start}: {e}") from e
            pending = []

    if pending:
        raise ValueError(
            f"{source}:{pending_start}: incomplete grid, {len(pending)} of {SIZE} rows"
        )

    return puzzles


def load_puzzles(path: str) -> List[SudokuBoard]:
    """Load all puzzles from a text file."""
    with open(path, "r") as f:
        puzzles = parse_puzzles(f.read(), source=path)
    log.info("Loaded %d puzzle(s) from %s", len(puzzles), path)
    return puzzles


def classic_puzzle() -> SudokuBoard:
    """Return a fresh board holding the embedded classic puzzle."""
    return SudokuBoard.from_string(CLASSIC_PUZZLE)
