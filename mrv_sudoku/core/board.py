"""Standard 9x9 Sudoku board representation."""

from __future__ import annotations
import numpy as np
from typing import Iterator, List, Tuple, Optional, Set

SIZE = 9
BOX_SIZE = 3
DIGITS = range(1, SIZE + 1)


def box_origin(row: int, col: int) -> Tuple[int, int]:
    """Top-left corner of the 3x3 box containing (row, col)."""
    return (row // BOX_SIZE) * BOX_SIZE, (col // BOX_SIZE) * BOX_SIZE


def peers(row: int, col: int) -> Iterator[Tuple[int, int]]:
    """
    Yield every peer of (row, col): cells sharing its row, column or box.

    Each of the 20 peers is yielded exactly once; the cell itself is not.
    """
    for c in range(SIZE):
        if c != col:
            yield row, c
    for r in range(SIZE):
        if r != row:
            yield r, col
    box_row, box_col = box_origin(row, col)
    for r in range(box_row, box_row + BOX_SIZE):
        for c in range(box_col, box_col + BOX_SIZE):
            # Row and column peers were already yielded above
            if r != row and c != col:
                yield r, c


def check_grid(grid) -> np.ndarray:
    """
    Coerce a grid to a fresh 9x9 int32 array, rejecting bad shapes and values.

    Raises:
        ValueError: if the grid is not 9x9, holds non-integer cells, or holds
            values outside 0-9.
    """
    raw = np.asarray(grid)
    if raw.shape != (SIZE, SIZE):
        raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {raw.shape}")
    if not np.issubdtype(raw.dtype, np.integer):
        raise ValueError(f"Grid cells must be integers, got {raw.dtype}")
    if raw.min() < 0 or raw.max() > SIZE:
        raise ValueError(f"Grid values must be 0-{SIZE}")
    return raw.astype(np.int32)


class SudokuBoard:
    """
    Represents a standard 9x9 Sudoku board with 3x3 boxes.

    Cells hold 1-9, or 0 when empty.
    """

    size = SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial 9x9 grid. If None, creates empty board.
                  The grid is copied, never aliased.
        """
        if grid is not None:
            self.grid = check_grid(grid)
        else:
            self.grid = np.zeros((SIZE, SIZE), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard()
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < 0 or value > SIZE:
            raise ValueError(f"Value must be 0-{SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = 0

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.grid[row, col] == 0

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row, box_col = box_origin(row, col)
        return self.grid[box_row:box_row + BOX_SIZE,
                         box_col:box_col + BOX_SIZE].flatten()

    def get_candidates(self, row: int, col: int) -> Set[int]:
        """
        Get all values that can be placed in an empty cell.

        Returns:
            Set of values not present in the cell's row, column or box.
            Returns empty set if cell is not empty.
        """
        if not self.is_empty(row, col):
            return set()

        used = set(self.get_row(row).tolist())
        used |= set(self.get_col(col).tolist())
        used |= set(self.get_box(row, col).tolist())

        return set(DIGITS) - used

    def get_peers(self, row: int, col: int) -> Set[Tuple[int, int]]:
        """Get all peer cell positions, excluding (row, col) itself."""
        return set(peers(row, col))

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.grid == 0)]

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        units = [self.get_row(i) for i in range(SIZE)]
        units += [self.get_col(j) for j in range(SIZE)]
        units += [self.get_box(r, c)
                  for r in range(0, SIZE, BOX_SIZE)
                  for c in range(0, SIZE, BOX_SIZE)]

        for unit in units:
            non_zero = unit[unit != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False

        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Convert board to an 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.grid.flatten().tolist())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: 81 characters, row-major. 0 or . for empty, 1-9 for values.
               Whitespace is ignored.
        """
        chars = ''.join(s.split())
        if len(chars) != SIZE * SIZE:
            raise ValueError(f"String length must be {SIZE * SIZE}, got {len(chars)}")

        values = []
        for c in chars:
            if c == '.':
                values.append(0)
            elif c.isdigit():
                values.append(int(c))
            else:
                raise ValueError(f"Invalid cell character: {c!r}")

        return cls(np.array(values, dtype=np.int32).reshape(SIZE, SIZE))

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        return cls(data)

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(SIZE):
                val = self.grid[i, j]
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
