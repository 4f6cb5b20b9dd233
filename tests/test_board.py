"""Unit tests for Sudoku board, validation and puzzle loading."""

import pytest
import numpy as np
from mrv_sudoku.core.board import SudokuBoard, peers
from mrv_sudoku.core.validator import (
    is_valid_placement, find_conflicts, validate_solution
)
from mrv_sudoku.core.puzzles import (
    CLASSIC_PUZZLE, classic_puzzle, load_puzzles, parse_puzzles
)

from conftest import TEST_PUZZLE, TEST_SOLUTION, CONTRADICTORY_PUZZLE


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_empty() == 81
        assert board.count_filled() == 0

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            SudokuBoard(np.zeros((16, 16), dtype=np.int32))

    def test_rejects_out_of_range_values(self):
        grid = np.zeros((9, 9), dtype=np.int32)
        grid[3, 3] = 10
        with pytest.raises(ValueError):
            SudokuBoard(grid)

    def test_rejects_non_integer_cells(self):
        """Fractional cells are refused rather than truncated."""
        grid = np.zeros((9, 9))
        grid[2, 5] = 1.7
        with pytest.raises(ValueError, match="integers"):
            SudokuBoard(grid)

        rows = [[0] * 9 for _ in range(9)]
        rows[0][0] = 2.5
        with pytest.raises(ValueError):
            SudokuBoard.from_2d_list(rows)

    def test_grid_is_copied(self):
        """The board never aliases the caller's array."""
        grid = np.zeros((9, 9), dtype=np.int32)
        board = SudokuBoard(grid)
        grid[0, 0] = 4
        assert board.is_empty(0, 0)

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        assert board.get(0, 0) == 5
        assert not board.is_empty(0, 0)

        board.clear(0, 0)
        assert board.is_empty(0, 0)

        with pytest.raises(ValueError):
            board.set(0, 0, 10)

    def test_get_candidates(self):
        """Test getting valid candidates for a cell."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        board.set(0, 1, 3)

        # Cell (0, 2) should not have 5 or 3 as candidates
        candidates = board.get_candidates(0, 2)
        assert candidates == {1, 2, 4, 6, 7, 8, 9}
        assert board.get_candidates(0, 0) == set()

    def test_peers(self):
        """Every cell has 20 distinct peers, never itself."""
        for row, col in [(0, 0), (4, 4), (8, 2)]:
            cells = list(peers(row, col))
            assert len(cells) == 20
            assert len(set(cells)) == 20
            assert (row, col) not in cells

        board = SudokuBoard()
        assert (1, 1) in board.get_peers(0, 0)
        assert (3, 3) not in board.get_peers(0, 0)

    def test_is_valid(self):
        """Test board validation."""
        board = SudokuBoard()
        assert board.is_valid()  # Empty board is valid

        board.set(0, 0, 5)
        board.set(0, 1, 5)  # Duplicate in row
        assert not board.is_valid()

    def test_box_conflict_is_invalid(self):
        board = SudokuBoard()
        board.set(0, 0, 7)
        board.set(2, 2, 7)
        assert not board.is_valid()

    def test_is_solved(self, solved_board, test_board):
        assert solved_board.is_solved()
        assert not test_board.is_solved()

    def test_from_string(self):
        """Test creating board from string."""
        puzzle_str = "0" * 80 + "9"  # 80 zeros and a 9 at the end
        board = SudokuBoard.from_string(puzzle_str)
        assert board.get(8, 8) == 9

    def test_from_string_dots_and_whitespace(self):
        board = SudokuBoard.from_string(TEST_PUZZLE.replace("0", "."))
        assert board.to_string() == TEST_PUZZLE

        spaced = "\n".join(TEST_PUZZLE[i:i + 9] for i in range(0, 81, 9))
        assert SudokuBoard.from_string(spaced).to_string() == TEST_PUZZLE

    def test_from_string_rejects_bad_input(self):
        with pytest.raises(ValueError):
            SudokuBoard.from_string("123")
        with pytest.raises(ValueError):
            SudokuBoard.from_string("x" * 81)

    def test_to_string(self):
        """Test converting board to string."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        s = board.to_string()
        assert len(s) == 81
        assert s[0] == '5'

    def test_from_2d_list(self):
        rows = [[int(ch) for ch in TEST_PUZZLE[i:i + 9]] for i in range(0, 81, 9)]
        board = SudokuBoard.from_2d_list(rows)
        assert board.to_string() == TEST_PUZZLE

    def test_render(self, test_board):
        """Rendering shows box separators and a placeholder for empty cells."""
        lines = str(test_board).splitlines()
        assert len(lines) == 13
        assert lines[0] == "+-------+-------+-------+"
        assert lines[1] == "| 5 3 . | . 7 . | . . . |"
        assert lines[4] == lines[0]

    def test_copy(self):
        """Test board copy."""
        board = SudokuBoard()
        board.set(4, 4, 7)
        copy = board.copy()

        assert copy.get(4, 4) == 7

        # Modify copy, original should be unchanged
        copy.set(4, 4, 8)
        assert board.get(4, 4) == 7

    def test_equality(self, test_board):
        assert test_board == SudokuBoard.from_string(TEST_PUZZLE)
        assert test_board != SudokuBoard()
        assert hash(test_board) == hash(SudokuBoard.from_string(TEST_PUZZLE))


class TestValidator:
    """Tests for validation utilities."""

    def test_is_valid_placement(self):
        """Test placement validation."""
        board = SudokuBoard()
        board.set(0, 0, 5)

        # Can't place 5 in same row
        assert not is_valid_placement(board, 0, 5, 5)

        # Can't place 5 in same column
        assert not is_valid_placement(board, 5, 0, 5)

        # Can't place 5 in same box
        assert not is_valid_placement(board, 1, 1, 5)

        # Can place different value
        assert is_valid_placement(board, 0, 5, 7)

        # Out of range
        assert not is_valid_placement(board, 0, 5, 0)

    def test_find_conflicts(self):
        board = SudokuBoard.from_string(CONTRADICTORY_PUZZLE)
        assert find_conflicts(board) == [((0, 0), (0, 1))]
        assert find_conflicts(SudokuBoard.from_string(TEST_PUZZLE)) == []

    def test_validate_solution(self, test_board, solved_board):
        assert validate_solution(test_board, solved_board)

        # A valid grid that ignores a clue is rejected
        relabelled = SudokuBoard.from_string(
            TEST_SOLUTION.translate(str.maketrans("12", "21"))
        )
        assert relabelled.is_solved()
        assert not validate_solution(test_board, relabelled)


class TestPuzzleLoader:
    """Tests for reading puzzles from text."""

    def test_classic_puzzle(self):
        board = classic_puzzle()
        assert board.to_string() == CLASSIC_PUZZLE
        assert board.count_filled() == 24
        assert board.is_valid()

    def test_one_puzzle_per_line(self):
        text = "# comment\n\n" + TEST_PUZZLE + "\n" + TEST_SOLUTION + "\n"
        puzzles = parse_puzzles(text)
        assert [p.to_string() for p in puzzles] == [TEST_PUZZLE, TEST_SOLUTION]

    def test_grid_block_from_pretty_print(self, test_board):
        """The board's own rendering can be read back."""
        puzzles = parse_puzzles(str(test_board) + "\n" + CLASSIC_PUZZLE)
        assert puzzles == [test_board, classic_puzzle()]

    def test_bad_line_is_reported(self):
        with pytest.raises(ValueError, match="<string>:2"):
            parse_puzzles(TEST_PUZZLE + "\n12345\n")

    def test_incomplete_grid_block(self):
        block = "\n".join(TEST_PUZZLE[i:i + 9] for i in range(0, 45, 9))
        with pytest.raises(ValueError, match="incomplete grid"):
            parse_puzzles(block)

    def test_load_puzzles(self, tmp_path):
        path = tmp_path / "puzzles.txt"
        path.write_text(TEST_PUZZLE + "\n" + CLASSIC_PUZZLE + "\n")
        puzzles = load_puzzles(str(path))
        assert len(puzzles) == 2
        assert puzzles[1] == classic_puzzle()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
