"""Tests for the plain and killer constraint models."""

import pytest
import numpy as np
from sudoku_csp.core.board import SudokuBoard
from sudoku_csp.core.errors import GridShapeError, PartitionError
from sudoku_csp.core.regions import Region
from sudoku_csp.puzzles import BasePuzzle, KillerSudoku, PlainSudoku

SOLUTION_4X4 = np.array([
    [1, 2, 3, 4],
    [3, 4, 1, 2],
    [2, 1, 4, 3],
    [4, 3, 2, 1],
])
LAYOUT_4X4 = np.array([
    [1, 2, 2, 3],
    [1, 4, 4, 3],
    [5, 6, 6, 7],
    [5, 8, 8, 7],
])
TOTALS_4X4 = [4, 5, 6, 5, 6, 5, 4, 5]


class TestPlainSudoku:
    """Tests for PlainSudoku."""

    def test_dimensions(self):
        """N and n come from the board."""
        puzzle = PlainSudoku(SudokuBoard(size=16))
        assert puzzle.size == 16
        assert puzzle.box_size == 4
        assert isinstance(puzzle, BasePuzzle)

    def test_from_list(self):
        """A 2D list is turned into a board."""
        puzzle = PlainSudoku([[1, 0, 0, 0], [0] * 4, [0] * 4, [0] * 4])
        assert puzzle.board.get(0, 0) == 1

    def test_board_is_copied(self):
        """The puzzle does not share the board it was given."""
        board = SudokuBoard(size=4)
        puzzle = PlainSudoku(board)
        board.set(0, 0, 1)
        assert puzzle.board.get(0, 0) == 0
        assert puzzle.board is not board

    def test_not_square(self):
        """A non-square grid fails construction."""
        with pytest.raises(GridShapeError):
            PlainSudoku([[0] * 4] * 3)

    def test_available_values(self):
        """Candidates exclude the row, column and box of the cell."""
        puzzle = PlainSudoku([
            [1, 0, 0, 0],
            [0, 0, 0, 2],
            [0, 3, 0, 0],
            [0, 0, 0, 0],
        ])
        # row 0 has 1, column 1 has 3, box 0 has 1
        assert puzzle.available_values(puzzle.board, 0, 1) == {2, 4}
        # row 1 has 2, column 0 has 1, box 0 has 1
        assert puzzle.available_values(puzzle.board, 1, 0) == {3, 4}

    def test_available_values_uses_given_board(self):
        """The working board passed in is consulted, not the puzzle's own."""
        puzzle = PlainSudoku(SudokuBoard(size=4))
        work = puzzle.copy_board()
        work.set(0, 0, 4)
        assert 4 not in puzzle.available_values(work, 0, 3)
        assert 4 in puzzle.available_values(puzzle.board, 0, 3)

    def test_is_solution(self):
        """A full valid grid keeping the clues is a solution."""
        clues = SOLUTION_4X4.copy()
        clues[0, :2] = 0
        puzzle = PlainSudoku(clues)
        assert puzzle.is_solution(SOLUTION_4X4)
        assert puzzle.is_solution(SudokuBoard(4, SOLUTION_4X4))


class TestKillerSudoku:
    """Tests for KillerSudoku."""

    def make_puzzle(self):
        return KillerSudoku.from_index_grid(LAYOUT_4X4, TOTALS_4X4)

    def test_board_starts_blank(self):
        """The killer board has no clues."""
        puzzle = self.make_puzzle()
        assert puzzle.size == 4
        assert puzzle.box_size == 2
        assert puzzle.board.count_filled() == 0
        assert len(puzzle.regions) == 8

    def test_from_regions(self):
        """A list of regions is turned into a partition."""
        regions = [
            Region(LAYOUT_4X4 == i, total)
            for i, total in enumerate(TOTALS_4X4, 1)
        ]
        puzzle = KillerSudoku(regions)
        np.testing.assert_array_equal(puzzle.index_grid, LAYOUT_4X4)

    def test_invalid_partition(self):
        """A puzzle cannot be built from regions that miss a cell."""
        layout = LAYOUT_4X4.copy()
        layout[0, 0] = 0
        with pytest.raises(PartitionError):
            KillerSudoku.from_index_grid(layout, TOTALS_4X4)

    def test_region_narrows_candidates(self):
        """Region sums remove values the plain rules would allow."""
        puzzle = self.make_puzzle()
        board = puzzle.copy_board()
        # region 1 (cells (0,0), (1,0)) sums to 4: only {1, 3}
        assert puzzle.available_values(board, 0, 0) == {1, 3}
        # region 3 (cells (0,3), (1,3)) sums to 6: only {2, 4}
        assert puzzle.available_values(board, 0, 3) == {2, 4}

    def test_placed_value_in_region(self):
        """Once part of a region is placed, the rest follows from the sum."""
        puzzle = self.make_puzzle()
        board = puzzle.copy_board()
        board.set(0, 0, 3)
        assert puzzle.available_values(board, 1, 0) == {1}

    def test_plain_conflict_short_circuits(self):
        """An empty plain set stays empty."""
        puzzle = self.make_puzzle()
        board = puzzle.copy_board()
        board.set(0, 1, 1)
        board.set(0, 2, 2)
        board.set(0, 3, 3)
        board.set(1, 0, 4)
        assert puzzle.available_values(board, 0, 0) == set()

    def test_is_solution(self):
        """The generating grid solves the puzzle."""
        puzzle = self.make_puzzle()
        assert puzzle.is_solution(SOLUTION_4X4)

    def test_is_solution_checks_sums(self):
        """A valid plain grid with the wrong region sums is rejected."""
        puzzle = self.make_puzzle()
        other = np.array([
            [2, 1, 4, 3],
            [4, 3, 2, 1],
            [1, 2, 3, 4],
            [3, 4, 1, 2],
        ])
        assert PlainSudoku(SudokuBoard(4)).is_solution(other)
        assert not puzzle.is_solution(other)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
