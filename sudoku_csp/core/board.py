"""Grid representation shared by the plain and killer puzzles."""

from __future__ import annotations
from functools import lru_cache
import numpy as np
from typing import List, Tuple, Optional, Set

from .errors import GridShapeError


def box_size_for(size: int) -> int:
    """
    Return n such that n * n == size.

    Raises:
        GridShapeError: If size is not a positive perfect square.
    """
    box_size = int(round(np.sqrt(size))) if size > 0 else 0
    if size <= 0 or box_size * box_size != size:
        raise GridShapeError(f"Size must be a perfect square, got {size}")
    return box_size


@lru_cache(maxsize=None)
def peer_indices(size: int) -> Tuple[np.ndarray, ...]:
    """
    For every cell, in row-major order, the flat indices of the cells sharing
    its row, column or box. The cell itself is included.
    """
    box_size = box_size_for(size)
    index = np.arange(size * size).reshape(size, size)
    peers = []
    for row in range(size):
        for col in range(size):
            box_row = (row // box_size) * box_size
            box_col = (col // box_size) * box_size
            box = index[box_row:box_row + box_size, box_col:box_col + box_size]
            peers.append(np.unique(np.concatenate((index[row], index[:, col], box.ravel()))))
    return tuple(peers)


class SudokuBoard:
    """
    An N x N grid of integers in [0, N] where 0 means unknown.

    N must be a perfect square so that the grid tiles into N boxes of
    n x n cells (n = sqrt(N)). Standard Sudoku is 9x9 with 3x3 boxes;
    4x4, 16x16 and 25x25 boards work the same way.
    """

    def __init__(self, size: int = 9, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            size: Board side N. Must be a perfect square.
            grid: Optional initial grid. If None, creates an empty board.

        Raises:
            GridShapeError: If size is not a perfect square, the grid is not
                size x size, or a value lies outside [0, size].
        """
        self.size = size
        self.box_size = box_size_for(size)

        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (size, size):
                raise GridShapeError(
                    f"Grid shape must be ({size}, {size}), got {grid.shape}"
                )
            if grid.size and (grid.min() < 0 or grid.max() > size):
                raise GridShapeError(f"Grid values must be in 0-{size}")
            self.grid = grid.astype(np.int32)
        else:
            self.grid = np.zeros((size, size), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard(self.size)
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < 0 or value > self.size:
            raise ValueError(f"Value must be 0-{self.size}, got {value}")
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
        box_row = (row // self.box_size) * self.box_size
        box_col = (col // self.box_size) * self.box_size
        return self.grid[box_row:box_row + self.box_size,
                         box_col:box_col + self.box_size].flatten()

    def get_candidates(self, row: int, col: int) -> Set[int]:
        """
        Values 1..N not already used in the row, column or box of (row, col).

        The cell's own value, if any, is counted as used.
        """
        peers = peer_indices(self.size)[row * self.size + col]
        used = set(self.grid.reshape(-1)[peers].tolist())
        return set(range(1, self.size + 1)) - used

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions in row-major order."""
        rows, cols = np.nonzero(self.grid == 0)
        return list(zip(rows.tolist(), cols.tolist()))

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
        # Check all rows
        for i in range(self.size):
            row = self.get_row(i)
            non_zero = row[row != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False

        # Check all columns
        for j in range(self.size):
            col = self.get_col(j)
            non_zero = col[col != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False

        # Check all boxes
        for box_row in range(0, self.size, self.box_size):
            for box_col in range(0, self.size, self.box_size):
                box = self.get_box(box_row, box_col)
                non_zero = box[box != 0]
                if len(non_zero) != len(set(non_zero.tolist())):
                    return False

        return True

    def is_solved(self) -> bool:
        """Check if the board is completely filled without conflicts."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """
        Convert board to a compact string representation.
        Uses 0 for empty cells, 1-9 for values, A-Z for 10 and above.
        """
        chars = []
        for val in self.grid.flatten().tolist():
            if val <= 9:
                chars.append(str(val))
            else:
                chars.append(chr(ord('A') + val - 10))
        return ''.join(chars)

    @classmethod
    def from_string(cls, s: str, size: int = 9) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of length size*size with values.
               0 or . for empty, 1-9 for values, A-Z for 10 and above.
            size: Board size.
        """
        if len(s) != size * size:
            raise GridShapeError(f"String length must be {size*size}, got {len(s)}")

        grid = np.zeros((size, size), dtype=np.int32)
        for idx, c in enumerate(s):
            i, j = divmod(idx, size)
            if c == '0' or c == '.':
                grid[i, j] = 0
            elif c.isdigit():
                grid[i, j] = int(c)
            else:
                grid[i, j] = ord(c.upper()) - ord('A') + 10

        return cls(size, grid)

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        arr = np.array(data, dtype=np.int32)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise GridShapeError(f"Grid is not square, got shape {arr.shape}")
        return cls(arr.shape[0], arr)

    def __str__(self) -> str:
        """Pretty-print the board."""
        from ..display import format_grid
        return format_grid(self.grid, self.box_size)

    def __repr__(self) -> str:
        return f"SudokuBoard(size={self.size}, filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
