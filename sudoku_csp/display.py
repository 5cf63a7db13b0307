"""Text rendering of grids and killer region maps."""

from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING, Callable, Optional

from .core.board import box_size_for

if TYPE_CHECKING:
    from .puzzles.killer import KillerSudoku


def format_value(value: int) -> str:
    """Single character for a cell value: . for blank, 1-9, then A, B, ..."""
    if value == 0:
        return '.'
    if value <= 9:
        return str(value)
    return chr(ord('A') + value - 10)


def region_label(index: int) -> str:
    """Label of a 1-based region index: A-Z, then a-z, then the number itself."""
    if 1 <= index <= 26:
        return chr(ord('A') + index - 1)
    if 27 <= index <= 52:
        return chr(ord('a') + index - 27)
    return str(index)


def format_grid(
    grid: np.ndarray,
    box_size: Optional[int] = None,
    value_map: Optional[Callable[[int], str]] = None,
) -> str:
    """
    Render a grid with box rulings.

    Args:
        grid: N x N integer array.
        box_size: Box side; derived from N when omitted.
        value_map: Maps each cell value to its text (default format_value).
    """
    grid = np.asarray(grid)
    size = grid.shape[0]
    if box_size is None:
        box_size = box_size_for(size)
    if value_map is None:
        value_map = format_value

    lines = []
    horizontal_sep = '+' + (('-' * (box_size * 2 + 1)) + '+') * box_size

    for i in range(size):
        if i % box_size == 0:
            lines.append(horizontal_sep)

        row_str = '|'
        for j in range(size):
            row_str += f' {value_map(int(grid[i, j]))}'
            if (j + 1) % box_size == 0:
                row_str += ' |'

        lines.append(row_str)

    lines.append(horizontal_sep)
    return '\n'.join(lines)


def format_legend(puzzle: KillerSudoku, per_line: int = 5) -> str:
    """Required sum of every region, e.g. "Σ(A) =  6", per_line entries per line."""
    entries = [
        f"Σ({region_label(i)}) = {region.total:2d}"
        for i, region in enumerate(puzzle.regions, 1)
    ]
    lines = [
        "    ".join(entries[start:start + per_line])
        for start in range(0, len(entries), per_line)
    ]
    return '\n'.join(lines)


def format_regions(puzzle: KillerSudoku, per_line: int = 5) -> str:
    """Render the region map of a killer puzzle followed by its legend of sums."""
    region_map = format_grid(puzzle.index_grid, puzzle.box_size, region_label)
    return region_map + '\n\n' + format_legend(puzzle, per_line)
