"""Reading and writing puzzle files.

Plain puzzles hold one grid row per line, `.` (or `0`) for a blank:

    .6...15..
    ....5..3.
    ...

Killer puzzles start with the board side N, followed by one region per line:
its required sum, then the coordinates `row,col` of its cells. Coordinates are
one-based unless `zero_based=True` is given:

    9
    6 1,1 1,2 2,2
    27 1,3 1,4 2,4 3,4 4,4
    ...
"""

from __future__ import annotations
import logging
import numpy as np
from typing import List, Optional, Tuple, Union

from .core.board import SudokuBoard, box_size_for
from .core.combinatorics import SubsetCache
from .core.errors import GridShapeError, PuzzleFormatError
from .core.regions import Region
from .core.validator import as_grid
from .display import format_value
from .puzzles.killer import KillerSudoku
from .puzzles.plain import PlainSudoku

logger = logging.getLogger(__name__)


def _parse_cell(c: str) -> int:
    """Value of a single puzzle character."""
    if c == '.' or c == '0':
        return 0
    if c.isascii() and c.isdigit():
        return int(c)
    if c.isalpha() and c.isascii():
        return ord(c.upper()) - ord('A') + 10
    raise PuzzleFormatError(f"Invalid cell character {c!r}")


def parse_plain(text: str) -> PlainSudoku:
    """
    Build a plain puzzle from its text form.

    Raises:
        GridShapeError: If the grid is not square.
        PuzzleFormatError: On an unknown cell character or empty input.
    """
    lines = [line.strip() for line in text.splitlines()]
    while lines and not lines[-1]:
        lines.pop()
    if not lines:
        raise PuzzleFormatError("Puzzle is empty")

    size = len(lines[0])
    if len(lines) != size or any(len(line) != size for line in lines):
        raise GridShapeError(
            f"Grid is not square: {len(lines)} rows of lengths "
            f"{sorted(set(len(line) for line in lines))}"
        )

    grid = np.array([[_parse_cell(c) for c in line] for line in lines], dtype=np.int32)
    return PlainSudoku(SudokuBoard(size, grid))


def _parse_coordinate(token: str, size: int, offset: int, lineno: int) -> Tuple[int, int]:
    """Zero-based (row, col) of a `row,col` token."""
    parts = token.split(',')
    try:
        row, col = (int(p) + offset - 1 for p in parts)
    except ValueError:
        raise PuzzleFormatError(f"Line {lineno}: invalid coordinate {token!r}") from None
    if not (0 <= row < size and 0 <= col < size):
        raise PuzzleFormatError(f"Line {lineno}: coordinate {token!r} is outside the board")
    return row, col


def parse_killer(
    text: str,
    zero_based: bool = False,
    cache: Optional[SubsetCache] = None,
) -> KillerSudoku:
    """
    Build a killer puzzle from its text form.

    Args:
        text: First line N, then one `sum row,col row,col ...` line per region.
        zero_based: Coordinates in text are zero-based instead of one-based.
        cache: Subset cache for the regions (process-wide cache by default).

    Raises:
        PuzzleFormatError: On malformed lines or out-of-range coordinates.
        GridShapeError: If N is not a perfect square.
        PartitionError: If the regions overlap or leave cells uncovered.
    """
    lines = [(n, line.split()) for n, line in enumerate(text.splitlines(), 1)]
    lines = [(n, tokens) for n, tokens in lines if tokens]
    if not lines:
        raise PuzzleFormatError("Puzzle is empty")

    (lineno, header), body = lines[0], lines[1:]
    if len(header) != 1 or not header[0].isdigit():
        raise PuzzleFormatError(f"Line {lineno}: expected the board size, got {' '.join(header)!r}")
    size = int(header[0])
    box_size_for(size)

    offset = 1 if zero_based else 0
    regions: List[Region] = []
    for lineno, tokens in body:
        try:
            total = int(tokens[0])
        except ValueError:
            raise PuzzleFormatError(f"Line {lineno}: invalid region sum {tokens[0]!r}") from None
        cells = [_parse_coordinate(token, size, offset, lineno) for token in tokens[1:]]
        regions.append(Region.from_cells(cells, total, size, cache))

    return KillerSudoku(regions)


def read_plain_file(path: str) -> PlainSudoku:
    """Load a plain puzzle from a file."""
    with open(path, "r") as f:
        puzzle = parse_plain(f.read())
    logger.debug("Loaded plain %dx%d puzzle from %s", puzzle.size, puzzle.size, path)
    return puzzle


def read_killer_file(
    path: str,
    zero_based: bool = False,
    cache: Optional[SubsetCache] = None,
) -> KillerSudoku:
    """Load a killer puzzle from a file. See parse_killer()."""
    with open(path, "r") as f:
        puzzle = parse_killer(f.read(), zero_based=zero_based, cache=cache)
    logger.debug(
        "Loaded killer %dx%d puzzle with %d regions from %s",
        puzzle.size, puzzle.size, len(puzzle.regions), path,
    )
    return puzzle


def read_puzzle_file(
    path: str,
    killer: bool = False,
    zero_based: bool = False,
) -> Union[PlainSudoku, KillerSudoku]:
    """Load a plain or killer puzzle from a file."""
    if killer:
        return read_killer_file(path, zero_based=zero_based)
    return read_plain_file(path)


def format_plain(board: Union[PlainSudoku, SudokuBoard, np.ndarray]) -> str:
    """Text form of a grid as read by parse_plain()."""
    grid = as_grid(getattr(board, "board", board))
    return '\n'.join(
        ''.join(format_value(v) for v in row) for row in grid.tolist()
    ) + '\n'


def format_killer(puzzle: KillerSudoku, zero_based: bool = False) -> str:
    """Text form of a killer puzzle as read by parse_killer()."""
    base = 0 if zero_based else 1
    lines = [str(puzzle.size)]
    for region in puzzle.regions:
        coordinates = ' '.join(f"{row + base},{col + base}" for row, col in region.cells)
        lines.append(f"{region.total} {coordinates}")
    return '\n'.join(lines) + '\n'


def write_plain_file(path: str, board: Union[PlainSudoku, SudokuBoard, np.ndarray]) -> None:
    """Write a plain puzzle, or any grid, in the format of read_plain_file()."""
    with open(path, "w") as f:
        f.write(format_plain(board))


def write_killer_file(path: str, puzzle: KillerSudoku, zero_based: bool = False) -> None:
    """Write a killer puzzle in the format of read_killer_file()."""
    with open(path, "w") as f:
        f.write(format_killer(puzzle, zero_based=zero_based))
