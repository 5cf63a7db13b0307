"""Command-line interface for the plain and killer sudoku solvers."""

import argparse
import logging
import os
import sys
from typing import List, Optional

from tqdm import tqdm

from .core.errors import SudokuError, UnsolvableError
from .display import format_regions
from .fileio import read_puzzle_file, write_plain_file
from .puzzles import KillerSudoku
from .solvers import SOLVERS, get_solver

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the sudoku-csp command."""
    parser = argparse.ArgumentParser(
        prog="sudoku-csp",
        description="Plain & Killer Sudoku Backtracking Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a plain puzzle ('.' for blanks, one row per line)
  python -m sudoku_csp solve puzzles/sudoku1.txt

  # Solve a killer puzzle given with zero-based coordinates
  python -m sudoku_csp solve --killer --zero-based puzzles/killer1.txt

  # Show the region map and sums of a killer puzzle
  python -m sudoku_csp show --killer puzzles/killer1.txt
        """
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve one or more puzzle files")
    solve_parser.add_argument("files", nargs="+", help="Puzzle files")
    _add_format_arguments(solve_parser)
    solve_parser.add_argument(
        "--solver", "-s",
        choices=sorted(SOLVERS) + ["auto"],
        default="auto",
        help="Search implementation (default: auto)"
    )
    solve_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Directory to write solutions to (same file names)"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Show command
    show_parser = subparsers.add_parser("show", help="Display a puzzle file")
    show_parser.add_argument("file", help="Puzzle file")
    _add_format_arguments(show_parser)

    return parser


def _add_format_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--killer", "-k", action="store_true",
        help="Files are killer puzzles (size line, then 'sum r,c r,c ...' per region)"
    )
    parser.add_argument(
        "--zero-based", action="store_true",
        help="Killer coordinates are zero-based"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        status = cmd_solve(args)
    else:
        status = cmd_show(args)

    if status:
        sys.exit(status)
    return status


def _describe(puzzle) -> str:
    """Rendering of a puzzle for display: region map for killer, grid otherwise."""
    if isinstance(puzzle, KillerSudoku):
        return format_regions(puzzle)
    return str(puzzle.board)


def cmd_show(args) -> int:
    """Handle the show command."""
    try:
        puzzle = read_puzzle_file(args.file, killer=args.killer, zero_based=args.zero_based)
    except (OSError, SudokuError) as e:
        print(f"Error parsing puzzle: {e}")
        return 1

    print(f"{puzzle.name} {puzzle.size}x{puzzle.size} puzzle ({puzzle.board.count_filled()} clues)")
    print(_describe(puzzle))
    return 0


def cmd_solve(args) -> int:
    """Handle the solve command."""
    failures = 0

    if args.output:
        os.makedirs(args.output, exist_ok=True)

    for path in tqdm(args.files, desc="Solving", disable=len(args.files) < 2):
        tqdm.write(f"--- {path} ---")
        try:
            puzzle = read_puzzle_file(path, killer=args.killer, zero_based=args.zero_based)
        except (OSError, SudokuError) as e:
            tqdm.write(f"Error parsing puzzle: {e}")
            failures += 1
            continue

        tqdm.write("Input puzzle:")
        tqdm.write(_describe(puzzle))
        tqdm.write("")

        solver = get_solver(args.solver, puzzle.board)
        tqdm.write(f"Solving with {solver.name}...")
        try:
            solution = solver.solve(puzzle)
        except UnsolvableError as e:
            logger.info("%s: %s", path, e)
            tqdm.write(f"✗ Failed to solve: {e}")
            if args.verbose:
                tqdm.write(f"  Time: {solver.stats.time_seconds:.4f}s")
                tqdm.write(f"  Iterations: {solver.stats.iterations:,}")
            failures += 1
            tqdm.write("")
            continue

        tqdm.write(f"✓ Solved in {solver.stats.time_seconds:.4f}s")
        if args.verbose:
            tqdm.write(f"  Iterations: {solver.stats.iterations:,}")
            tqdm.write(f"  Backtracks: {solver.stats.backtracks:,}")
            tqdm.write(f"  Nodes explored: {solver.stats.nodes_explored:,}")
        tqdm.write(str(solution))
        tqdm.write("")

        if args.output:
            out_path = os.path.join(args.output, os.path.basename(path))
            write_plain_file(out_path, solution)
            tqdm.write(f"Solution saved to {out_path}")

    return 1 if failures else 0


if __name__ == "__main__":
    main()
