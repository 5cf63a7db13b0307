"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional
import logging
import time
import tracemalloc

from ..core.board import SudokuBoard
from ..core.errors import SolveCancelled, UnsolvableError
from ..puzzles.base import BasePuzzle

logger = logging.getLogger(__name__)


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Search metrics
    backtracks: int = 0
    nodes_explored: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """
    Abstract base class for solvers driving a BasePuzzle.

    Subclasses implement _search(), which fills the given board in place and
    reports whether it succeeded. The first solution found is returned; no
    attempt is made to look for others.
    """

    name: str = "BaseSolver"

    def __init__(
        self,
        should_stop: Optional[Callable[[], bool]] = None,
        track_memory: bool = False,
    ):
        """
        Args:
            should_stop: Optional callable checked before every candidate
                trial. When it returns True the search raises SolveCancelled.
            track_memory: Record peak memory use with tracemalloc. This slows
                the search down noticeably.
        """
        self.should_stop = should_stop
        self.track_memory = track_memory
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, puzzle: BasePuzzle) -> SudokuBoard:
        """
        Solve a copy of the puzzle's board, leaving the puzzle untouched.

        Returns:
            The solved board.

        Raises:
            UnsolvableError: If the puzzle has no solution.
            SolveCancelled: If should_stop requested a stop.
        """
        return self._run(puzzle, puzzle.copy_board())

    def solve_inplace(self, puzzle: BasePuzzle) -> SudokuBoard:
        """
        Solve the puzzle's own board in place and return it.

        If no solution exists the board is left as it was.
        """
        return self._run(puzzle, puzzle.board)

    def _run(self, puzzle: BasePuzzle, board: SudokuBoard) -> SudokuBoard:
        """Search with timing and optional memory tracking."""
        self.stats = SolverStats(algorithm=self.name)
        logger.debug(
            "%s: solving %s with %d blank cells",
            self.name, puzzle, board.count_empty(),
        )

        if self.track_memory:
            tracemalloc.start()
        start_time = time.perf_counter()

        try:
            if not board.is_valid():
                raise UnsolvableError("Puzzle clues conflict with each other")
            self.stats.solved = self._search(puzzle, board)
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            if self.track_memory:
                _, peak = tracemalloc.get_traced_memory()
                tracemalloc.stop()
                self.stats.memory_bytes = peak
            logger.debug("%s: %s", self.name, self.stats.to_dict())

        if not self.stats.solved:
            raise UnsolvableError("No solution found")
        return board

    def _check_cancelled(self) -> None:
        """Raise SolveCancelled if the cancellation hook asks for it."""
        if self.should_stop is not None and self.should_stop():
            raise SolveCancelled(f"{self.name} cancelled")

    @abstractmethod
    def _search(self, puzzle: BasePuzzle, board: SudokuBoard) -> bool:
        """
        Fill board in place.

        Args:
            puzzle: Supplies the candidate values for each cell.
            board: The board to fill (the puzzle's own or a copy).

        Returns:
            True if the board was completed, False if the search was exhausted.
            On False every cell the search filled is blank again.
        """
