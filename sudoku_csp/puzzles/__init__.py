"""Puzzle variants understood by the solvers."""

from .base import BasePuzzle
from .plain import PlainSudoku
from .killer import KillerSudoku

__all__ = ["BasePuzzle", "PlainSudoku", "KillerSudoku"]
