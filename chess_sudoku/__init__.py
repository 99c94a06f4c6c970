"""Backtracking Sudoku solver with optional anti-king and anti-knight rules."""

from .core import (
    NO_SOLUTION,
    Point,
    RuleSet,
    candidates,
    find_conflicts,
    is_complete,
    is_valid_board,
    parse_board,
)
from .exceptions import InvalidBoardError, InvalidPointError, SearchLimitExceeded, SudokuError
from .solvers import BacktrackingSolver, SolverStats, solve

__version__ = "1.0.0"

__all__ = [
    "NO_SOLUTION",
    "BacktrackingSolver",
    "InvalidBoardError",
    "InvalidPointError",
    "Point",
    "RuleSet",
    "SearchLimitExceeded",
    "SolverStats",
    "SudokuError",
    "candidates",
    "find_conflicts",
    "is_complete",
    "is_valid_board",
    "parse_board",
    "solve",
]
