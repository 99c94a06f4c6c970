"""Base solver interface and run statistics."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple
import logging
import time
import tracemalloc

from ..core.board import Board, check_board
from ..core.rules import RuleSet
from ..core.validator import is_solved
from ..exceptions import SearchLimitExceeded

log = logging.getLogger(__name__)


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
    rules: str = ""
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
            "rules": self.rules,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for solvers."""

    name: str = "BaseSolver"

    def __init__(self, rules: RuleSet = RuleSet.CLASSIC):
        self.rules = rules
        self.stats = self._new_stats()

    def _new_stats(self) -> SolverStats:
        return SolverStats(algorithm=self.name, rules=self.rules.value)

    def solve(self, board: Sequence[int]) -> Tuple[Board, SolverStats]:
        """
        Solve a puzzle with timing and memory tracking.

        Args:
            board: The 81-cell puzzle. It is never modified.

        Returns:
            Tuple of (solution, stats). The solution is an empty list when the
            puzzle has no solution or the search was aborted.

        Raises:
            InvalidBoardError: If the puzzle is malformed.
        """
        check_board(board)
        self.stats = self._new_stats()

        tracemalloc.start()
        start_time = time.perf_counter()

        try:
            solution = self._solve(list(board))
        except SearchLimitExceeded as e:
            log.warning("%s: %s", self.name, e)
            self.stats.extra["error"] = str(e)
            solution = []
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self.stats.memory_bytes = peak

        self.stats.solved = bool(solution) and is_solved(solution, self.rules)
        return solution, self.stats

    @abstractmethod
    def _solve(self, board: List[int]) -> Board:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            board: A copy of the puzzle.

        Returns:
            The solved board, or an empty list if there is no solution.
        """
