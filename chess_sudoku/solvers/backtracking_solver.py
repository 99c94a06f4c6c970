"""Depth-first backtracking search over board copies."""

from __future__ import annotations
from typing import List, Optional, Sequence
import logging

from .base_solver import BaseSolver
from ..core.board import BOARD_CELLS, EMPTY, Board, check_board, is_complete
from ..core.grid import from_index
from ..core.rules import RuleSet, candidates
from ..core.validator import is_valid_board
from ..exceptions import SearchLimitExceeded

log = logging.getLogger(__name__)

# Dead ends at or above this depth are logged; deeper ones are too frequent.
_LOG_DEPTH = 3


class BacktrackingSolver(BaseSolver):
    """
    Recursive backtracking solver.

    Scans cells in index order and branches on the first empty one, trying
    its candidates in ascending order. Each attempt places the digit on a
    fresh copy of the board, so sibling branches never share state. The
    first complete board found wins.

    If every candidate of that first empty cell fails, the branch fails:
    the search never skips past an unsolvable cell.
    """

    name = "Backtracking"

    def __init__(self, rules: RuleSet = RuleSet.CLASSIC, max_steps: Optional[int] = None):
        """
        Initialize the solver.

        Args:
            rules: Rule set used to compute candidates.
            max_steps: Abort with SearchLimitExceeded after this many recursive
                calls. None searches without limit.
        """
        super().__init__(rules)
        if max_steps is not None and max_steps < 1:
            raise ValueError(f"max_steps must be positive, got {max_steps}")
        self.max_steps = max_steps

    def _solve(self, board: List[int]) -> Board:
        if not is_valid_board(board, self.rules):
            log.debug("Clues conflict under %s rules", self.rules.value)
            return []

        log.debug("Searching with %s rules, %d empty cells",
                  self.rules.value, board.count(EMPTY))
        return self._search(board, 0, 0)

    def _search(self, board: List[int], start_index: int, depth: int) -> Board:
        self.stats.iterations += 1
        if self.max_steps is not None and self.stats.iterations > self.max_steps:
            raise SearchLimitExceeded(self.max_steps)

        if is_complete(board):
            return board

        for i in range(start_index, min(len(board), BOARD_CELLS)):
            if board[i] != EMPTY:
                continue

            self.stats.nodes_explored += 1
            for digit in sorted(candidates(board, from_index(i), self.rules)):
                attempt = list(board)
                attempt[i] = digit

                result = self._search(attempt, i + 1, depth + 1)
                if is_complete(result):
                    return result
                self.stats.backtracks += 1

            if depth < _LOG_DEPTH:
                log.debug("Dead end at cell %d (depth %d)", i, depth)
            return []

        # Only reachable when the board is not 81 cells long.
        return []


def solve(
    board: Sequence[int],
    rules: RuleSet = RuleSet.CLASSIC,
    max_steps: Optional[int] = None,
) -> Board:
    """
    Solve a puzzle.

    Args:
        board: 81-cell puzzle, 0 for empty cells. Not modified.
        rules: Rule set the solution must satisfy.
        max_steps: Optional bound on recursive calls.

    Returns:
        The complete board, or an empty list if the puzzle has no solution.

    Raises:
        InvalidBoardError: If the board is malformed.
        SearchLimitExceeded: If max_steps was reached.
    """
    check_board(board)
    solver = BacktrackingSolver(rules=rules, max_steps=max_steps)
    return solver._solve(list(board))
