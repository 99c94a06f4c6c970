"""Validation utilities for boards and solutions."""

from __future__ import annotations
from typing import List, Sequence, Tuple

import numpy as np

from .board import EMPTY, check_board, is_complete, to_grid
from .grid import BOX_SIZE, SIZE, Point, from_index
from .rules import RuleSet, constraining_cells


def _has_duplicates(values: np.ndarray) -> bool:
    non_zero = values[values != EMPTY]
    return len(non_zero) != len(np.unique(non_zero))


def _units_valid(grid: np.ndarray) -> bool:
    for i in range(SIZE):
        if _has_duplicates(grid[i, :]) or _has_duplicates(grid[:, i]):
            return False

    for box_row in range(0, SIZE, BOX_SIZE):
        for box_col in range(0, SIZE, BOX_SIZE):
            box = grid[box_row:box_row + BOX_SIZE, box_col:box_col + BOX_SIZE]
            if _has_duplicates(box.flatten()):
                return False

    return True


def find_conflicts(board: Sequence[int], rules: RuleSet = RuleSet.CLASSIC) -> List[Tuple[Point, Point]]:
    """
    Find every pair of filled cells holding the same digit while constraining
    each other under ``rules``.

    Returns:
        List of (first, second) point pairs, first before second in index
        order, each pair reported once.
    """
    check_board(board)
    conflicts = []
    for i, value in enumerate(board):
        if value == EMPTY:
            continue
        point = from_index(i)
        for peer in sorted(constraining_cells(point, rules), key=lambda p: (p.row, p.column)):
            j = SIZE * peer.row + peer.column
            if j > i and board[j] == value:
                conflicts.append((point, peer))
    return conflicts


def is_valid_board(board: Sequence[int], rules: RuleSet = RuleSet.CLASSIC) -> bool:
    """
    Check that no constraint is violated. Empty cells are ignored, so a
    partial board can be valid.
    """
    if not _units_valid(to_grid(board)):
        return False
    return not find_conflicts(board, rules)


def is_solved(board: Sequence[int], rules: RuleSet = RuleSet.CLASSIC) -> bool:
    """Check that the board is completely and correctly filled."""
    return is_complete(board) and is_valid_board(board, rules)


def validate_solution(
    puzzle: Sequence[int],
    solution: Sequence[int],
    rules: RuleSet = RuleSet.CLASSIC,
) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.
        rules: Rule set the solution must satisfy.

    Returns:
        True if the solution is complete, valid and keeps every clue.
    """
    if len(puzzle) != len(solution) or not is_complete(solution):
        return False

    for clue, value in zip(puzzle, solution):
        if clue != EMPTY and clue != value:
            return False

    return is_valid_board(solution, rules)
