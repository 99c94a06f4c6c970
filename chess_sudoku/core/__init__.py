"""Core module: grid addressing, boards, the candidate engine and validation."""

from .board import NO_SOLUTION, check_board, is_complete, parse_board
from .grid import Point, box_origin, from_index, index, is_on_board
from .rules import RuleSet, candidates, constraining_cells
from .validator import find_conflicts, is_solved, is_valid_board, validate_solution

__all__ = [
    "NO_SOLUTION",
    "Point",
    "RuleSet",
    "box_origin",
    "candidates",
    "check_board",
    "constraining_cells",
    "find_conflicts",
    "from_index",
    "index",
    "is_complete",
    "is_on_board",
    "is_solved",
    "is_valid_board",
    "parse_board",
    "validate_solution",
]
