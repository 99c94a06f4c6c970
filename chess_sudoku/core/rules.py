"""Candidate engine: which digits may still go in an empty cell."""

from __future__ import annotations
from enum import Enum
from functools import lru_cache
from typing import Callable, List, Sequence, Set, Tuple

from ..exceptions import InvalidBoardError, InvalidPointError
from .board import BOARD_CELLS, EMPTY
from .grid import (
    SIZE,
    Point,
    box_cells,
    column_cells,
    is_on_board,
    king_cells,
    knight_cells,
    row_cells,
)

DIGITS = frozenset(range(1, SIZE + 1))

# A peer provider maps a cell to the cells that constrain it.
PeerProvider = Callable[[Tuple[int, int]], List[Point]]

_CLASSIC_PEERS: Tuple[PeerProvider, ...] = (row_cells, column_cells, box_cells)
_CHESS_PEERS: Tuple[PeerProvider, ...] = (king_cells, knight_cells)


class RuleSet(Enum):
    """
    Which exclusion rules apply to a cell.

    CLASSIC is ordinary Sudoku (row, column, box). EXTENDED adds the
    anti-king and anti-knight constraints: no repeated digit a chess king's
    or knight's move away.
    """
    CLASSIC = "classic"
    EXTENDED = "extended"

    @property
    def peer_providers(self) -> Tuple[PeerProvider, ...]:
        if self is RuleSet.EXTENDED:
            return _CLASSIC_PEERS + _CHESS_PEERS
        return _CLASSIC_PEERS

    @classmethod
    def parse(cls, name: str) -> RuleSet:
        """Look a rule set up by name, case-insensitively."""
        try:
            return cls(name.lower())
        except ValueError:
            choices = ", ".join(r.value for r in cls)
            raise ValueError(f"Unknown rule set {name!r} (expected one of: {choices})") from None


def constraining_cells(point: Tuple[int, int], rules: RuleSet = RuleSet.CLASSIC) -> Set[Point]:
    """
    Get every cell that constrains ``point`` under ``rules``.

    Returns:
        Set of on-board points, excluding ``point`` itself.
    """
    if not is_on_board(point):
        raise InvalidPointError(f"Point {tuple(point)} is off the board")

    peers: Set[Point] = set()
    for provider in rules.peer_providers:
        peers.update(provider(point))
    peers.discard(Point(*point))
    return peers


@lru_cache(maxsize=None)
def _peer_indices(point: Point, rules: RuleSet) -> Tuple[int, ...]:
    return tuple(sorted(SIZE * p.row + p.column for p in constraining_cells(point, rules)))


def candidates(
    board: Sequence[int],
    point: Tuple[int, int],
    rules: RuleSet = RuleSet.CLASSIC,
) -> Set[int]:
    """
    Get the digits that may legally be placed at ``point``.

    The cell's own value is ignored, so the answer is the same as if the cell
    were empty. The board is not modified.

    Args:
        board: 81-cell board.
        point: (column, row) of the target cell.
        rules: Active rule set.

    Returns:
        Set of digits 1-9. Iterate with sorted() for a stable order.
    """
    if len(board) != BOARD_CELLS:
        raise InvalidBoardError(f"Board must have {BOARD_CELLS} cells, got {len(board)}")

    used = {board[i] for i in _peer_indices(Point(*point), rules)}
    used.discard(EMPTY)
    return set(DIGITS - used)
