"""Coordinate arithmetic for the 9x9 board.

Cells are addressed either by a linear index (row-major, 0-80) or by a
``Point(column, row)``. Nothing here holds state; the offset tables are
read-only constants.
"""

from __future__ import annotations
from typing import Iterable, List, NamedTuple, Tuple

from ..exceptions import InvalidPointError

SIZE = 9
BOX_SIZE = 3


class Point(NamedTuple):
    """A (column, row) pair. May lie off the board while applying offsets."""

    column: int
    row: int

    def __add__(self, other: Tuple[int, int]) -> Point:  # type: ignore[override]
        return Point(self.column + other[0], self.row + other[1])


KING_OFFSETS: Tuple[Point, ...] = tuple(
    Point(dc, dr)
    for dc in (-1, 0, 1)
    for dr in (-1, 0, 1)
    if (dc, dr) != (0, 0)
)

KNIGHT_OFFSETS: Tuple[Point, ...] = (
    Point(-2, -1), Point(-2, 1), Point(2, -1), Point(2, 1),
    Point(-1, -2), Point(-1, 2), Point(1, -2), Point(1, 2),
)


def is_on_board(point: Tuple[int, int]) -> bool:
    """Check that both coordinates lie in [0, 8]."""
    column, row = point
    return 0 <= column < SIZE and 0 <= row < SIZE


def index(column: int, row: int) -> int:
    """
    Convert a (column, row) pair into a linear board index.

    Raises:
        InvalidPointError: If the pair is off the board.
    """
    if not is_on_board((column, row)):
        raise InvalidPointError(f"Point ({column}, {row}) is off the board")
    return SIZE * row + column


def from_index(i: int) -> Point:
    """Convert a linear board index back into a Point."""
    if not 0 <= i < SIZE * SIZE:
        raise InvalidPointError(f"Index {i} is off the board")
    return Point(i % SIZE, i // SIZE)


def box_origin(point: Tuple[int, int]) -> Point:
    """Top-left point of the 3x3 box holding ``point``."""
    column, row = point
    return Point((column // BOX_SIZE) * BOX_SIZE, (row // BOX_SIZE) * BOX_SIZE)


def row_cells(point: Tuple[int, int]) -> List[Point]:
    return [Point(column, point[1]) for column in range(SIZE)]


def column_cells(point: Tuple[int, int]) -> List[Point]:
    return [Point(point[0], row) for row in range(SIZE)]


def box_cells(point: Tuple[int, int]) -> List[Point]:
    origin = box_origin(point)
    return [
        origin + (dc, dr)
        for dr in range(BOX_SIZE)
        for dc in range(BOX_SIZE)
    ]


def offset_cells(point: Tuple[int, int], offsets: Iterable[Tuple[int, int]]) -> List[Point]:
    """
    Apply each offset to ``point``, keeping only the results on the board.

    Args:
        point: The origin cell.
        offsets: Deltas such as KING_OFFSETS or KNIGHT_OFFSETS.

    Returns:
        On-board points, in offset order.
    """
    origin = Point(*point)
    moved = (origin + delta for delta in offsets)
    return [p for p in moved if is_on_board(p)]


def king_cells(point: Tuple[int, int]) -> List[Point]:
    return offset_cells(point, KING_OFFSETS)


def knight_cells(point: Tuple[int, int]) -> List[Point]:
    return offset_cells(point, KNIGHT_OFFSETS)


def all_points() -> List[Point]:
    """Every cell in linear index order."""
    return [from_index(i) for i in range(SIZE * SIZE)]
