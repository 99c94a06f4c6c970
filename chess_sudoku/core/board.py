"""Board representation: a flat, row-major list of 81 digits (0 means empty)."""

from __future__ import annotations
from typing import List, Sequence

import numpy as np

from ..exceptions import InvalidBoardError
from .grid import BOX_SIZE, SIZE

Board = List[int]

EMPTY = 0
BOARD_CELLS = SIZE * SIZE

# Returned by the solver when a puzzle has no solution. Compare by length,
# never by identity: the solver hands out a fresh empty list each time.
NO_SOLUTION: tuple = ()

_SEPARATORS = set(" \t\r\n|-+")
_DIGITS = "0123456789"


def is_complete(board: Sequence[int]) -> bool:
    """A board is complete when it holds exactly 81 cells and none is empty."""
    if len(board) != BOARD_CELLS:
        return False
    return all(cell != EMPTY for cell in board)


def is_no_solution(board: Sequence[int]) -> bool:
    return len(board) == 0


def check_board(board: Sequence[int]) -> None:
    """
    Fail fast on malformed input.

    Raises:
        InvalidBoardError: If the board is not 81 cells long or holds a value
            that is not an integer in 0-9.
    """
    if len(board) != BOARD_CELLS:
        raise InvalidBoardError(
            f"Board must have {BOARD_CELLS} cells, got {len(board)}"
        )
    for i, value in enumerate(board):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidBoardError(f"Cell {i} holds non-integer value {value!r}")
        if value < 0 or value > SIZE:
            raise InvalidBoardError(f"Cell {i} must be 0-{SIZE}, got {value}")


def empty_board() -> Board:
    return [EMPTY] * BOARD_CELLS


def count_empty(board: Sequence[int]) -> int:
    return sum(1 for cell in board if cell == EMPTY)


def parse_board(text: str) -> Board:
    """
    Parse a textual board.

    Accepts 81 digits with '0' or '.' for empty cells. Whitespace and the
    grid-drawing characters '|', '-' and '+' are ignored, so both a compact
    one-line puzzle and the row dump from format_board are understood.

    Raises:
        InvalidBoardError: On unexpected characters or the wrong cell count.
    """
    board = []
    for c in text:
        if c in _SEPARATORS:
            continue
        if c == '.':
            board.append(EMPTY)
        elif c in _DIGITS:
            board.append(int(c))
        else:
            raise InvalidBoardError(f"Unexpected character {c!r} in puzzle")

    if len(board) != BOARD_CELLS:
        raise InvalidBoardError(
            f"Puzzle must have {BOARD_CELLS} cells, got {len(board)}"
        )
    return board


def to_string(board: Sequence[int]) -> str:
    """Compact one-line form, '0' for empty cells."""
    return ''.join(str(int(cell)) for cell in board)


def format_board(board: Sequence[int]) -> str:
    """Nine lines of space-separated digits."""
    lines = []
    for start in range(0, len(board), SIZE):
        lines.append(' '.join(str(int(cell)) for cell in board[start:start + SIZE]))
    return '\n'.join(lines)


def pretty_board(board: Sequence[int]) -> str:
    """Boxed grid with '.' for empty cells."""
    check_board(board)
    lines = []
    horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

    for row in range(SIZE):
        if row % BOX_SIZE == 0:
            lines.append(horizontal_sep)

        row_str = '|'
        for column in range(SIZE):
            val = board[row * SIZE + column]
            row_str += ' .' if val == EMPTY else f' {val}'
            if (column + 1) % BOX_SIZE == 0:
                row_str += ' |'

        lines.append(row_str)

    lines.append(horizontal_sep)
    return '\n'.join(lines)


def to_grid(board: Sequence[int]) -> np.ndarray:
    """Reshape a board into a (9, 9) array indexed [row, column]."""
    check_board(board)
    return np.asarray(board, dtype=np.int32).reshape(SIZE, SIZE)


def from_grid(grid: np.ndarray) -> Board:
    if grid.shape != (SIZE, SIZE):
        raise InvalidBoardError(f"Grid shape must be ({SIZE}, {SIZE}), got {grid.shape}")
    return [int(v) for v in grid.flatten()]
