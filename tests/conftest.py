"""Shared puzzle fixtures."""

import pytest

from chess_sudoku.core.board import parse_board

# A known solvable puzzle (medium difficulty)
TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

# The solution to the test puzzle
TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# A grid that also has no repeated digit a king's or knight's move away
CHESS_SOLUTION = (
    "483726159"
    "726159483"
    "159483726"
    "837261594"
    "261594837"
    "594837261"
    "372615948"
    "615948372"
    "948372615"
)


@pytest.fixture
def puzzle():
    return parse_board(TEST_PUZZLE)


@pytest.fixture
def solution():
    return parse_board(TEST_SOLUTION)


@pytest.fixture
def chess_solution():
    return parse_board(CHESS_SOLUTION)


@pytest.fixture
def chess_puzzle(chess_solution):
    """CHESS_SOLUTION with one cell blanked in every row."""
    board = list(chess_solution)
    for row in range(9):
        board[row * 9 + (row * 4) % 9] = 0
    return board
