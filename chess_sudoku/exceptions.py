"""Exceptions raised by the solver and its board utilities."""


class SudokuError(Exception):
    """Base class for all errors raised by this package."""


class InvalidBoardError(SudokuError, ValueError):
    """A board has the wrong length, holds values outside 0-9, or cannot be parsed."""


class InvalidPointError(SudokuError, ValueError):
    """A point lies outside the 9x9 board."""


class SearchLimitExceeded(SudokuError):
    """The backtracking search used up its step budget."""

    def __init__(self, max_steps: int):
        super().__init__(f"Search aborted after {max_steps} steps")
        self.max_steps = max_steps
