"""Errors raised by the core domain layer."""

from __future__ import annotations


class OutOfRangeError(IndexError):
    """A row or column outside ``[0, size)`` was passed to a board accessor."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(f"Cell ({row}, {col}) is outside a {size}x{size} board")
        self.row = row
        self.col = col
        self.size = size


class DecodeError(ValueError):
    """A board snapshot could not be decoded."""
