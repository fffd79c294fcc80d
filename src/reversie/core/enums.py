"""Core enumerations for the Reversi domain."""

from __future__ import annotations

from enum import IntEnum


class CellState(IntEnum):
    """Content of a single board cell.

    The integer values double as the snapshot byte values.
    """

    EMPTY = 0
    WHITE = 1
    BLACK = 2


class Color(IntEnum):
    """Side color."""

    WHITE = 1
    BLACK = 2

    @property
    def opposite(self) -> Color:
        return Color(3 - self.value)

    @property
    def cell(self) -> CellState:
        """Cell state occupied by a disc of this color."""
        return CellState(self.value)

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
