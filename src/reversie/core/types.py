"""Cell coordinates and direction helpers.

Coordinates are ``(row, col)`` pairs with row 0 at the top of the board.
"""

from __future__ import annotations

from typing import NamedTuple, TypeAlias

Cell: TypeAlias = tuple[int, int]
Direction: TypeAlias = tuple[int, int]

# The eight compass offsets, clockwise from north.
DIRECTIONS: tuple[Direction, ...] = (
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
)

DEFAULT_SIZE = 8
MAX_SIZE = 254


class Score(NamedTuple):
    """Disc count per side."""

    white: int
    black: int

    def __str__(self) -> str:
        return f"White: {self.white} - Black: {self.black}"


def cell_name(cell: Cell) -> str:
    """Human-readable name, e.g. ``(0, 0)`` -> ``'a1'``, ``(2, 3)`` -> ``'d3'``."""
    row, col = cell
    return f"{chr(ord('a') + col)}{row + 1}"


def parse_cell(name: str) -> Cell:
    """Parse a cell name produced by :func:`cell_name`, e.g. ``'d3'``."""
    if len(name) < 2 or not name[0].isalpha() or not name[1:].isdigit():
        raise ValueError(f"Invalid cell name: {name!r}")
    col = ord(name[0].lower()) - ord("a")
    row = int(name[1:]) - 1
    if col < 0 or row < 0:
        raise ValueError(f"Invalid cell name: {name!r}")
    return row, col


def validate_size(size: int) -> int:
    """Return *size* if it is a usable board dimension, else raise ``ValueError``."""
    if size < 2 or size > MAX_SIZE or size % 2:
        raise ValueError(f"Board size must be an even number in [2, {MAX_SIZE}], got {size}")
    return size
