"""Core domain layer - pure Reversi logic with zero external dependencies.

Quick start::

    from reversie.core import Board, Color, Rules, cell_name

    board = Board.initial()
    for row, col in Rules.legal_moves(board, Color.WHITE):
        print(cell_name((row, col)))
"""

from reversie.core.board import Board, BoardView
from reversie.core.enums import CellState, Color, GameResult
from reversie.core.errors import DecodeError, OutOfRangeError
from reversie.core.rules import Rules
from reversie.core.snapshot import decode_board, encode_board
from reversie.core.types import (
    DEFAULT_SIZE,
    DIRECTIONS,
    Cell,
    Direction,
    Score,
    cell_name,
    parse_cell,
)

__all__ = [
    # Enums
    "CellState",
    "Color",
    "GameResult",
    # Types / helpers
    "Cell",
    "DEFAULT_SIZE",
    "DIRECTIONS",
    "Direction",
    "Score",
    "cell_name",
    "parse_cell",
    # Domain objects
    "Board",
    "BoardView",
    "Rules",
    # Errors
    "DecodeError",
    "OutOfRangeError",
    # Snapshots
    "decode_board",
    "encode_board",
]
