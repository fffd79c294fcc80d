"""Uniform-random move selection for unattended players."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from reversie.core.rules import Rules

if TYPE_CHECKING:
    from reversie.core.board import Board, BoardView
    from reversie.core.enums import Color
    from reversie.core.types import Cell


class NoLegalMoveError(LookupError):
    """The requested side has no legal move and must pass."""


def choose_random_legal_move(
    board: Board | BoardView,
    color: Color,
    rng: random.Random | None = None,
) -> Cell:
    """Pick one of *color*'s legal moves uniformly at random.

    Legal moves are enumerated first, so selection always terminates.
    """
    moves = Rules.legal_moves(board, color)
    if not moves:
        raise NoLegalMoveError(f"{color} has no legal move")
    return (rng or random).choice(moves)


class RandomMover:
    """Seedable random move chooser.

    Args:
        seed: Optional seed for reproducible games.
    """

    __slots__ = ("_rng",)

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def choose(self, board: Board | BoardView, color: Color) -> Cell:
        return choose_random_legal_move(board, color, self._rng)
