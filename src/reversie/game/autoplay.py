"""Helpers that let automated players drive a game."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from reversie.game.player import AIPlayer
from reversie.game.random_mover import RandomMover

if TYPE_CHECKING:
    from reversie.core.board import BoardView
    from reversie.core.enums import Color, GameResult
    from reversie.game.controller import GameController

_LOGGER = logging.getLogger(__name__)

Scheduler = Callable[[Callable[[], object]], None]


def make_random_player(
    controller: GameController,
    color: Color,
    mover: RandomMover | None = None,
    *,
    schedule: Scheduler | None = None,
    name: str = "Computer",
) -> AIPlayer:
    """Create an :class:`AIPlayer` that answers every request with a random move.

    Without *schedule* the move is submitted immediately, inside the
    controller's prompt. With an event loop, pass a scheduler (for example
    ``lambda fn: QTimer.singleShot(0, fn)``) so each move runs as its own
    event instead of nesting.
    """
    chooser = mover or RandomMover()

    def _on_request(board: BoardView) -> None:
        row, col = chooser.choose(board, color)

        def _submit() -> None:
            if not controller.submit_move(row, col, color):
                _LOGGER.debug("Stale automated move for %s dropped", color)

        if schedule is None:
            _submit()
        else:
            schedule(_submit)

    return AIPlayer(color, name, on_request_move=_on_request)


def play_out(
    controller: GameController,
    mover: RandomMover | None = None,
    *,
    max_moves: int | None = None,
) -> GameResult:
    """Play random moves for whichever side is to move until the game ends."""
    chooser = mover or RandomMover()
    played = 0
    while not controller.is_terminal():
        if max_moves is not None and played >= max_moves:
            break
        color = controller.side_to_move
        row, col = chooser.choose(controller.board, color)
        controller.submit_move(row, col, color)
        played += 1
    return controller.result
