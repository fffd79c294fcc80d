"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from reversie.core.enums import Color
from reversie.game.interfaces import IPlayer

if TYPE_CHECKING:
    from reversie.core.board import BoardView


class _SeatedPlayer(IPlayer):
    """Colour and display name shared by every player kind."""

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str) -> None:
        self._color = color
        self._name = name

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, board: BoardView) -> None:
        pass

    def cancel(self) -> None:
        pass


class HumanPlayer(_SeatedPlayer):
    """Moves come from whoever calls ``GameController.submit_move``."""

    __slots__ = ()

    def __init__(self, color: Color, name: str = "") -> None:
        super().__init__(color, name or f"Player ({color})")

    @property
    def is_human(self) -> bool:
        return True


class AIPlayer(_SeatedPlayer):
    """Automated side: each prompt is forwarded to *on_request_move*.

    :func:`~reversie.game.autoplay.make_random_player` supplies a callback
    that picks a random legal move and submits it, immediately or through
    a scheduler.
    """

    __slots__ = ("_on_request_move",)

    def __init__(
        self,
        color: Color,
        name: str = "Computer",
        on_request_move: Callable[[BoardView], None] | None = None,
    ) -> None:
        super().__init__(color, name)
        self._on_request_move = on_request_move

    def request_move(self, board: BoardView) -> None:
        if self._on_request_move is not None:
            self._on_request_move(board)


class RemotePlayer(_SeatedPlayer):
    """The side played on the other end of a network session.

    Its moves arrive as board snapshots through
    ``GameController.install_remote_board``.
    """

    __slots__ = ()

    def __init__(self, color: Color, name: str = "") -> None:
        super().__init__(color, name or f"Remote ({color})")

    @property
    def is_remote(self) -> bool:
        return True
