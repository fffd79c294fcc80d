"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the high-level GameController depends on
these ABCs, not on concrete player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from reversie.core.enums import Color

if TYPE_CHECKING:
    from reversie.core.board import Board, BoardView


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # automated player is choosing
    GAME_OVER = auto()


class IllegalMove(IntEnum):
    """Why a submitted move was rejected."""

    GAME_OVER = auto()
    NOT_YOUR_TURN = auto()
    NOT_LEGAL = auto()


class ChangeOrigin(IntEnum):
    """Where a board change came from."""

    LOCAL = auto()  # move applied through submit_move
    REMOTE = auto()  # snapshot installed from a peer
    RESET = auto()  # new game


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @property
    def is_remote(self) -> bool:
        """Moves for this player arrive from a network peer."""
        return False

    @abstractmethod
    def request_move(self, board: BoardView) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (they interact via the UI).
        For automated players this picks and submits a move.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel an ongoing move computation (automated players only)."""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        *,
        first: Color = Color.WHITE,
        board: Board | None = None,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def submit_move(self, row: int, col: int, color: Color) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def install_remote_board(self, board: Board) -> bool:
        """Replace the board with a peer's snapshot. Returns True if installed."""
