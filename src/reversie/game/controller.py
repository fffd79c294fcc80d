"""GameController - the central orchestrator of a Reversi game.

Coordinates: Players, GameState, Rules.
Emits events via simple callbacks so the UI / network session / tests can
subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from reversie.core.board import Board, BoardView
from reversie.core.enums import Color, GameResult
from reversie.core.rules import Rules
from reversie.core.snapshot import decode_board, encode_board
from reversie.core.types import DEFAULT_SIZE, Cell, Score, cell_name
from reversie.game.interfaces import (
    ChangeOrigin,
    GamePhase,
    IGameController,
    IllegalMove,
    IPlayer,
)
from reversie.game.state import GameState, TurnOutcome

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

BoardCallback = Callable[[BoardView, ChangeOrigin], None]
PassCallback = Callable[[Color], None]  # color that had to pass
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_board_changed: list[BoardCallback] = field(default_factory=list)
    on_pass: list[PassCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: validates moves, switches turns (with
    forced passes), detects the end, notifies listeners.

    Thread-safety: none. All methods must be called from a single thread
    (the main/UI thread). Moves from a network peer arrive through
    ``install_remote_board``, which the network session calls from that
    same thread via a queued signal.
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> BoardView:
        """Read-only copy of the current board."""
        return self._state.board.freeze()

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    @property
    def result(self) -> GameResult:
        return self._state.result

    @property
    def current_player(self) -> IPlayer | None:
        if self._state.is_game_over:
            return None
        return self._players.get(self._state.side_to_move)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    def score(self) -> Score:
        return self._state.score()

    def is_terminal(self) -> bool:
        return self._state.is_game_over

    def legal_moves(self) -> list[Cell]:
        return self._state.legal_moves()

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        *,
        first: Color = Color.WHITE,
        board: Board | None = None,
        size: int = DEFAULT_SIZE,
    ) -> None:
        for p in self._players.values():
            p.cancel()
        self._players = {Color.WHITE: white, Color.BLACK: black}

        self._state = GameState()
        self._state.setup(board, first=first, size=size)
        _LOGGER.debug(
            "New game: %s (white) vs %s (black), %s to move",
            white.name,
            black.name,
            self._state.side_to_move,
        )

        self._emit_board(ChangeOrigin.RESET)
        if self._state.is_game_over:
            self._emit_game_over(self._state.result)
            return
        self._prompt_current_player()

    def check_move(self, row: int, col: int, color: Color) -> IllegalMove | None:
        """Return why the move would be rejected, or ``None`` if it is acceptable."""
        if self._state.is_game_over:
            return IllegalMove.GAME_OVER
        if color != self._state.side_to_move:
            return IllegalMove.NOT_YOUR_TURN
        if not Rules.is_legal(self._state.board, row, col, color):
            return IllegalMove.NOT_LEGAL
        return None

    def submit_move(self, row: int, col: int, color: Color) -> bool:
        rejection = self.check_move(row, col, color)
        if rejection is not None:
            _LOGGER.debug(
                "Rejected %s move at %s: %s",
                color,
                self._describe_cell(row, col),
                rejection.name,
            )
            return False

        record, outcome = self._state.apply_move(row, col)
        _LOGGER.debug(
            "%s played %s, flipped %d",
            color,
            cell_name(record.cell),
            len(record.flipped),
        )
        self._after_board_change(outcome, ChangeOrigin.LOCAL)
        return True

    def install_remote_board(self, board: Board) -> bool:
        """Adopt a peer's snapshot as the authoritative board.

        No legality checking: the peer is trusted for its own moves. The
        current side to move is treated as the mover for turn advance. A
        snapshot identical to the current board is ignored so that a
        duplicate delivery does not advance the turn twice. Boards arriving
        before ``new_game`` or with a different size are refused.
        """
        if self._state.phase == GamePhase.NOT_STARTED:
            _LOGGER.debug("Ignoring remote board: no game started")
            return False
        if self._state.is_game_over:
            _LOGGER.debug("Ignoring remote board: game is over")
            return False
        if board.size != self._state.board.size:
            _LOGGER.warning(
                "Rejecting remote board: size %d, game uses %d",
                board.size,
                self._state.board.size,
            )
            return False
        if board == self._state.board:
            _LOGGER.debug("Ignoring remote board: unchanged")
            return False

        outcome = self._state.replace_board(board)
        self._after_board_change(outcome, ChangeOrigin.REMOTE)
        return True

    # ── Snapshots ────────────────────────────────────────────────────────

    def serialize_board(self) -> bytes:
        return encode_board(self._state.board)

    @staticmethod
    def deserialize_board(data: bytes) -> Board:
        return decode_board(data)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _describe_cell(self, row: int, col: int) -> str:
        if self._state.board.in_bounds(row, col):
            return cell_name((row, col))
        return f"({row}, {col})"

    def _after_board_change(self, outcome: TurnOutcome, origin: ChangeOrigin) -> None:
        self._emit_board(origin)

        if outcome == TurnOutcome.GAME_OVER:
            self._emit_game_over(self._state.result)
            return

        if outcome == TurnOutcome.PASSED:
            passed = self._state.side_to_move.opposite
            _LOGGER.debug("%s has no legal move and passes", passed)
            for cb in self.events.on_pass:
                cb(passed)

        self._prompt_current_player()

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human or cp.is_remote:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state.board.freeze())

    def _emit_board(self, origin: ChangeOrigin) -> None:
        view = self._state.board.freeze()
        for cb in self.events.on_board_changed:
            cb(view, origin)

    def _emit_game_over(self, result: GameResult) -> None:
        _LOGGER.info("Game over: %s (%s)", result.name, self._state.score())
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
