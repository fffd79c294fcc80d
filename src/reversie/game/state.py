"""Game state machine - board, side to move, phase and turn advance."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, auto

from reversie.core.board import Board
from reversie.core.enums import Color, GameResult
from reversie.core.rules import Rules
from reversie.core.types import DEFAULT_SIZE, Cell, Score
from reversie.game.interfaces import GamePhase


class TurnOutcome(IntEnum):
    """What happened to the turn after a board change."""

    SWITCHED = auto()  # opponent moves next
    PASSED = auto()  # opponent had no move; mover plays again
    GAME_OVER = auto()


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    color: Color
    cell: Cell
    flipped: frozenset[Cell]


@dataclass
class GameState:
    """Board plus turn bookkeeping.

    This is a pure data/logic class: no threading, no notifications. The
    caller is responsible for legality checks before :meth:`apply_move`.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    pass_count: int = field(default=0, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(
        self,
        board: Board | None = None,
        first: Color = Color.WHITE,
        size: int = DEFAULT_SIZE,
    ) -> None:
        """Initialise (or reset) the game."""
        self.board = board.copy() if board is not None else Board.initial(size)
        self.side_to_move = first
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()
        self.pass_count = 0
        # A resumed board may already be dead, or the first mover may be stuck.
        if Rules.is_game_over(self.board):
            self._finish()
        elif not Rules.has_any_legal_move(self.board, first):
            self.side_to_move = first.opposite

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, row: int, col: int) -> tuple[MoveRecord, TurnOutcome]:
        """Place a disc for the side to move, flip captures, advance turn."""
        color = self.side_to_move
        flipped = frozenset(Rules.captured_cells(self.board, row, col, color))
        self.board.set(row, col, color.cell)
        for r, c in flipped:
            self.board.set(r, c, color.cell)
        record = MoveRecord(color=color, cell=(row, col), flipped=flipped)
        self.move_history.append(record)
        return record, self.advance_turn(color)

    def replace_board(self, board: Board) -> TurnOutcome:
        """Install *board* as if the side to move had just produced it."""
        mover = self.side_to_move
        self.board = board.copy()
        return self.advance_turn(mover)

    def advance_turn(self, mover: Color) -> TurnOutcome:
        other = mover.opposite
        if Rules.has_any_legal_move(self.board, other):
            self.side_to_move = other
            return TurnOutcome.SWITCHED
        if Rules.has_any_legal_move(self.board, mover):
            self.side_to_move = mover
            self.pass_count += 1
            return TurnOutcome.PASSED
        self._finish()
        return TurnOutcome.GAME_OVER

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def move_count(self) -> int:
        return len(self.move_history)

    def score(self) -> Score:
        return Rules.score(self.board)

    def legal_moves(self) -> list[Cell]:
        """Legal moves for the side to move."""
        if self.is_game_over:
            return []
        return Rules.legal_moves(self.board, self.side_to_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _finish(self) -> None:
        self.result = Rules.winner(self.board)
        self.phase = GamePhase.GAME_OVER
