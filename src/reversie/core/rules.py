"""Reversi move rules: legality, captures, scoring."""

from __future__ import annotations

from typing import TYPE_CHECKING

from reversie.core.enums import CellState, Color, GameResult
from reversie.core.types import DIRECTIONS, Cell, Direction, Score

if TYPE_CHECKING:
    from reversie.core.board import Board, BoardView

    AnyBoard = Board | BoardView


class Rules:
    """Static, side-effect-free rule checker operating on a board.

    A placement is legal when, along at least one direction, it encloses a
    non-empty run of opponent discs between the new disc and an existing
    disc of the mover's color. No other adjacency rule applies.
    """

    @staticmethod
    def _capture_line(
        board: AnyBoard, row: int, col: int, color: Color, direction: Direction
    ) -> list[Cell]:
        """Opponent cells enclosed along *direction*, or ``[]`` if none."""
        dr, dc = direction
        own = color.cell
        theirs = color.opposite.cell
        run: list[Cell] = []
        r, c = row + dr, col + dc
        while board.in_bounds(r, c):
            state = board.get(r, c)
            if state == theirs:
                run.append((r, c))
            elif state == own:
                return run
            else:
                break
            r += dr
            c += dc
        return []

    @staticmethod
    def is_legal(board: AnyBoard, row: int, col: int, color: Color) -> bool:
        if not board.in_bounds(row, col) or board.get(row, col) != CellState.EMPTY:
            return False
        return any(
            Rules._capture_line(board, row, col, color, d) for d in DIRECTIONS
        )

    @staticmethod
    def captured_cells(board: AnyBoard, row: int, col: int, color: Color) -> set[Cell]:
        """Cells flipped by placing *color* at ``(row, col)``.

        Empty for an illegal placement.
        """
        if not board.in_bounds(row, col) or board.get(row, col) != CellState.EMPTY:
            return set()
        captured: set[Cell] = set()
        for d in DIRECTIONS:
            captured.update(Rules._capture_line(board, row, col, color, d))
        return captured

    @staticmethod
    def legal_moves(board: AnyBoard, color: Color) -> list[Cell]:
        """All legal placements for *color* in row-major order."""
        return [
            cell
            for cell, state in board.cells()
            if state == CellState.EMPTY and Rules.is_legal(board, cell[0], cell[1], color)
        ]

    @staticmethod
    def has_any_legal_move(board: AnyBoard, color: Color) -> bool:
        return any(
            state == CellState.EMPTY and Rules.is_legal(board, r, c, color)
            for (r, c), state in board.cells()
        )

    @staticmethod
    def is_game_over(board: AnyBoard) -> bool:
        """Neither side can move."""
        return not (
            Rules.has_any_legal_move(board, Color.WHITE)
            or Rules.has_any_legal_move(board, Color.BLACK)
        )

    @staticmethod
    def score(board: AnyBoard) -> Score:
        return Score(
            white=board.count_by_color(Color.WHITE),
            black=board.count_by_color(Color.BLACK),
        )

    @staticmethod
    def winner(board: AnyBoard) -> GameResult:
        """Result by disc count. Only meaningful once the game is over."""
        score = Rules.score(board)
        if score.white > score.black:
            return GameResult.WHITE_WINS
        if score.black > score.white:
            return GameResult.BLACK_WINS
        return GameResult.DRAW
