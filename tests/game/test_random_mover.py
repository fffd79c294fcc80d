"""Tests for random move selection."""

import pytest

from reversie.core.board import Board
from reversie.core.enums import Color
from reversie.core.rules import Rules
from reversie.game.random_mover import NoLegalMoveError, RandomMover, choose_random_legal_move


class TestRandomMover:
    def test_choice_is_legal(self) -> None:
        board = Board.initial()
        mover = RandomMover(0)
        for _ in range(20):
            move = mover.choose(board, Color.WHITE)
            assert move in Rules.legal_moves(board, Color.WHITE)

    def test_seed_is_reproducible(self) -> None:
        board = Board.initial()
        first = [RandomMover(9).choose(board, Color.BLACK) for _ in range(3)]
        second = [RandomMover(9).choose(board, Color.BLACK) for _ in range(3)]
        assert first == second

    def test_works_on_view(self) -> None:
        view = Board.initial().freeze()
        assert RandomMover(1).choose(view, Color.WHITE) in Rules.legal_moves(view, Color.WHITE)

    def test_no_move_raises(self) -> None:
        with pytest.raises(NoLegalMoveError):
            choose_random_legal_move(Board(), Color.WHITE)

    def test_single_option(self) -> None:
        board = Board.from_rows(["WB..", "....", "....", "...."])
        assert choose_random_legal_move(board, Color.WHITE) == (0, 2)
