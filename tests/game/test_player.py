"""Tests for concrete player types."""

from reversie.core.board import Board
from reversie.core.enums import Color
from reversie.game.player import AIPlayer, HumanPlayer, RemotePlayer


class TestHumanPlayer:
    def test_defaults(self) -> None:
        p = HumanPlayer(Color.BLACK)
        assert p.color == Color.BLACK
        assert p.name == "Player (black)"
        assert p.is_human
        assert not p.is_remote

    def test_request_move_is_noop(self) -> None:
        HumanPlayer(Color.WHITE, "Ann").request_move(Board.initial().freeze())


class TestAIPlayer:
    def test_request_forwarded(self) -> None:
        requests: list[object] = []
        p = AIPlayer(Color.WHITE, on_request_move=requests.append)
        view = Board.initial().freeze()
        p.request_move(view)
        p.cancel()
        assert requests == [view]
        assert p.name == "Computer"
        assert not p.is_human
        assert not p.is_remote

    def test_without_callbacks(self) -> None:
        p = AIPlayer(Color.BLACK, "Bot")
        p.request_move(Board.initial().freeze())
        p.cancel()


class TestRemotePlayer:
    def test_flags(self) -> None:
        p = RemotePlayer(Color.BLACK)
        assert p.is_remote
        assert not p.is_human
        assert p.name == "Remote (black)"
