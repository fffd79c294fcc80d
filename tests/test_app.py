"""Tests for the command-line entry point."""

from __future__ import annotations

import socket
import threading
from pathlib import Path

import pytest

import reversie.app as app_module
from reversie.core.board import Board
from reversie.core.enums import Color
from reversie.game.controller import GameController
from reversie.game.persistence import load_board, save_board
from reversie.game.player import HumanPlayer, RemotePlayer
from reversie.game.random_mover import RandomMover
from reversie.net.config import NetworkSettings, PeerRole, PlayerKind
from reversie.net.errors import SyncError
from reversie.net.peer import SyncPeer

ONE_MOVE_LEFT = ["WWWWWWWW"] * 7 + ["WWWWWWB."]


class TestLocalGame:
    def test_plays_to_the_end(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert app_module.main(["--log-level", "WARNING", "--seed", "3", "local"]) == 0
        out = capsys.readouterr().out
        assert "White: " in out and "Black: " in out

    def test_resumes_and_discards_save(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        save = save_board(tmp_path / "save_game.dat", Board.from_rows(ONE_MOVE_LEFT))

        assert app_module.main(["--log-level", "WARNING", "local", "--save-file", str(save)]) == 0

        out = capsys.readouterr().out
        assert "White wins. White: 64 - Black: 0" in out
        assert not save.exists()

    def test_interrupt_saves_board(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _interrupted(*_args: object, **_kwargs: object) -> None:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "play_out", _interrupted)
        save = tmp_path / "save_game.dat"

        rc = app_module.main(["--log-level", "WARNING", "local", "--save-file", str(save)])

        assert rc == 130
        assert load_board(save) == Board.initial()


class TestNetworkArguments:
    def test_human_player_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc:
            app_module.main(["net", "--role", "listen", "--player", "human"])
        assert exc.value.code == 2

    def test_bad_port_rejected(self) -> None:
        with pytest.raises(SystemExit):
            app_module.main(["net", "--role", "connect", "--port", "not-a-port"])

    def test_role_required(self) -> None:
        with pytest.raises(SystemExit):
            app_module.main(["net"])


def _play_white_over(
    peer: SyncPeer,
    seed: int,
    out: list[GameController],
    errors: list[Exception],
) -> None:
    """Play WHITE synchronously against the app, opening immediately."""
    ctrl = GameController()
    ctrl.new_game(HumanPlayer(Color.WHITE), RemotePlayer(Color.BLACK))
    mover = RandomMover(seed)
    try:
        while not ctrl.is_terminal():
            if ctrl.side_to_move == Color.WHITE:
                row, col = mover.choose(ctrl.board, Color.WHITE)
                ctrl.submit_move(row, col, Color.WHITE)
                peer.send_snapshot(ctrl.board)
            else:
                ctrl.install_remote_board(peer.receive_snapshot())
    except SyncError as exc:
        errors.append(exc)
    out.append(ctrl)


class TestNetworkGame:
    def test_connecting_side_plays_to_the_end(
        self,
        qapp: object,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        del qapp
        app_sock, white_sock = socket.socketpair()
        app_sock.settimeout(15)
        white_sock.settimeout(15)
        app_peer = SyncPeer.from_socket(app_sock)
        white_peer = SyncPeer.from_socket(white_sock)
        calls: list[tuple[object, ...]] = []

        def _fake_connect(
            cls: type[SyncPeer],
            role: PeerRole,
            address: str,
            port: int,
            *,
            timeout: float | None = None,
            on_listening: object = None,
        ) -> SyncPeer:
            calls.append((role, address, port))
            return app_peer

        monkeypatch.setattr(SyncPeer, "connect", classmethod(_fake_connect))

        finished: list[GameController] = []
        errors: list[Exception] = []
        white = threading.Thread(
            target=_play_white_over, args=(white_peer, 4, finished, errors)
        )
        white.start()
        try:
            settings = NetworkSettings(
                role=PeerRole.CONNECT,
                address="peer.local",
                port=4100,
                player_kind=PlayerKind.AUTOMATED,
            )
            rc = app_module.run_network_game(settings, 7, ["reversie"])
            white.join(timeout=15)
        finally:
            white_peer.close()
            app_peer.close()

        assert calls == [(PeerRole.CONNECT, "peer.local", 4100)]
        assert rc == 0
        assert errors == []
        remote = finished[0]
        assert remote.is_terminal()
        out = capsys.readouterr().out
        assert repr(remote.board) in out
        assert str(remote.score()) in out

    def test_connect_failure_returns_error_code(self, qapp: object) -> None:
        del qapp
        with socket.socket() as spare:
            spare.bind(("127.0.0.1", 0))
            port = spare.getsockname()[1]
        settings = NetworkSettings(
            role=PeerRole.CONNECT,
            address="127.0.0.1",
            port=port,
            player_kind=PlayerKind.AUTOMATED,
            timeout=2,
        )
        assert app_module.run_network_game(settings, None, ["reversie"]) == 2
