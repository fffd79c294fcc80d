"""Tests for the blocking snapshot channel."""

from __future__ import annotations

import queue
import socket
import threading

import pytest

from reversie.core.board import Board
from reversie.core.enums import CellState
from reversie.core.errors import DecodeError
from reversie.net.config import PeerRole
from reversie.net.errors import PeerConnectionError, TransportError
from reversie.net.peer import SyncPeer


def _free_port() -> int:
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


class TestConnect:
    def test_listen_and_connect(self) -> None:
        ports: queue.Queue[int] = queue.Queue()
        accepted: list[SyncPeer] = []

        def _listen() -> None:
            accepted.append(
                SyncPeer.connect(PeerRole.LISTEN, "127.0.0.1", 0, timeout=5, on_listening=ports.put)
            )

        thread = threading.Thread(target=_listen)
        thread.start()
        port = ports.get(timeout=5)
        client = SyncPeer.connect(PeerRole.CONNECT, "127.0.0.1", port, timeout=5)
        thread.join(timeout=5)

        server = accepted[0]
        try:
            board = Board.initial()
            client.send_snapshot(board)
            assert server.receive_snapshot() == board
            server.send_snapshot(Board(4))
            assert client.receive_snapshot() == Board(4)
        finally:
            client.close()
            server.close()

    def test_connect_refused(self) -> None:
        with pytest.raises(PeerConnectionError):
            SyncPeer.connect(PeerRole.CONNECT, "127.0.0.1", _free_port(), timeout=2)

    def test_connection_error_is_builtin_connection_error(self) -> None:
        with pytest.raises(ConnectionError):
            SyncPeer.connect("connect", "127.0.0.1", _free_port(), timeout=2)


class TestChannel:
    def test_snapshots_arrive_in_order(self, peer_pair: tuple[SyncPeer, SyncPeer]) -> None:
        left, right = peer_pair
        first = Board.initial()
        second = Board.initial()
        second.set(2, 4, CellState.WHITE)
        second.set(3, 4, CellState.WHITE)
        left.send_snapshot(first)
        left.send_snapshot(second.freeze())
        assert right.receive_snapshot() == first
        assert right.receive_snapshot() == second

    def test_peer_close_ends_receive(self, peer_pair: tuple[SyncPeer, SyncPeer]) -> None:
        left, right = peer_pair
        left.close()
        with pytest.raises(TransportError, match="closed"):
            right.receive_snapshot()

    def test_local_close_unblocks_receive(self, peer_pair: tuple[SyncPeer, SyncPeer]) -> None:
        _left, right = peer_pair
        errors: list[Exception] = []

        def _receive() -> None:
            try:
                right.receive_snapshot()
            except TransportError as exc:
                errors.append(exc)

        thread = threading.Thread(target=_receive)
        thread.start()
        right.close()
        thread.join(timeout=5)
        assert not thread.is_alive()
        assert len(errors) == 1

    def test_garbage_frame(self, peer_pair: tuple[SyncPeer, SyncPeer]) -> None:
        left, right = peer_pair
        left._sock.sendall(b"HELLO!")
        with pytest.raises(DecodeError):
            right.receive_snapshot()

    def test_send_after_close(self, peer_pair: tuple[SyncPeer, SyncPeer]) -> None:
        left, _right = peer_pair
        left.close()
        assert not left.is_open
        with pytest.raises(TransportError):
            left.send_snapshot(Board.initial())

    def test_close_is_idempotent(self, peer_pair: tuple[SyncPeer, SyncPeer]) -> None:
        left, _right = peer_pair
        with left:
            assert left.is_open
        left.close()
        assert not left.is_open
