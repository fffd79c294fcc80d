"""Blocking snapshot channel between two game instances.

Each message is a complete board snapshot (see :mod:`reversie.core.snapshot`),
never a move delta. Frames are written back to back on one TCP stream, so
the receiver sees them in send order and can apply "last write wins".

No timeouts are applied unless the caller asks for one: ``connect`` and
``receive_snapshot`` block until the peer acts or the socket is closed.
"""

from __future__ import annotations

import logging
import socket
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from reversie.core.snapshot import HEADER_SIZE, decode_payload, encode_board, parse_header
from reversie.net.config import PeerRole
from reversie.net.errors import PeerConnectionError, TransportError

if TYPE_CHECKING:
    from reversie.core.board import Board, BoardView

_LOGGER = logging.getLogger(__name__)


class SyncPeer:
    """One end of a snapshot-exchange connection.

    ``send_snapshot`` and ``receive_snapshot`` may be called from two
    different threads. ``close`` may be called from any thread and makes a
    blocked ``receive_snapshot`` fail with :class:`TransportError`.
    """

    __slots__ = ("_sock", "_send_lock", "_closed", "_peer_name")

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock
        self._send_lock = threading.Lock()
        self._closed = threading.Event()
        try:
            self._peer_name = str(sock.getpeername())
        except OSError:
            self._peer_name = "<unknown>"

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_socket(cls, sock: socket.socket) -> SyncPeer:
        """Wrap an already connected socket."""
        return cls(sock)

    @classmethod
    def connect(
        cls,
        role: PeerRole,
        address: str,
        port: int,
        *,
        timeout: float | None = None,
        on_listening: Callable[[int], None] | None = None,
    ) -> SyncPeer:
        """Establish the single connection used for the rest of the game.

        ``LISTEN`` binds ``address:port``, accepts exactly one peer and
        closes the listening socket. ``CONNECT`` dials ``address:port``.
        *on_listening* receives the bound port before ``accept`` blocks
        (useful with port 0).
        """
        role = PeerRole(role)
        try:
            if role is PeerRole.LISTEN:
                sock = cls._accept_one(address, port, timeout, on_listening)
            else:
                sock = socket.create_connection((address, port), timeout=timeout)
        except OSError as exc:
            raise PeerConnectionError(
                f"Cannot {role.value} on {address or '*'}:{port}: {exc}"
            ) from exc

        sock.settimeout(timeout)
        sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
        peer = cls(sock)
        _LOGGER.info("Connected to peer %s (%s)", peer._peer_name, role.value)
        return peer

    @staticmethod
    def _accept_one(
        address: str,
        port: int,
        timeout: float | None,
        on_listening: Callable[[int], None] | None,
    ) -> socket.socket:
        with socket.create_server((address, port), backlog=1) as server:
            server.settimeout(timeout)
            bound_port = server.getsockname()[1]
            _LOGGER.info("Waiting for peer on port %d", bound_port)
            if on_listening is not None:
                on_listening(bound_port)
            conn, _addr = server.accept()
        return conn

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def is_open(self) -> bool:
        return not self._closed.is_set()

    @property
    def peer_name(self) -> str:
        return self._peer_name

    # ── Channel operations ───────────────────────────────────────────────

    def send_snapshot(self, board: Board | BoardView) -> None:
        if self._closed.is_set():
            raise TransportError("Channel is closed")
        frame = encode_board(board)
        try:
            with self._send_lock:
                self._sock.sendall(frame)
        except OSError as exc:
            raise TransportError(f"Send failed: {exc}") from exc
        _LOGGER.debug("Sent snapshot (%d bytes) to %s", len(frame), self._peer_name)

    def receive_snapshot(self) -> Board:
        """Block until one full snapshot arrives.

        Raises :class:`TransportError` on a closed or broken channel and
        :class:`~reversie.core.errors.DecodeError` on a malformed frame.
        """
        size = parse_header(self._recv_exact(HEADER_SIZE))
        board = decode_payload(size, self._recv_exact(size * size))
        _LOGGER.debug("Received %dx%d snapshot from %s", size, size, self._peer_name)
        return board

    def close(self) -> None:
        if self._closed.is_set():
            return
        self._closed.set()
        try:
            self._sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass  # already disconnected
        self._sock.close()
        _LOGGER.debug("Closed channel to %s", self._peer_name)

    def __enter__(self) -> SyncPeer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ── Internal ─────────────────────────────────────────────────────────

    def _recv_exact(self, count: int) -> bytes:
        buf = bytearray()
        while len(buf) < count:
            if self._closed.is_set():
                raise TransportError("Channel is closed")
            try:
                chunk = self._sock.recv(count - len(buf))
            except OSError as exc:
                raise TransportError(f"Receive failed: {exc}") from exc
            if not chunk:
                raise TransportError("Peer closed the connection")
            buf.extend(chunk)
        return bytes(buf)
