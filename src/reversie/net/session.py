"""Network session: keeps a local controller in step with a remote peer."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from reversie.core.board import Board
from reversie.core.enums import Color
from reversie.game.interfaces import ChangeOrigin, IPlayer
from reversie.game.player import RemotePlayer
from reversie.net.qt_bridge import SnapshotReceiver, SnapshotSender

if TYPE_CHECKING:
    from reversie.core.board import BoardView
    from reversie.core.enums import GameResult
    from reversie.game.controller import GameController
    from reversie.net.peer import SyncPeer

_LOGGER = logging.getLogger(__name__)

DisconnectCallback = Callable[[str], None]


class SessionState(IntEnum):
    """Lifecycle of a networked game."""

    IDLE = auto()
    ACTIVE = auto()  # relaying snapshots
    FINISHED = auto()  # game over, nothing more to relay
    DISCONNECTED = auto()  # peer lost before the game ended


class _SessionCommandBus(QObject):
    """Signal bridge for issuing sender commands with queued delivery."""

    send_requested = pyqtSignal(object)
    finish_requested = pyqtSignal()


class NetworkSession:
    """Owns the peer's worker threads and the hand-off to the controller.

    Local moves (``ChangeOrigin.LOCAL``) are forwarded to the sender thread
    as full snapshots. Snapshots from the receiver thread arrive on the
    main thread through a queued signal and are installed with
    ``GameController.install_remote_board``. Remote installs are not echoed
    back.
    """

    _THREAD_WAIT_MS = 2000

    __slots__ = (
        "__weakref__",
        "_controller",
        "_peer",
        "_local_color",
        "_command_bus",
        "_sender_thread",
        "_sender",
        "_receiver_thread",
        "_receiver",
        "_state",
        "_is_started",
        "on_disconnected",
    )

    def __init__(
        self,
        *,
        controller: GameController,
        peer: SyncPeer,
        local_color: Color,
        parent: QObject | None = None,
    ) -> None:
        self._controller = controller
        self._peer = peer
        self._local_color = local_color

        self._command_bus = _SessionCommandBus(parent)
        self._sender_thread = QThread(parent)
        self._sender = SnapshotSender(peer)
        self._receiver_thread = QThread(parent)
        self._receiver = SnapshotReceiver(peer)

        self._state = SessionState.IDLE
        self._is_started = False
        self.on_disconnected: list[DisconnectCallback] = []

        controller.events.on_board_changed.append(self._on_board_changed)
        controller.events.on_game_over.append(self._on_game_over)
        self._sender.send_failed.connect(self._on_channel_failed)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def local_color(self) -> Color:
        return self._local_color

    @property
    def is_started(self) -> bool:
        return self._is_started

    def create_remote_player(self) -> RemotePlayer:
        """Player object standing in for the peer's side."""
        return RemotePlayer(self._local_color.opposite)

    def seat_players(self, local: IPlayer) -> tuple[IPlayer, IPlayer]:
        """Return ``(white, black)`` with *local* on this session's color."""
        remote = self.create_remote_player()
        if local.color != self._local_color:
            raise ValueError(
                f"Local player plays {local.color}, session expects {self._local_color}"
            )
        if local.color == Color.WHITE:
            return local, remote
        return remote, local

    # ── Lifecycle ────────────────────────────────────────────────────────

    def start(self) -> None:
        """Start both worker threads and begin relaying."""
        if self._is_started:
            return
        self._sender.moveToThread(self._sender_thread)
        self._receiver.moveToThread(self._receiver_thread)

        self._command_bus.send_requested.connect(self._sender.send)
        self._command_bus.finish_requested.connect(self._sender.finish)

        self._receiver_thread.started.connect(self._receiver.run)
        self._receiver.snapshot_received.connect(self._on_snapshot_received)
        self._receiver.peer_lost.connect(self._on_channel_failed)

        self._sender_thread.start()
        self._receiver_thread.start()
        self._is_started = True
        self._state = SessionState.ACTIVE
        _LOGGER.info("Network session started, playing %s", self._local_color)

    def activate(self) -> None:
        """Relay without worker threads: sends happen inline on the caller's thread."""
        self._state = SessionState.ACTIVE

    def shutdown(self) -> None:
        """Flush pending sends, close the channel and stop the threads."""
        if self._state == SessionState.ACTIVE:
            self._state = SessionState.FINISHED
        if not self._is_started:
            self._peer.close()
            return
        self._command_bus.finish_requested.emit()
        self._sender_thread.wait(self._THREAD_WAIT_MS)
        self._receiver.stop()
        self._peer.close()
        self._receiver_thread.quit()
        self._receiver_thread.wait(self._THREAD_WAIT_MS)
        self._is_started = False
        _LOGGER.info("Network session shut down (%s)", self._state.name)

    # ── Controller events ────────────────────────────────────────────────

    def _on_board_changed(self, board: BoardView, origin: ChangeOrigin) -> None:
        if origin != ChangeOrigin.LOCAL:
            return
        if self._state != SessionState.ACTIVE:
            return
        snapshot = board.to_board()
        if self._is_started:
            self._command_bus.send_requested.emit(snapshot)
        else:
            self._sender.send(snapshot)

    def _on_game_over(self, result: GameResult) -> None:
        if self._state == SessionState.ACTIVE:
            _LOGGER.info("Networked game finished: %s", result.name)
            self._state = SessionState.FINISHED

    # ── Worker signals (main thread) ─────────────────────────────────────

    def _on_snapshot_received(self, board_obj: object) -> None:
        if not isinstance(board_obj, Board):
            return
        if self._state != SessionState.ACTIVE:
            _LOGGER.debug("Dropping snapshot received in state %s", self._state.name)
            return
        self._controller.install_remote_board(board_obj)

    def _on_channel_failed(self, message: str) -> None:
        if self._state != SessionState.ACTIVE:
            _LOGGER.debug("Channel closed after session end: %s", message)
            return
        _LOGGER.warning("Peer disconnected: %s", message)
        self._state = SessionState.DISCONNECTED
        for cb in self.on_disconnected:
            cb(message)
