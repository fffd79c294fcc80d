"""Qt workers that run the blocking peer I/O off the main thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

from reversie.core.board import Board
from reversie.core.errors import DecodeError
from reversie.net.errors import TransportError
from reversie.net.peer import SyncPeer

_LOGGER = logging.getLogger(__name__)


class SnapshotReceiver(QObject):
    """Thread-affine worker running the blocking receive loop.

    Every decoded board is emitted through ``snapshot_received``; receivers
    living in the main thread get it via queued delivery, in arrival order.
    """

    snapshot_received = pyqtSignal(object)
    peer_lost = pyqtSignal(str)
    finished = pyqtSignal()

    __slots__ = ("_peer", "_stop_event")

    def __init__(self, peer: SyncPeer) -> None:
        super().__init__()
        self._peer = peer
        self._stop_event = threading.Event()

    @pyqtSlot()
    def run(self) -> None:
        """Receive snapshots until the channel fails or ``stop`` is called."""
        while not self._stop_event.is_set():
            try:
                board = self._peer.receive_snapshot()
            except (TransportError, DecodeError) as exc:
                if not self._stop_event.is_set():
                    _LOGGER.warning("Receive loop ended: %s", exc)
                    self.peer_lost.emit(str(exc))
                break
            self.snapshot_received.emit(board)
        self.finished.emit()

    def stop(self) -> None:
        """Ask the loop to exit. Safe to call from any thread.

        The loop only notices once the blocking read returns, so callers
        close the peer right after.
        """
        self._stop_event.set()


class SnapshotSender(QObject):
    """Thread-affine worker writing snapshots in the order requested."""

    snapshot_sent = pyqtSignal()
    send_failed = pyqtSignal(str)

    __slots__ = ("_peer",)

    def __init__(self, peer: SyncPeer) -> None:
        super().__init__()
        self._peer = peer

    @pyqtSlot(object)
    def send(self, board_obj: object) -> None:
        if not isinstance(board_obj, Board):
            self.send_failed.emit("Sender received invalid board")
            return
        try:
            self._peer.send_snapshot(board_obj)
        except TransportError as exc:
            _LOGGER.warning("Snapshot send failed: %s", exc)
            self.send_failed.emit(str(exc))
            return
        self.snapshot_sent.emit()

    @pyqtSlot()
    def finish(self) -> None:
        """Quit the owning thread once every queued send has been written."""
        thread = QThread.currentThread()
        if thread is not None:
            thread.quit()
