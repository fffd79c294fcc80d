"""Network synchronisation: snapshot peer, Qt worker bridge, session."""

from reversie.net.config import NetworkSettings, PeerRole, PlayerKind
from reversie.net.errors import PeerConnectionError, SyncError, TransportError
from reversie.net.peer import SyncPeer
from reversie.net.qt_bridge import SnapshotReceiver, SnapshotSender
from reversie.net.session import NetworkSession, SessionState

__all__ = [
    "NetworkSession",
    "NetworkSettings",
    "PeerConnectionError",
    "PeerRole",
    "PlayerKind",
    "SessionState",
    "SnapshotReceiver",
    "SnapshotSender",
    "SyncError",
    "SyncPeer",
    "TransportError",
]
