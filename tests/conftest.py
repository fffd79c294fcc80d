"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import socket
from collections.abc import Iterator

import pytest

from reversie.net.peer import SyncPeer


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for event-loop tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def peer_pair() -> Iterator[tuple[SyncPeer, SyncPeer]]:
    """Two connected peers over a local socket pair."""
    left_sock, right_sock = socket.socketpair()
    left = SyncPeer.from_socket(left_sock)
    right = SyncPeer.from_socket(right_sock)
    yield left, right
    left.close()
    right.close()
