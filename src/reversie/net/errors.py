"""Errors raised by the network synchronisation layer."""

from __future__ import annotations


class SyncError(Exception):
    """Base class for network synchronisation failures."""


class PeerConnectionError(SyncError, ConnectionError):
    """The connection to the peer could not be established."""


class TransportError(SyncError):
    """The channel is closed or a read/write on it failed."""
