"""Connection settings for a networked game."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from reversie.core.enums import Color

DEFAULT_ADDRESS = "localhost"
DEFAULT_PORT = 4000


class PeerRole(str, Enum):
    """How the connection is established."""

    LISTEN = "listen"  # wait for one incoming connection
    CONNECT = "connect"  # dial a known address

    @property
    def local_color(self) -> Color:
        """The listening side plays the first-moving color."""
        return Color.WHITE if self is PeerRole.LISTEN else Color.BLACK


class PlayerKind(str, Enum):
    """Who controls the local side."""

    HUMAN = "human"
    AUTOMATED = "automated"


@dataclass(frozen=True, slots=True)
class NetworkSettings:
    """All values needed to join a networked game.

    Args:
        role: Listen for the peer or connect to it.
        address: Peer host name (``CONNECT``) or bind address (``LISTEN``,
            empty string binds every interface).
        port: TCP port, 1-65535.
        player_kind: Who plays the local color.
        timeout: Seconds for connect/read operations; ``None`` blocks
            indefinitely.
    """

    role: PeerRole = PeerRole.LISTEN
    address: str = DEFAULT_ADDRESS
    port: int = DEFAULT_PORT
    player_kind: PlayerKind = PlayerKind.HUMAN
    timeout: float | None = None

    def __post_init__(self) -> None:
        if not 1 <= self.port <= 65535:
            raise ValueError(f"Port must be in 1-65535, got {self.port}")
        if self.timeout is not None and not (math.isfinite(self.timeout) and self.timeout > 0):
            raise ValueError(f"Timeout must be a positive number of seconds, got {self.timeout}")

    @property
    def local_color(self) -> Color:
        return self.role.local_color

    @property
    def remote_color(self) -> Color:
        return self.role.local_color.opposite

    @classmethod
    def parse(
        cls,
        role: str,
        address: str = DEFAULT_ADDRESS,
        port: str | int = DEFAULT_PORT,
        player_kind: str = PlayerKind.HUMAN.value,
        timeout: str | float | None = None,
    ) -> NetworkSettings:
        """Build settings from raw text values (dialog fields, CLI args)."""
        try:
            parsed_role = PeerRole(role.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown role: {role!r}") from None
        try:
            parsed_kind = PlayerKind(player_kind.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown player kind: {player_kind!r}") from None
        try:
            parsed_port = int(port)
        except (TypeError, ValueError):
            raise ValueError(f"Port must be an integer, got {port!r}") from None
        parsed_timeout = None if timeout in (None, "") else float(timeout)
        return cls(
            role=parsed_role,
            address=address.strip(),
            port=parsed_port,
            player_kind=parsed_kind,
            timeout=parsed_timeout,
        )
