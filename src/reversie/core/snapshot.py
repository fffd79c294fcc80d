"""Versioned binary snapshot of a board.

Layout (big-endian)::

    offset  size  field
    0       4     magic b"RVSB"
    4       1     format version (1)
    5       1     board size N
    6       N*N   cell bytes, row-major: 0 empty, 1 white, 2 black

The same frame is used for the save file and on the wire. A reader learns
the payload length from the header, so frames can be concatenated on a
stream without extra length prefixes.
"""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING

from reversie.core.board import Board
from reversie.core.enums import CellState
from reversie.core.errors import DecodeError
from reversie.core.types import validate_size

if TYPE_CHECKING:
    from reversie.core.board import BoardView

MAGIC = b"RVSB"
VERSION = 1

_HEADER = struct.Struct(">4sBB")
HEADER_SIZE = _HEADER.size
_VALID_CELLS = frozenset(int(s) for s in CellState)


def encode_board(board: Board | BoardView) -> bytes:
    """Serialize *board* into a snapshot frame."""
    if not isinstance(board, Board):
        board = board.to_board()
    header = _HEADER.pack(MAGIC, VERSION, board.size)
    return header + bytes(int(s) for s in board.raw_cells())


def parse_header(header: bytes) -> int:
    """Validate a frame header and return the board size it announces."""
    if len(header) != HEADER_SIZE:
        raise DecodeError(f"Snapshot header must be {HEADER_SIZE} bytes, got {len(header)}")
    magic, version, size = _HEADER.unpack(header)
    if magic != MAGIC:
        raise DecodeError(f"Bad snapshot magic: {magic!r}")
    if version != VERSION:
        raise DecodeError(f"Unsupported snapshot version: {version}")
    try:
        validate_size(size)
    except ValueError as exc:
        raise DecodeError(str(exc)) from None
    return size


def payload_size(size: int) -> int:
    return size * size


def decode_payload(size: int, payload: bytes) -> Board:
    """Build a board from the cell bytes that follow a header."""
    if len(payload) != payload_size(size):
        raise DecodeError(
            f"Snapshot payload must be {payload_size(size)} bytes, got {len(payload)}"
        )
    bad = set(payload) - _VALID_CELLS
    if bad:
        raise DecodeError(f"Invalid cell value(s) in snapshot: {sorted(bad)}")
    return Board.from_cells(size, payload)


def decode_board(data: bytes) -> Board:
    """Inverse of :func:`encode_board`. Raises :class:`DecodeError`."""
    size = parse_header(bytes(data[:HEADER_SIZE]))
    return decode_payload(size, bytes(data[HEADER_SIZE:]))
