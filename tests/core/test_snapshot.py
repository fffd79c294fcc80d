"""Tests for the binary board snapshot codec."""

import pytest

from reversie.core.board import Board
from reversie.core.enums import CellState
from reversie.core.errors import DecodeError
from reversie.core.snapshot import HEADER_SIZE, MAGIC, VERSION, decode_board, encode_board


class TestEncode:
    def test_layout(self) -> None:
        data = encode_board(Board.initial())
        assert data[:4] == MAGIC
        assert data[4] == VERSION
        assert data[5] == 8
        assert len(data) == HEADER_SIZE + 64
        # Row 3: . . . W B . . .
        assert list(data[HEADER_SIZE + 24 : HEADER_SIZE + 32]) == [0, 0, 0, 1, 2, 0, 0, 0]

    def test_view_encodes_like_board(self) -> None:
        board = Board.initial()
        assert encode_board(board.freeze()) == encode_board(board)


class TestRoundTrip:
    def test_initial(self) -> None:
        board = Board.initial()
        assert decode_board(encode_board(board)) == board

    def test_all_empty(self) -> None:
        board = Board()
        assert decode_board(encode_board(board)) == board

    def test_fully_filled(self) -> None:
        board = Board()
        for (row, col), _ in board.cells():
            board.set(row, col, CellState.WHITE if (row + col) % 2 else CellState.BLACK)
        decoded = decode_board(encode_board(board))
        assert decoded == board
        assert decoded.is_full()

    def test_other_size(self) -> None:
        board = Board.initial(4)
        decoded = decode_board(encode_board(board))
        assert decoded.size == 4
        assert decoded == board


class TestDecodeErrors:
    def _frame(self, *, magic: bytes = MAGIC, version: int = VERSION, size: int = 2) -> bytes:
        return magic + bytes([version, size]) + bytes(size * size)

    def test_valid_frame(self) -> None:
        assert decode_board(self._frame()) == Board(2)

    def test_bad_magic(self) -> None:
        with pytest.raises(DecodeError, match="magic"):
            decode_board(self._frame(magic=b"JAVA"))

    def test_unsupported_version(self) -> None:
        with pytest.raises(DecodeError, match="version"):
            decode_board(self._frame(version=2))

    @pytest.mark.parametrize("size", [0, 3])
    def test_bad_size(self, size: int) -> None:
        with pytest.raises(DecodeError):
            decode_board(self._frame(size=size))

    def test_truncated_header(self) -> None:
        with pytest.raises(DecodeError):
            decode_board(MAGIC)

    def test_truncated_payload(self) -> None:
        with pytest.raises(DecodeError):
            decode_board(self._frame()[:-1])

    def test_trailing_bytes(self) -> None:
        with pytest.raises(DecodeError):
            decode_board(self._frame() + b"\x00")

    def test_invalid_cell_value(self) -> None:
        frame = bytearray(self._frame())
        frame[-1] = 3
        with pytest.raises(DecodeError, match="cell"):
            decode_board(bytes(frame))

    def test_decode_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            decode_board(b"")
