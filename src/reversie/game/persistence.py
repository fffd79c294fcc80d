"""Save-file helpers for resuming an interrupted game.

The file holds a single board snapshot in the format of
:mod:`reversie.core.snapshot`. Where the file lives and when it is written
is decided by the caller.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from reversie.core.errors import DecodeError
from reversie.core.snapshot import decode_board, encode_board

if TYPE_CHECKING:
    from reversie.core.board import Board, BoardView

_LOGGER = logging.getLogger(__name__)

DEFAULT_SAVE_NAME = "save_game.dat"


def save_board(path: str | Path, board: Board | BoardView) -> Path:
    """Write *board* to *path*, replacing any previous save."""
    save_path = Path(path)
    tmp_path = save_path.with_name(save_path.name + ".tmp")
    tmp_path.write_bytes(encode_board(board))
    tmp_path.replace(save_path)
    _LOGGER.debug("Saved board to %s", save_path)
    return save_path


def load_board(path: str | Path) -> Board | None:
    """Read a saved board. Returns ``None`` if there is no save.

    A corrupt save is logged and treated as missing.
    """
    save_path = Path(path)
    if not save_path.is_file():
        return None
    try:
        return decode_board(save_path.read_bytes())
    except DecodeError as exc:
        _LOGGER.warning("Ignoring unreadable save file %s: %s", save_path, exc)
        return None


def discard_saved(path: str | Path) -> bool:
    """Delete the save at *path*. Returns True if a file was removed."""
    save_path = Path(path)
    try:
        save_path.unlink()
    except FileNotFoundError:
        return False
    _LOGGER.debug("Discarded save %s", save_path)
    return True
