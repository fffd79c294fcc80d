"""Board - disc placement on an N x N grid."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from reversie.core.enums import CellState, Color
from reversie.core.errors import OutOfRangeError
from reversie.core.types import DEFAULT_SIZE, Cell, validate_size

_CHAR_TO_CELL: dict[str, CellState] = {
    ".": CellState.EMPTY,
    "W": CellState.WHITE,
    "B": CellState.BLACK,
}
_CELL_TO_CHAR: dict[CellState, str] = {v: k for k, v in _CHAR_TO_CELL.items()}


class Board:
    """Mutable square grid of cell states.

    The board only knows where discs are. Turn order and legality live in
    :class:`~reversie.core.rules.Rules` and the game controller.
    """

    __slots__ = ("_size", "_cells")

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        self._size = validate_size(size)
        self._cells: list[CellState] = [CellState.EMPTY] * (size * size)

    @property
    def size(self) -> int:
        return self._size

    def _index(self, row: int, col: int) -> int:
        if not self.in_bounds(row, col):
            raise OutOfRangeError(row, col, self._size)
        return row * self._size + col

    # -- Element access -----------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._size and 0 <= col < self._size

    def get(self, row: int, col: int) -> CellState:
        return self._cells[self._index(row, col)]

    def set(self, row: int, col: int, state: CellState) -> None:
        self._cells[self._index(row, col)] = CellState(state)

    def __getitem__(self, cell: Cell) -> CellState:
        return self.get(*cell)

    def __setitem__(self, cell: Cell, state: CellState) -> None:
        self.set(cell[0], cell[1], state)

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) == CellState.EMPTY

    # -- Query helpers ------------------------------------------------------

    def count_by_color(self, color: Color) -> int:
        """Number of cells holding a disc of *color*."""
        return self._cells.count(color.cell)

    def occupied_count(self) -> int:
        return len(self._cells) - self._cells.count(CellState.EMPTY)

    def is_full(self) -> bool:
        return CellState.EMPTY not in self._cells

    def cells(self) -> Iterator[tuple[Cell, CellState]]:
        """Yield ``((row, col), state)`` in row-major order."""
        size = self._size
        for idx, state in enumerate(self._cells):
            yield (idx // size, idx % size), state

    def empty_cells(self) -> list[Cell]:
        return [cell for cell, state in self.cells() if state == CellState.EMPTY]

    def raw_cells(self) -> tuple[CellState, ...]:
        """Row-major cell states, used by the snapshot codec."""
        return tuple(self._cells)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._size = self._size
        b._cells = self._cells.copy()
        return b

    def freeze(self) -> BoardView:
        """Read-only copy handed to subscribers."""
        return BoardView(self)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls, size: int = DEFAULT_SIZE) -> Board:
        """Standard starting position: two discs per side on the centre diagonals."""
        b = cls(size)
        m = size // 2
        b.set(m - 1, m - 1, CellState.WHITE)
        b.set(m, m, CellState.WHITE)
        b.set(m - 1, m, CellState.BLACK)
        b.set(m, m - 1, CellState.BLACK)
        return b

    @classmethod
    def from_cells(cls, size: int, cells: Sequence[int]) -> Board:
        """Build a board from ``size * size`` row-major cell values."""
        b = cls(size)
        if len(cells) != size * size:
            raise ValueError(f"Expected {size * size} cells, got {len(cells)}")
        b._cells = [CellState(v) for v in cells]
        return b

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> Board:
        """Build a board from text rows of ``.``, ``W`` and ``B``.

        Whitespace inside a row is ignored, so ``"W . B ."`` and ``"W.B."``
        are equivalent.
        """
        cleaned = ["".join(r.split()) for r in rows]
        size = len(cleaned)
        cells: list[CellState] = []
        for r, row in enumerate(cleaned):
            if len(row) != size:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {size}")
            for ch in row:
                try:
                    cells.append(_CHAR_TO_CELL[ch.upper()])
                except KeyError:
                    raise ValueError(f"Invalid cell character: {ch!r}") from None
        return cls.from_cells(size, cells)

    def to_rows(self) -> list[str]:
        size = self._size
        return [
            "".join(_CELL_TO_CHAR[s] for s in self._cells[r * size : (r + 1) * size])
            for r in range(size)
        ]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoardView):
            other = other._board
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        header = "  " + " ".join(chr(ord("a") + c) for c in range(self._size))
        lines = [header]
        for r, row in enumerate(self.to_rows()):
            lines.append(f"{r + 1} {' '.join(row)}")
        return "\n".join(lines)


class BoardView:
    """Immutable snapshot of a :class:`Board`.

    Exposes the read-only part of the board API. Holding a view never
    observes later mutations of the source board.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board.copy()

    @property
    def size(self) -> int:
        return self._board.size

    def get(self, row: int, col: int) -> CellState:
        return self._board.get(row, col)

    def __getitem__(self, cell: Cell) -> CellState:
        return self._board[cell]

    def in_bounds(self, row: int, col: int) -> bool:
        return self._board.in_bounds(row, col)

    def is_empty(self, row: int, col: int) -> bool:
        return self._board.is_empty(row, col)

    def count_by_color(self, color: Color) -> int:
        return self._board.count_by_color(color)

    def occupied_count(self) -> int:
        return self._board.occupied_count()

    def is_full(self) -> bool:
        return self._board.is_full()

    def cells(self) -> Iterator[tuple[Cell, CellState]]:
        return self._board.cells()

    def empty_cells(self) -> list[Cell]:
        return self._board.empty_cells()

    def to_rows(self) -> list[str]:
        return self._board.to_rows()

    def to_board(self) -> Board:
        """Mutable copy of the viewed board."""
        return self._board.copy()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoardView):
            return self._board == other._board
        if isinstance(other, Board):
            return self._board == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return repr(self._board)
