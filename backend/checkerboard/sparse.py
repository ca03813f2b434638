from __future__ import annotations

from typing import Iterable, Iterator

from .position import Position
from .symbols import EMPTY_POS, NON_PLAYABLE


class SparseStorage:
    """Per-symbol position sets; a cell in no set is empty.

    Only occupied cells cost memory. The board dimension is stored rather
    than derived from the occupied positions, so emptying the edge rows does
    not shrink the board. :meth:`occupied_extent` reports the derived extent
    for diagnostics.
    """

    __slots__ = ("_dimension", "positions_by_symbol")

    def __init__(self, dimension: int, symbols: Iterable[str] = ()) -> None:
        self._dimension = dimension
        self.positions_by_symbol: dict[str, set[Position]] = {symbol: set() for symbol in symbols}

    @property
    def dimension(self) -> int:
        return self._dimension

    def symbol_at(self, pos: Position) -> str:
        for symbol, positions in self.positions_by_symbol.items():
            if pos in positions:
                return symbol
        return EMPTY_POS if pos.is_playable else NON_PLAYABLE

    def place(self, pos: Position, symbol: str) -> None:
        for positions in self.positions_by_symbol.values():
            positions.discard(pos)
        if symbol in (EMPTY_POS, NON_PLAYABLE):
            return
        self.positions_by_symbol.setdefault(symbol, set()).add(pos)

    def count(self, symbol: str) -> int:
        return len(self.positions_by_symbol.get(symbol, ()))

    def positions(self, symbol: str) -> Iterator[Position]:
        yield from sorted(
            self.positions_by_symbol.get(symbol, ()),
            key=lambda pos: (pos.row, pos.col),
        )

    def occupied_extent(self) -> tuple[int, int]:
        """Return ``(rows, cols)`` spanned by occupied cells, counting from 0."""
        max_row = -1
        max_col = -1
        for positions in self.positions_by_symbol.values():
            for pos in positions:
                max_row = max(max_row, pos.row)
                max_col = max(max_col, pos.col)
        return (max_row + 1, max_col + 1)
