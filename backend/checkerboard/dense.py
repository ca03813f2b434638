from __future__ import annotations

from typing import Iterator

from .position import Position
from .symbols import EMPTY_POS, NON_PLAYABLE


class DenseStorage:
    """Row-major grid with one symbol per cell, dark tiles included."""

    __slots__ = ("_dimension", "grid")

    def __init__(self, dimension: int) -> None:
        self._dimension = dimension
        self.grid: list[list[str]] = [
            [EMPTY_POS if (row + col) % 2 == 0 else NON_PLAYABLE for col in range(dimension)]
            for row in range(dimension)
        ]

    @property
    def dimension(self) -> int:
        return self._dimension

    def symbol_at(self, pos: Position) -> str:
        return self.grid[pos.row][pos.col]

    def place(self, pos: Position, symbol: str) -> None:
        self.grid[pos.row][pos.col] = symbol

    def count(self, symbol: str) -> int:
        return sum(row.count(symbol) for row in self.grid)

    def positions(self, symbol: str) -> Iterator[Position]:
        for row, cells in enumerate(self.grid):
            for col, cell in enumerate(cells):
                if cell == symbol:
                    yield Position(row, col)
