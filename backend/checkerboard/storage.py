from __future__ import annotations

from typing import Iterator, Protocol

from .position import Position


class BoardStorage(Protocol):
    """Cell storage behind a :class:`~checkerboard.board.CheckerBoard`.

    Implementations are raw: they never check bounds, tile colour or symbol
    legality. ``CheckerBoard`` does that before calling in.
    """

    @property
    def dimension(self) -> int: ...

    def symbol_at(self, pos: Position) -> str: ...

    def place(self, pos: Position, symbol: str) -> None: ...

    def count(self, symbol: str) -> int: ...

    def positions(self, symbol: str) -> Iterator[Position]: ...
