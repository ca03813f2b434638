from __future__ import annotations

from enum import Enum

from .position import Position


class Direction(str, Enum):
    NE = "NE"
    NW = "NW"
    SE = "SE"
    SW = "SW"

    @property
    def offset(self) -> Position:
        return _OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OFFSETS: dict[Direction, Position] = {
    Direction.NE: Position(-1, 1),
    Direction.NW: Position(-1, -1),
    Direction.SE: Position(1, 1),
    Direction.SW: Position(1, -1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.NE: Direction.SW,
    Direction.SW: Direction.NE,
    Direction.NW: Direction.SE,
    Direction.SE: Direction.NW,
}

ALL_DIRECTIONS: tuple[Direction, ...] = (Direction.NE, Direction.NW, Direction.SE, Direction.SW)


def getDirection(direction: Direction) -> Position:
    """Return the one-step offset for ``direction``."""
    return _OFFSETS[Direction(direction)]
