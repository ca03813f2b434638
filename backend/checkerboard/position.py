from __future__ import annotations

from dataclasses import dataclass

Coordinate = tuple[int, int]


@dataclass(frozen=True, slots=True)
class Position:
    row: int
    col: int

    @classmethod
    def of(cls, coord: Coordinate) -> "Position":
        row, col = coord
        return cls(row, col)

    def __add__(self, other: "Position") -> "Position":
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.row + other.row, self.col + other.col)

    def doubled(self) -> "Position":
        return Position(self.row * 2, self.col * 2)

    def is_valid(self, row_bound: int, col_bound: int) -> bool:
        return 0 <= self.row < row_bound and 0 <= self.col < col_bound

    @property
    def is_playable(self) -> bool:
        return (self.row + self.col) % 2 == 0

    def as_tuple(self) -> Coordinate:
        return (self.row, self.col)

    def __str__(self) -> str:
        return f"{self.row},{self.col}"
