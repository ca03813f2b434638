from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .direction import Direction
from .errors import InvalidDimension, InvalidPlayerSymbol
from .symbols import BOARD_MAX_SIZE, BOARD_MIN_SIZE, RESERVED_SYMBOLS, crowned


def validate_dimension(dimension: int) -> int:
    if (
        isinstance(dimension, bool)
        or not isinstance(dimension, int)
        or dimension < BOARD_MIN_SIZE
        or dimension > BOARD_MAX_SIZE
        or dimension % 2 != 0
    ):
        raise InvalidDimension(dimension)
    return dimension


def _validate_symbol(label: str, symbol: str) -> None:
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise InvalidPlayerSymbol(f"{label} symbol must be a single character, got {symbol!r}.")
    if symbol in RESERVED_SYMBOLS:
        raise InvalidPlayerSymbol(f"{label} symbol {symbol!r} is reserved.")
    if not (symbol.isalpha() and symbol.islower()):
        raise InvalidPlayerSymbol(f"{label} symbol must be a lowercase letter, got {symbol!r}.")


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Board size and the two player symbols for one game.

    Player one starts on row 0 and moves south; player two starts on the
    last row and moves north. Crowned pieces use the uppercase symbol.
    """

    dimension: int = 8
    player_one: str = "x"
    player_two: str = "o"

    def __post_init__(self) -> None:
        validate_dimension(self.dimension)
        _validate_symbol("Player one", self.player_one)
        _validate_symbol("Player two", self.player_two)
        if self.player_one == self.player_two:
            raise InvalidPlayerSymbol("Piece already taken by player one.")

    @property
    def players(self) -> tuple[str, str]:
        return (self.player_one, self.player_two)

    @property
    def rows_per_side(self) -> int:
        return (self.dimension - 2) // 2

    @property
    def pieces_per_row(self) -> int:
        return self.dimension // 2

    @property
    def starting_count(self) -> int:
        return self.rows_per_side * self.pieces_per_row

    @property
    def piece_symbols(self) -> tuple[str, ...]:
        return (self.player_one, crowned(self.player_one), self.player_two, crowned(self.player_two))

    def owner_of(self, symbol: str) -> Optional[str]:
        """Return the player owning ``symbol`` (either case), or None."""
        if not isinstance(symbol, str) or len(symbol) != 1:
            return None
        lowered = symbol.lower()
        if lowered in self.players:
            return lowered
        return None

    def opponent_of(self, symbol: str) -> Optional[str]:
        owner = self.owner_of(symbol)
        if owner is None:
            return None
        return self.player_two if owner == self.player_one else self.player_one

    def promotion_row(self, symbol: str) -> Optional[int]:
        owner = self.owner_of(symbol)
        if owner is None:
            return None
        return self.dimension - 1 if owner == self.player_one else 0

    def forward_directions(self, symbol: str) -> tuple[Direction, ...]:
        owner = self.owner_of(symbol)
        if owner == self.player_one:
            return (Direction.SE, Direction.SW)
        if owner == self.player_two:
            return (Direction.NE, Direction.NW)
        return ()
