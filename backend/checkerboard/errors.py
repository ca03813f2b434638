from __future__ import annotations


class CheckersError(Exception):
    """Base class for rule-engine failures."""


class InvalidDimension(CheckersError, ValueError):
    def __init__(self, dimension: int) -> None:
        super().__init__("Invalid board size.")
        self.dimension = dimension


class InvalidPlayerSymbol(CheckersError, ValueError):
    pass


class IllegalPlacement(CheckersError, ValueError):
    pass
