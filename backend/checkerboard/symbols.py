from __future__ import annotations

EMPTY_POS = " "
NON_PLAYABLE = "*"

BOARD_MIN_SIZE = 8
BOARD_MAX_SIZE = 16

RESERVED_SYMBOLS = frozenset({EMPTY_POS, NON_PLAYABLE})


def is_crowned(symbol: str) -> bool:
    return symbol.isupper()


def crowned(symbol: str) -> str:
    return symbol.upper()


def ordinary(symbol: str) -> str:
    return symbol.lower()
