"""Two-player checkers rule engine over dense or sparse board storage."""

from .board import CheckerBoard, Representation, newBoard
from .config import GameConfig
from .direction import Direction, getDirection
from .errors import CheckersError, IllegalPlacement, InvalidDimension, InvalidPlayerSymbol
from .position import Coordinate, Position
from .render import render_board
from .symbols import BOARD_MAX_SIZE, BOARD_MIN_SIZE, EMPTY_POS, NON_PLAYABLE

__all__ = [
    "CheckerBoard",
    "Representation",
    "newBoard",
    "GameConfig",
    "Direction",
    "getDirection",
    "CheckersError",
    "IllegalPlacement",
    "InvalidDimension",
    "InvalidPlayerSymbol",
    "Coordinate",
    "Position",
    "render_board",
    "BOARD_MAX_SIZE",
    "BOARD_MIN_SIZE",
    "EMPTY_POS",
    "NON_PLAYABLE",
]
