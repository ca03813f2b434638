from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

from .config import GameConfig
from .dense import DenseStorage
from .direction import ALL_DIRECTIONS, Direction, getDirection
from .errors import IllegalPlacement
from .position import Coordinate, Position
from .render import render_board
from .sparse import SparseStorage
from .storage import BoardStorage
from .symbols import EMPTY_POS, NON_PLAYABLE, crowned, is_crowned

logger = logging.getLogger(__name__)

PositionLike = Union[Position, Coordinate]
DirectionMap = dict[str, list[Direction]]
BoardStatePiece = tuple[int, int, str]
BoardState = tuple[int, tuple[BoardStatePiece, ...]]


class Representation(str, Enum):
    DENSE = "dense"
    SPARSE = "sparse"


def make_storage(config: GameConfig, representation: Representation) -> BoardStorage:
    representation = Representation(representation)
    if representation is Representation.DENSE:
        return DenseStorage(config.dimension)
    return SparseStorage(config.dimension, config.piece_symbols)


def _as_position(pos: PositionLike) -> Position:
    if isinstance(pos, Position):
        return pos
    return Position.of(pos)


class CheckerBoard:
    """Checkers rules written once against a :class:`BoardStorage`.

    Movement never raises for an illegal request: ``movePiece`` and
    ``jumpPiece`` hand back the starting position unchanged instead, and the
    caller compares it with what it passed in.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        representation: Representation = Representation.DENSE,
        *,
        populate: bool = True,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.representation = Representation(representation)
        self.storage: BoardStorage = make_storage(self.config, self.representation)
        self._viable_directions: DirectionMap = {}
        if populate:
            self._set_start_pieces()
        self._seed_viable_directions()

    @classmethod
    def empty(
        cls,
        config: Optional[GameConfig] = None,
        representation: Representation = Representation.DENSE,
    ) -> "CheckerBoard":
        return cls(config, representation, populate=False)

    # contract -----------------------------------------------------------

    def placePiece(self, pos: PositionLike, symbol: str) -> None:
        """Write ``symbol`` at ``pos`` without any move-legality checks.

        Placing ``EMPTY_POS`` clears the cell. Placing ``EMPTY_POS`` or
        ``NON_PLAYABLE`` on a dark tile leaves it as it is.
        """
        pos = _as_position(pos)
        if not self._is_within_bounds(pos):
            raise IllegalPlacement(f"Position {pos} is outside the {self.getRowCount()}x{self.getColCount()} board.")
        if symbol in (EMPTY_POS, NON_PLAYABLE):
            if not pos.is_playable:
                return
            if symbol == NON_PLAYABLE:
                raise IllegalPlacement(f"Position {pos} is a playable tile.")
            self.storage.place(pos, EMPTY_POS)
            return
        if symbol not in self.config.piece_symbols:
            raise IllegalPlacement(f"Unknown piece symbol {symbol!r}.")
        if not pos.is_playable:
            raise IllegalPlacement(f"Position {pos} is not a playable tile.")
        self.storage.place(pos, symbol)

    def whatsAtPos(self, pos: PositionLike) -> str:
        pos = _as_position(pos)
        if not self._is_within_bounds(pos):
            return EMPTY_POS
        if not pos.is_playable:
            return NON_PLAYABLE
        return self.storage.symbol_at(pos)

    def getRowCount(self) -> int:
        return self.storage.dimension

    def getColCount(self) -> int:
        return self.storage.dimension

    def getPieceCounts(self) -> dict[str, int]:
        return {
            player: self.storage.count(player) + self.storage.count(crowned(player))
            for player in self.config.players
        }

    def getViableDirections(self) -> DirectionMap:
        return {symbol: list(directions) for symbol, directions in self._viable_directions.items()}

    # rules --------------------------------------------------------------

    def addViableDirections(self, player: str, direction: Direction) -> None:
        """Allow ``player`` to move in ``direction``.

        The crowned symbol gets ``direction`` and its opposite; the
        ``EMPTY_POS`` bucket collects every direction registered.
        """
        direction = Direction(direction)
        self._register_directions(player, direction)
        self._register_directions(crowned(player), direction, direction.opposite)
        self._register_directions(EMPTY_POS, direction)

    def movePiece(self, startPos: PositionLike, direction: Direction) -> Position:
        start = _as_position(startPos)
        piece = self.whatsAtPos(start)
        if self.config.owner_of(piece) is None:
            return start

        target = start + getDirection(direction)
        if not self._is_within_bounds(target) or self.whatsAtPos(target) != EMPTY_POS:
            return start

        self.placePiece(start, EMPTY_POS)
        self.placePiece(target, piece)
        self.crownPiece(target)
        return target

    def jumpPiece(self, startPos: PositionLike, direction: Direction) -> Position:
        start = _as_position(startPos)
        piece = self.whatsAtPos(start)
        opponent = self.config.opponent_of(piece)
        if opponent is None:
            return start

        step = getDirection(direction)
        over = start + step
        landing = start + step.doubled()
        if not (self._is_within_bounds(over) and self._is_within_bounds(landing)):
            return start
        if self.config.owner_of(self.whatsAtPos(over)) != opponent:
            return start
        if self.whatsAtPos(landing) != EMPTY_POS:
            return start

        self.placePiece(landing, piece)
        self.placePiece(over, EMPTY_POS)
        self.placePiece(start, EMPTY_POS)
        self.crownPiece(landing)
        return landing

    def crownPiece(self, pos: PositionLike) -> bool:
        pos = _as_position(pos)
        piece = self.whatsAtPos(pos)
        if self.config.owner_of(piece) is None or is_crowned(piece):
            return False
        if pos.row != self.config.promotion_row(piece):
            return False
        self.placePiece(pos, crowned(piece))
        return True

    def checkPlayerWin(self, player: str) -> bool:
        owner = self.config.owner_of(player)
        if owner is None:
            return False
        opponent = self.config.opponent_of(owner)

        player_count = 0
        opponent_count = 0
        for row in range(self.getRowCount()):
            for col in range(self.getColCount()):
                cell_owner = self.config.owner_of(self.whatsAtPos(Position(row, col)))
                if cell_owner == owner:
                    player_count += 1
                elif cell_owner == opponent:
                    opponent_count += 1
        return player_count > 0 and opponent_count == 0

    def playerLostPieces(self, numPieces: int, player: str, pieceCounts: dict[str, int]) -> None:
        """Decrease ``pieceCounts[player]`` by ``numPieces``, never below zero."""
        if numPieces < 0:
            raise ValueError("numPieces must not be negative.")
        if player in pieceCounts:
            pieceCounts[player] = max(pieceCounts[player] - numPieces, 0)

    def scanSurroundingPositions(self, pos: PositionLike) -> dict[Direction, str]:
        origin = _as_position(pos)
        surrounding: dict[Direction, str] = {}
        for direction in ALL_DIRECTIONS:
            neighbour = origin + getDirection(direction)
            if self._is_within_bounds(neighbour):
                surrounding[direction] = self.whatsAtPos(neighbour)
            else:
                surrounding[direction] = EMPTY_POS
        return surrounding

    getDirection = staticmethod(getDirection)

    # helpers ------------------------------------------------------------

    def to_state(self) -> BoardState:
        pieces = sorted(
            (pos.row, pos.col, symbol)
            for symbol in self.config.piece_symbols
            for pos in self.storage.positions(symbol)
        )
        return (self.config.dimension, tuple(pieces))

    def copy(self, representation: Optional[Representation] = None) -> "CheckerBoard":
        target = self.representation if representation is None else Representation(representation)
        clone = CheckerBoard.empty(self.config, target)
        for row, col, symbol in self.to_state()[1]:
            clone.storage.place(Position(row, col), symbol)
        clone._viable_directions = self.getViableDirections()
        return clone

    def _set_start_pieces(self) -> None:
        rows = self.config.rows_per_side
        last_row = self.config.dimension - 1
        for offset in range(rows):
            for col in range(self.config.dimension):
                top = Position(offset, col)
                if top.is_playable:
                    self.storage.place(top, self.config.player_one)
                bottom = Position(last_row - offset, col)
                if bottom.is_playable:
                    self.storage.place(bottom, self.config.player_two)

    def _seed_viable_directions(self) -> None:
        for player in self.config.players:
            for direction in self.config.forward_directions(player):
                self.addViableDirections(player, direction)

    def _register_directions(self, symbol: str, *directions: Direction) -> None:
        registered = self._viable_directions.setdefault(symbol, [])
        for direction in directions:
            if direction not in registered:
                registered.append(direction)

    def _is_within_bounds(self, pos: Position) -> bool:
        return pos.is_valid(self.getRowCount(), self.getColCount())

    def __str__(self) -> str:
        return render_board(self)

    def __repr__(self) -> str:
        counts = self.getPieceCounts()
        return (
            f"CheckerBoard({self.config.dimension}x{self.config.dimension}, "
            f"{self.representation.value}, {counts})"
        )


def newBoard(
    dimension: int = 8,
    *,
    representation: Representation = Representation.DENSE,
    player_one: str = "x",
    player_two: str = "o",
) -> CheckerBoard:
    """Build a board with both sides in their starting rows.

    Raises :class:`~checkerboard.errors.InvalidDimension` when ``dimension``
    is odd or outside 8..16.
    """
    config = GameConfig(dimension=dimension, player_one=player_one, player_two=player_two)
    board = CheckerBoard(config, representation)
    logger.debug(
        "Created %s board %dx%d for %r vs %r",
        board.representation.value,
        dimension,
        dimension,
        player_one,
        player_two,
    )
    return board
