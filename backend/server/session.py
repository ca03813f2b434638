from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock
from typing import Any, Optional

from checkerboard.board import CheckerBoard, Representation, newBoard
from checkerboard.direction import Direction
from checkerboard.position import Position

from .schemas import MoveRequest, NewGameRequest
from .serializers import serialize_directions, serialize_game, serialize_position

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TurnRecord:
    player: str
    start: Position
    end: Position
    direction: Direction
    is_jump: bool
    crowned: bool


class GameSession:
    """Thread-safe orchestrator around a single CheckerBoard.

    Player one moves first. A turn tries a plain move in the chosen
    direction and falls back to a jump, then passes to the other player.
    """

    def __init__(self, request: Optional[NewGameRequest] = None) -> None:
        self.lock = Lock()
        self._start_locked(request or NewGameRequest())

    # public API ---------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        with self.lock:
            return self._serialize_locked()

    def render(self) -> str:
        with self.lock:
            return str(self.board)

    def reset(self, payload: Optional[NewGameRequest] = None) -> dict[str, Any]:
        with self.lock:
            self._start_locked(payload or self.settings)
            return self._serialize_locked()

    def read_cell(self, row: int, col: int) -> dict[str, Any]:
        with self.lock:
            pos = Position(row, col)
            return {
                "position": serialize_position(pos),
                "symbol": self.board.whatsAtPos(pos),
                "surrounding": {
                    direction.value: symbol
                    for direction, symbol in self.board.scanSurroundingPositions(pos).items()
                },
            }

    def get_viable_directions(self, row: int, col: int) -> dict[str, Any]:
        with self.lock:
            pos = Position(row, col)
            symbol = self._require_own_piece(pos)
            return {
                "piece": serialize_position(pos),
                "symbol": symbol,
                "directions": serialize_directions(self._directions_for(symbol)),
            }

    def make_move(self, payload: MoveRequest) -> dict[str, Any]:
        with self.lock:
            if self.winner is not None:
                raise RuntimeError(f"Game is over; player {self.winner!r} has won.")
            start = Position(payload.start.row, payload.start.col)
            direction = Direction(payload.direction)
            symbol = self._require_own_piece(start)
            if direction not in self._directions_for(symbol):
                raise ValueError(f"Direction {direction.value} is not available for piece {symbol!r}.")

            is_jump = False
            end = self.board.movePiece(start, direction)
            if end == start:
                end = self.board.jumpPiece(start, direction)
                is_jump = end != start
            if end == start:
                logger.info("Rejected %s from %s for player %r", direction.value, start, self.current_player)
                raise RuntimeError("Move execution failed.")

            crowned = self.board.whatsAtPos(end) != symbol
            self.last_turn = TurnRecord(
                player=self.current_player,
                start=start,
                end=end,
                direction=direction,
                is_jump=is_jump,
                crowned=crowned,
            )
            self.move_count += 1
            logger.debug("Player %r moved %s -> %s (jump=%s)", self.current_player, start, end, is_jump)

            self.winner = self._find_winner()
            if self.winner is not None:
                logger.info("Player %r has won after %d moves", self.winner, self.move_count)
            self.current_player = self.board.config.opponent_of(self.current_player)
            return self._serialize_locked()

    # helpers ------------------------------------------------------------

    def _start_locked(self, request: NewGameRequest) -> None:
        board = newBoard(
            request.dimension,
            representation=Representation(request.representation),
            player_one=request.playerOne,
            player_two=request.playerTwo,
        )
        self.settings = request
        self.board: CheckerBoard = board
        self.current_player: str = board.config.player_one
        self.winner: Optional[str] = None
        self.move_count = 0
        self.last_turn: Optional[TurnRecord] = None
        logger.info(
            "New %dx%d %s game: %r vs %r",
            request.dimension,
            request.dimension,
            request.representation,
            request.playerOne,
            request.playerTwo,
        )

    def _serialize_locked(self) -> dict[str, Any]:
        return serialize_game(
            self.board,
            self.current_player,
            self.winner,
            self.move_count,
            self.last_turn,
        )

    def _require_own_piece(self, pos: Position) -> str:
        symbol = self.board.whatsAtPos(pos)
        if self.board.config.owner_of(symbol) != self.current_player:
            raise ValueError(f"Player {self.current_player!r}, that isn't your piece at {pos}.")
        return symbol

    def _directions_for(self, symbol: str) -> list[Direction]:
        return self.board.getViableDirections().get(symbol, [])

    def _find_winner(self) -> Optional[str]:
        for player in self.board.config.players:
            if self.board.checkPlayerWin(player):
                return player
        return None
