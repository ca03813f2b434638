from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from checkerboard.board import CheckerBoard
from checkerboard.direction import Direction
from checkerboard.position import Position

if TYPE_CHECKING:  # pragma: no cover
    from .session import TurnRecord


def serialize_position(pos: Position) -> dict[str, int]:
    return {"row": pos.row, "col": pos.col}


def serialize_directions(directions: list[Direction]) -> list[str]:
    return [direction.value for direction in directions]


def serialize_turn(record: Optional["TurnRecord"]) -> Optional[dict[str, Any]]:
    if record is None:
        return None
    return {
        "player": record.player,
        "start": serialize_position(record.start),
        "end": serialize_position(record.end),
        "direction": record.direction.value,
        "isJump": record.is_jump,
        "crowned": record.crowned,
    }


def serialize_board(board: CheckerBoard) -> dict[str, Any]:
    rows = [
        [board.whatsAtPos(Position(row, col)) for col in range(board.getColCount())]
        for row in range(board.getRowCount())
    ]
    return {
        "boardSize": board.config.dimension,
        "representation": board.representation.value,
        "players": {
            "one": board.config.player_one,
            "two": board.config.player_two,
        },
        "cells": rows,
        "pieceCounts": board.getPieceCounts(),
        "viableDirections": {
            symbol: serialize_directions(directions)
            for symbol, directions in board.getViableDirections().items()
        },
    }


def serialize_game(
    board: CheckerBoard,
    current_player: str,
    winner: Optional[str],
    move_count: int,
    last_turn: Optional["TurnRecord"],
) -> dict[str, Any]:
    payload = serialize_board(board)
    payload.update(
        {
            "turn": current_player,
            "winner": winner,
            "moveCount": move_count,
            "lastMove": serialize_turn(last_turn),
        }
    )
    return payload
