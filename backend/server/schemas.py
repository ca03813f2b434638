from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from checkerboard.symbols import BOARD_MAX_SIZE, BOARD_MIN_SIZE

DirectionLabel = Literal["NE", "NW", "SE", "SW"]
RepresentationLabel = Literal["dense", "sparse"]


class CoordinateModel(BaseModel):
    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)


class MoveRequest(BaseModel):
    start: CoordinateModel
    direction: DirectionLabel


class NewGameRequest(BaseModel):
    dimension: int = Field(
        default=8,
        ge=BOARD_MIN_SIZE,
        le=BOARD_MAX_SIZE,
        description="Even board size; odd sizes are rejected by the engine.",
    )
    playerOne: str = Field(default="x", min_length=1, max_length=1)
    playerTwo: str = Field(default="o", min_length=1, max_length=1)
    representation: RepresentationLabel = "dense"
