"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError, ParseError
from src.corridor.history import History
from src.corridor.moves import parse_move

SquareLabel = str
WallLabel = str


def _validate_history(value: str) -> str:
    try:
        History.from_string(value)
    except ParseError as err:
        raise InvalidRequestError(f"Cannot interpret history {value!r}: {err}") from err
    return value


# --- REQUEST MODELS ---
class GameStateRequest(BaseModel):
    history: str

    @field_validator("history")
    @classmethod
    def validate_history(cls, value: str) -> str:
        return _validate_history(value)


class LegalMovesRequest(BaseModel):
    history: str

    @field_validator("history")
    @classmethod
    def validate_history(cls, value: str) -> str:
        return _validate_history(value)


class MoveRequest(BaseModel):
    history: str
    move: str

    @field_validator("history")
    @classmethod
    def validate_history(cls, value: str) -> str:
        return _validate_history(value)

    @field_validator("move")
    @classmethod
    def validate_move(cls, value: str) -> str:
        try:
            parse_move(value)
        except ParseError as err:
            raise InvalidRequestError(
                f"Cannot interpret move: {value!r} as a square or a wall."
            ) from err
        return value


# --- RESPONSE MODELS ---
class LegalMovesResponse(BaseModel):
    history: str
    player: int
    pawn_moves: list[SquareLabel]
    wall_moves: list[WallLabel]


class GameStateResponse(BaseModel):
    history: str
    next_player: int
    pawns: list[SquareLabel]
    walls: list[WallLabel]
    head_to_head: bool
    winner: Optional[int]
