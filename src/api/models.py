"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.chess.square import BOARD_DIMENSIONS
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType, Policy


# --- SHARED MODELS ---
class SquareModel(BaseModel):
    x: int
    y: int

    @field_validator(*["x", "y"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        if not 0 <= value < BOARD_DIMENSIONS[0]:
            raise InvalidRequestError(
                f"Coordinate {value} is off the board. Must lie in [0, {BOARD_DIMENSIONS[0] - 1}]."
            )
        return value


class PieceModel(BaseModel):
    type: PieceType
    color: Color
    symbol: str


# --- REQUEST MODELS ---
class CreateSessionRequest(BaseModel):
    policy: Policy = Policy.SIMPLIFIED


class GetSessionRequest(BaseModel):
    session_id: UUID


class PossibleMovesRequest(BaseModel):
    session_id: UUID
    square: SquareModel


class ClickRequest(BaseModel):
    session_id: UUID
    square: SquareModel


class MoveRequest(BaseModel):
    session_id: UUID
    from_square: SquareModel
    to_square: SquareModel


class DeleteSessionRequest(BaseModel):
    session_id: UUID


# --- RESPONSE MODELS ---
class SessionResponse(BaseModel):
    session_id: UUID
    board: list[list[Optional[PieceModel]]]
    current_player: Color
    status: str
    selected: Optional[SquareModel]
    possible_moves: list[SquareModel]
    captured: list[PieceModel]
    policy: Policy


class PossibleMovesResponse(BaseModel):
    session_id: UUID
    square: SquareModel
    color: Color
    possible_moves: list[SquareModel]


class ClickResponse(BaseModel):
    outcome: str
    session: SessionResponse
