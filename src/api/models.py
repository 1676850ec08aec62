"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import AVAILABLE_PLAYER_NAMES, State

PlayerName = str
ParticipantId = str


def _validate_player_name(value: str) -> str:
    if value.upper() not in AVAILABLE_PLAYER_NAMES:
        raise InvalidRequestError(
            f"Unknown player {value!r}. Pick one from {','.join(name.lower() for name in AVAILABLE_PLAYER_NAMES)}."
        )
    return value.lower()


class ParticipantRequest(BaseModel):
    """Any request made on behalf of a connected participant."""

    game_id: UUID
    participant_id: ParticipantId

    @field_validator("participant_id")
    @classmethod
    def validate_participant_id(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("participant_id cannot be blank.")
        return value


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    starting_player: Optional[PlayerName] = None

    @field_validator("starting_player")
    @classmethod
    def validate_starting_player(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return _validate_player_name(value)


class JoinGameRequest(ParticipantRequest):
    pass


class LeaveGameRequest(ParticipantRequest):
    pass


class MoveRequest(ParticipantRequest):
    # NOTE range is not checked here: the game itself rejects moves off the board
    row: int
    col: int


class DeclareWinnerRequest(BaseModel):
    game_id: UUID
    player: PlayerName

    @field_validator("player")
    @classmethod
    def validate_player(cls, value: str) -> str:
        return _validate_player_name(value)


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    status: State
    board: list[list[str]]
    rendered_board: str
    turn: int
    players: dict[PlayerName, ParticipantId]
    winner: Optional[PlayerName]
    is_draw: bool
    accepted: bool = True
    reason: Optional[str] = None
