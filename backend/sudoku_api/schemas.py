"""Request body contracts for the JSON routes.

Every field is optional and coerced in pydantic's lax mode; nothing here
rejects a value the store would accept. A body that cannot be coerced raises
``pydantic.ValidationError``, which handlers treat like any store failure.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RequestBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    @classmethod
    def from_json(cls, data):
        return cls.model_validate(data or {})


class LeaderboardSubmission(RequestBody):
    puzzle_id: Optional[int] = Field(default=None, alias='puzzleId')
    player_name: Optional[str] = Field(default=None, alias='playerName')
    completion_time: Optional[float] = Field(default=None, alias='completionTime')


class RoomCreate(RequestBody):
    room_code: Optional[str] = Field(default=None, alias='roomCode')
    game_code: Optional[str] = Field(default=None, alias='gameCode')
    user_name: Optional[str] = Field(default=None, alias='userName')


class GameStart(RequestBody):
    room_code: Optional[str] = Field(default=None, alias='roomCode')
    player_name: Optional[str] = Field(default=None, alias='playerName')


class ProgressUpdate(RequestBody):
    room_code: Optional[str] = Field(default=None, alias='roomCode')
    # Percentage of the grid filled in
    completed: Optional[float] = None
    player_name: Optional[str] = Field(default=None, alias='playerName')
