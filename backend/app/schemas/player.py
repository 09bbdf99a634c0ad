# backend/app/schemas/player.py
from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

from ..core.time_utils import datetime_to_epoch_millis
from ..models.player import Profession, Race

# --- Request Schemas ---

class PlayerPayload(BaseModel):
    """
    Fields a caller may send for a player. Every field is optional here;
    which ones are required and what ranges apply is decided by the player
    service, so a missing name on create and a too-long name on update
    fail the same way. `id`, `level` and `untilNextLevel` are never read
    from a payload.
    """
    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    birthday: Optional[int] = Field(None, description="Epoch milliseconds (UTC)")
    banned: Optional[bool] = None
    experience: Optional[int] = None

class PlayerCreate(PlayerPayload):
    """
    Schema for creating a new player. `banned` defaults to false when absent.
    """
    pass

class PlayerUpdate(PlayerPayload):
    """
    Schema for a partial update. Only non-null fields overwrite the stored player.
    """
    pass

# --- Response Schema ---

class Player(BaseModel):
    """
    Schema for returning a stored player to the client.
    """
    id: int
    name: str
    title: str
    race: Race
    profession: Profession
    birthday: int = Field(..., description="Epoch milliseconds (UTC)")
    banned: bool
    experience: int
    level: int
    until_next_level: int = Field(..., serialization_alias="untilNextLevel")

    @field_validator("birthday", mode="before")
    @classmethod
    def _birthday_to_millis(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return datetime_to_epoch_millis(value)
        return value

    class Config:
        from_attributes = True
