"""Database model and request schema for festival teams."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Team(SQLModel, table=True):
    """Team entering participants into festival events."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str
    captain_name: Optional[str] = None
    description: Optional[str] = None
    participants_json: str = "[]"
    created_at: datetime = ORMField(default_factory=utcnow, index=True)


class ParticipantInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    category: Optional[str] = None
    chest_number: Optional[str] = Field(default=None, alias="chestNumber")


class TeamInput(BaseModel):
    """Body accepted by ``POST /teams``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    captain_name: Optional[str] = Field(default=None, alias="captainName")
    description: Optional[str] = None
    participants: List[ParticipantInput] = Field(default_factory=list)


__all__ = ["ParticipantInput", "Team", "TeamInput"]
