"""Database model and request schemas for result records."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class Score(SQLModel, table=True):
    """Scored outcome for one event, holding ranked position entries."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    event_id: int = ORMField(index=True)
    team_id: Optional[int] = ORMField(default=None, index=True)
    category: Optional[str] = ORMField(default=None, index=True)
    is_group_event: bool = ORMField(default=False, index=True)
    positions_json: str = "[]"
    total_points: int = 0
    published: bool = ORMField(default=False, index=True)
    remarks: Optional[str] = None
    created_at: datetime = ORMField(default_factory=utcnow, index=True)
    updated_at: datetime = ORMField(default_factory=utcnow)


class ScoreInput(BaseModel):
    """Body accepted by ``POST /scores``."""

    model_config = ConfigDict(populate_by_name=True)

    event_id: int = Field(alias="eventId")
    team_id: Optional[int] = Field(default=None, alias="teamId")
    category: Optional[str] = None
    is_group_event: bool = Field(default=False, alias="isGroupEvent")
    # Raw entries stay loosely typed; malformed ones are filtered, not rejected.
    positions: List[Dict[str, Any]] = Field(default_factory=list)
    remarks: Optional[str] = None
    published: Optional[bool] = None


class ScoreUpdateInput(BaseModel):
    """Body accepted by ``PUT /scores/{id}``.

    ``positions`` always replaces the stored list. Other omitted fields keep
    their stored values.
    """

    model_config = ConfigDict(populate_by_name=True)

    event_id: Optional[int] = Field(default=None, alias="eventId")
    team_id: Optional[int] = Field(default=None, alias="teamId")
    category: Optional[str] = None
    is_group_event: Optional[bool] = Field(default=None, alias="isGroupEvent")
    positions: List[Dict[str, Any]] = Field(default_factory=list)
    remarks: Optional[str] = None
    published: Optional[bool] = None


class PublishRequest(BaseModel):
    """Body accepted by ``POST /scores/publish``."""

    model_config = ConfigDict(populate_by_name=True)

    score_ids: Optional[List[int]] = Field(default=None, alias="scoreIds")
    published: Any = True


__all__ = ["PublishRequest", "Score", "ScoreInput", "ScoreUpdateInput"]
