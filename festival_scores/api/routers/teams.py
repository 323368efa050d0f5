"""Team directory endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from ...core import get_session, require_admin
from ...models import TeamInput
from ...services import TeamNotFoundError
from ...services.teams import (
    create_team,
    delete_team,
    get_team,
    list_teams,
    team_participants,
    team_to_dict,
)

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("")
def get_teams(session: Session = Depends(get_session)) -> List[Dict[str, Any]]:
    """List teams, newest first."""

    return [team_to_dict(team) for team in list_teams(session)]


@router.post("", status_code=201)
def post_team(
    body: TeamInput,
    session: Session = Depends(get_session),
    _admin: str = Depends(require_admin),
) -> Dict[str, Any]:
    return team_to_dict(create_team(session, body))


@router.get("/{team_id}")
def get_team_by_id(team_id: int, session: Session = Depends(get_session)):
    try:
        team = get_team(session, team_id)
    except TeamNotFoundError as exc:
        raise HTTPException(404, "Team not found") from exc
    return team_to_dict(team)


@router.get("/{team_id}/participants")
def get_team_participants(
    team_id: int,
    category: Optional[str] = None,
    session: Session = Depends(get_session),
):
    """Participants of a team, optionally filtered by category."""

    try:
        team = get_team(session, team_id)
    except TeamNotFoundError as exc:
        raise HTTPException(404, "Team not found") from exc
    return team_participants(team, category)


@router.delete("/{team_id}")
def remove_team(
    team_id: int,
    session: Session = Depends(get_session),
    _admin: str = Depends(require_admin),
) -> Dict[str, bool]:
    delete_team(session, team_id)
    return {"ok": True}


__all__ = ["router"]
