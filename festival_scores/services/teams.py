"""Team directory lookups and minimal team record helpers."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, List, Optional

from sqlmodel import Session, col, select

from ..core.time import isoformat_utc
from ..models import Team, TeamInput
from .categories import category_filter, normalize_category
from .errors import TeamNotFoundError

logger = logging.getLogger(__name__)


class TeamDirectory:
    """Read-only view of teams used by validation and leaderboards."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def resolve_team_name(self, team_id: Optional[int]) -> Optional[str]:
        if team_id is None:
            return None
        team = self.session.get(Team, team_id)
        return team.name if team else None

    def resolve_team_names(self, team_ids: Iterable[Optional[int]]) -> Dict[int, str]:
        """Look up several names with one query; unknown ids are omitted."""

        ids = {team_id for team_id in team_ids if team_id is not None}
        if not ids:
            return {}
        rows = self.session.exec(
            select(Team.id, Team.name).where(col(Team.id).in_(sorted(ids)))
        ).all()
        return {team_id: name for team_id, name in rows}

    def is_valid_team_reference(self, team_id: Any) -> bool:
        if not isinstance(team_id, int) or isinstance(team_id, bool) or team_id < 1:
            return False
        return self.session.get(Team, team_id) is not None


def _participants_from_input(data: TeamInput) -> List[Dict[str, Any]]:
    return [
        {
            "name": participant.name.strip(),
            "category": normalize_category(participant.category),
            "chestNumber": participant.chest_number,
        }
        for participant in data.participants
        if participant.name and participant.name.strip()
    ]


def team_participants(team: Team, category: Optional[str] = None) -> List[Dict[str, Any]]:
    """Return a team's participants, optionally limited to one category."""

    participants = json.loads(team.participants_json or "[]")
    wanted = category_filter(category)
    if wanted is None:
        return participants
    return [p for p in participants if p.get("category") == wanted]


def team_to_dict(team: Team) -> Dict[str, Any]:
    """Serialise a team model to API-friendly dict."""

    return {
        "id": team.id,
        "name": team.name,
        "captainName": team.captain_name,
        "description": team.description,
        "participants": team_participants(team),
        "createdAt": isoformat_utc(team.created_at),
    }


def create_team(session: Session, data: TeamInput) -> Team:
    team = Team(
        name=data.name.strip(),
        captain_name=data.captain_name,
        description=data.description,
        participants_json=json.dumps(_participants_from_input(data)),
    )
    session.add(team)
    session.commit()
    session.refresh(team)
    logger.info("Created team %s (%s)", team.id, team.name)
    return team


def list_teams(session: Session) -> List[Team]:
    return list(
        session.exec(
            select(Team).order_by(col(Team.created_at).desc(), col(Team.id).desc())
        ).all()
    )


def get_team(session: Session, team_id: int) -> Team:
    team = session.get(Team, team_id)
    if not team:
        raise TeamNotFoundError(team_id)
    return team


def delete_team(session: Session, team_id: int) -> bool:
    """Delete a team. Missing ids are a no-op; returns whether a row existed."""

    team = session.get(Team, team_id)
    if not team:
        logger.warning("Delete requested for missing team %s", team_id)
        return False
    session.delete(team)
    session.commit()
    logger.info("Deleted team %s", team_id)
    return True


__all__ = [
    "TeamDirectory",
    "create_team",
    "delete_team",
    "get_team",
    "list_teams",
    "team_participants",
    "team_to_dict",
]
