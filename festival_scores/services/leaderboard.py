"""Per-team standings built from stored result records.

Two aggregations exist and answer different questions:

* ``team_totals`` sums at position-entry granularity. A single result can
  credit several teams, one entry at a time.
* ``group_team_totals`` sums at record granularity over group events only,
  grouped by the record's own team reference.

Both sort by points descending (ties keep first-seen order) and resolve
team names through the team directory.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlmodel import Session, col, select

from ..models import Score
from .categories import category_filter
from .positions import coerce_points
from .scores import score_positions
from .teams import TeamDirectory

logger = logging.getLogger(__name__)

TEAM_NOT_FOUND = "Team Not Found"


def _with_names(
    totals: List[Dict[str, Any]], directory: TeamDirectory
) -> List[Dict[str, Any]]:
    names = directory.resolve_team_names(row["teamId"] for row in totals)
    standings = []
    for row in totals:
        name = names.get(row["teamId"])
        if name is None:
            logger.warning("Leaderboard team %s could not be resolved", row["teamId"])
            name = TEAM_NOT_FOUND
        standings.append(
            {
                "teamId": row["teamId"],
                "teamName": name,
                "totalPoints": row["totalPoints"],
                "entries": row["entries"],
            }
        )
    return standings


def team_totals(
    session: Session,
    category: Optional[str] = None,
    *,
    directory: Optional[TeamDirectory] = None,
) -> List[Dict[str, Any]]:
    """Individual-mode standings, optionally limited to one category."""

    statement = select(Score).order_by(col(Score.id))
    wanted = category_filter(category)
    if wanted is not None:
        statement = statement.where(Score.category == wanted)

    totals: Dict[int, Dict[str, Any]] = {}
    for score in session.exec(statement):
        for entry in score_positions(score):
            team_id = entry.get("teamId")
            if team_id is None:
                continue
            bucket = totals.setdefault(
                team_id, {"teamId": team_id, "totalPoints": 0, "entries": 0}
            )
            bucket["totalPoints"] += coerce_points(entry.get("points"))
            bucket["entries"] += 1

    ordered = sorted(totals.values(), key=lambda row: row["totalPoints"], reverse=True)
    logger.debug("Team totals (category=%s): %s teams", wanted or "All", len(ordered))
    return _with_names(ordered, directory or TeamDirectory(session))


def group_team_totals(
    session: Session,
    *,
    directory: Optional[TeamDirectory] = None,
) -> List[Dict[str, Any]]:
    """Group-mode standings: one entry per group result, by record team."""

    points = func.sum(Score.total_points)
    rows = session.exec(
        select(Score.team_id, points, func.count(Score.id))
        .where(Score.is_group_event == True)  # noqa: E712
        .group_by(Score.team_id)
        .order_by(points.desc(), func.min(Score.id))
    ).all()

    totals = [
        {"teamId": team_id, "totalPoints": int(total or 0), "entries": int(entries)}
        for team_id, total, entries in rows
    ]
    logger.debug("Group team totals: %s teams", len(totals))
    return _with_names(totals, directory or TeamDirectory(session))


__all__ = ["TEAM_NOT_FOUND", "group_team_totals", "team_totals"]
