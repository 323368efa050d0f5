"""Persistence and publish-state transitions for result records.

Every write runs the same pipeline: the category is normalised (or cleared
for group events), raw position entries are validated, and ``total_points``
is recomputed from the accepted entries.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlalchemy import func, update
from sqlmodel import Session, col, select

from ..core.time import isoformat_utc, utcnow
from ..models import Score, ScoreInput, ScoreUpdateInput
from .categories import category_filter, category_for_result
from .errors import ScoreNotFoundError, ScoreValidationError
from .points import compute_total
from .positions import PositionEntry, TeamReferenceCheck, validate_positions_with_diagnostics
from .teams import TeamDirectory

logger = logging.getLogger(__name__)


def _accepted_positions(
    raw_positions: Sequence[Any],
    is_valid_team_reference: Optional[TeamReferenceCheck],
) -> List[PositionEntry]:
    accepted, dropped = validate_positions_with_diagnostics(
        raw_positions, is_valid_team_reference
    )
    dropped_indexes = {item["index"] for item in dropped}
    raw_indexes = [i for i in range(len(raw_positions)) if i not in dropped_indexes]

    for raw_index, entry in zip(raw_indexes, accepted):
        if entry["position"] < 1:
            raise ScoreValidationError(
                f"positions[{raw_index}].position", "Position must be an integer >= 1"
            )
    return accepted


def _apply_scoring(
    score: Score,
    *,
    category: Optional[str],
    is_group_event: bool,
    positions: List[PositionEntry],
) -> None:
    score.is_group_event = is_group_event
    score.category = category_for_result(category, is_group_event)
    score.positions_json = json.dumps(positions)
    score.total_points = compute_total(positions)


def _team_check(
    session: Session, is_valid_team_reference: Optional[TeamReferenceCheck]
) -> TeamReferenceCheck:
    if is_valid_team_reference is not None:
        return is_valid_team_reference
    return TeamDirectory(session).is_valid_team_reference


def score_positions(score: Score) -> List[PositionEntry]:
    return json.loads(score.positions_json or "[]")


def score_to_dict(score: Score) -> Dict[str, Any]:
    """Serialise a score model to API-friendly dict."""

    return {
        "id": score.id,
        "eventId": score.event_id,
        "teamId": score.team_id,
        "category": score.category,
        "isGroupEvent": score.is_group_event,
        "positions": score_positions(score),
        "totalPoints": score.total_points,
        "published": score.published,
        "remarks": score.remarks,
        "createdAt": isoformat_utc(score.created_at),
        "updatedAt": isoformat_utc(score.updated_at),
    }


def create_score(
    session: Session,
    data: ScoreInput,
    *,
    is_valid_team_reference: Optional[TeamReferenceCheck] = None,
) -> Score:
    """Validate, score and persist a new result record (draft unless told otherwise)."""

    score = Score(
        event_id=data.event_id,
        team_id=data.team_id,
        remarks=data.remarks,
        published=bool(data.published) if data.published is not None else False,
    )
    positions = _accepted_positions(
        data.positions, _team_check(session, is_valid_team_reference)
    )
    _apply_scoring(
        score,
        category=data.category,
        is_group_event=data.is_group_event,
        positions=positions,
    )
    session.add(score)
    session.commit()
    session.refresh(score)
    logger.info(
        "Created score %s for event %s (total=%s, group=%s)",
        score.id,
        score.event_id,
        score.total_points,
        score.is_group_event,
    )
    return score


def get_score(session: Session, score_id: int) -> Score:
    score = session.get(Score, score_id)
    if not score:
        raise ScoreNotFoundError(score_id)
    return score


def update_score(
    session: Session,
    score_id: int,
    data: ScoreUpdateInput,
    *,
    is_valid_team_reference: Optional[TeamReferenceCheck] = None,
) -> Score:
    """Replace a record's positions and rerun the scoring pipeline.

    Fields left out of ``data`` keep their stored values, except
    ``positions`` which is always replaced wholesale.
    """

    score = get_score(session, score_id)

    if data.event_id is not None and data.event_id != score.event_id:
        raise ScoreValidationError("eventId", "eventId cannot be changed")

    # Positions are validated before any field on the record is assigned.
    positions = _accepted_positions(
        data.positions, _team_check(session, is_valid_team_reference)
    )

    provided = data.model_fields_set
    if "team_id" in provided:
        score.team_id = data.team_id
    if "remarks" in provided:
        score.remarks = data.remarks
    if data.published is not None:
        score.published = bool(data.published)

    is_group_event = (
        data.is_group_event if data.is_group_event is not None else score.is_group_event
    )
    category = data.category if "category" in provided else score.category
    _apply_scoring(
        score,
        category=category,
        is_group_event=is_group_event,
        positions=positions,
    )
    score.updated_at = utcnow()

    session.add(score)
    session.commit()
    session.refresh(score)
    logger.info("Updated score %s (total=%s)", score.id, score.total_points)
    return score


def delete_score(session: Session, score_id: int) -> bool:
    """Delete a record permanently.

    Deleting an unknown id is a no-op success; the return value only says
    whether a row existed.
    """

    score = session.get(Score, score_id)
    if not score:
        logger.warning("Delete requested for missing score %s", score_id)
        return False
    session.delete(score)
    session.commit()
    logger.info("Deleted score %s", score_id)
    return True


def list_scores(
    session: Session,
    *,
    category: Optional[str] = None,
    published: Optional[bool] = None,
) -> List[Score]:
    """Records matching the optional filters, newest first."""

    statement = select(Score)
    wanted = category_filter(category)
    if wanted is not None:
        statement = statement.where(Score.category == wanted)
    if published is not None:
        statement = statement.where(Score.published == published)
    statement = statement.order_by(col(Score.created_at).desc(), col(Score.id).desc())
    return list(session.exec(statement).all())


def _count(session: Session, *conditions: Any) -> int:
    return session.exec(select(func.count()).select_from(Score).where(*conditions)).one()


def bulk_set_published(
    session: Session,
    score_ids: Optional[Sequence[int]],
    published: bool,
) -> Tuple[int, int]:
    """Set ``published`` in one set-based update.

    With ids, exactly those records are targeted whatever their current
    state. Without ids, every record not already in the target state is
    flipped. Returns ``(matched, modified)``.
    """

    state_differs = col(Score.published) != published
    if score_ids:
        ids = sorted(set(score_ids))
        matched = _count(session, col(Score.id).in_(ids))
        selector = col(Score.id).in_(ids) & state_differs
    else:
        matched = None
        selector = state_differs

    # Rows already in the target state are left alone, so rowcount is the
    # number actually modified.
    result = session.execute(
        update(Score)
        .where(selector)
        .values(published=published, updated_at=utcnow())
        .execution_options(synchronize_session=False)
    )
    modified = result.rowcount
    if matched is None:
        matched = modified
    session.commit()

    logger.info(
        "Bulk publish: target=%s matched=%s modified=%s (explicit ids=%s)",
        published,
        matched,
        modified,
        bool(score_ids),
    )
    return matched, modified


__all__ = [
    "bulk_set_published",
    "create_score",
    "delete_score",
    "get_score",
    "list_scores",
    "score_positions",
    "score_to_dict",
    "update_score",
]
