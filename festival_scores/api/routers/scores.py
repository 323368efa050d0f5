"""Result record and leaderboard endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from ...core import get_session, require_admin
from ...models import PublishRequest, ScoreInput, ScoreUpdateInput
from ...services import (
    ScoreNotFoundError,
    ScoreValidationError,
    bulk_set_published,
    create_score,
    delete_score,
    get_score,
    group_team_totals,
    list_scores,
    score_to_dict,
    team_totals,
    update_score,
)

router = APIRouter(prefix="/scores", tags=["scores"])


def _validation_error(exc: ScoreValidationError) -> HTTPException:
    return HTTPException(400, {"field": exc.field, "message": exc.message})


@router.get("")
def get_scores(
    category: Optional[str] = None,
    published: Optional[bool] = None,
    session: Session = Depends(get_session),
) -> List[Dict[str, Any]]:
    """List result records, newest first."""

    scores = list_scores(session, category=category, published=published)
    return [score_to_dict(score) for score in scores]


@router.post("", status_code=201)
def post_score(
    body: ScoreInput,
    session: Session = Depends(get_session),
    _admin: str = Depends(require_admin),
) -> Dict[str, Any]:
    """Create a result record; points and category are computed server-side."""

    try:
        score = create_score(session, body)
    except ScoreValidationError as exc:
        raise _validation_error(exc) from exc
    return score_to_dict(score)


@router.post("/publish")
def publish_scores(
    body: PublishRequest,
    session: Session = Depends(get_session),
    _admin: str = Depends(require_admin),
) -> Dict[str, Any]:
    """Publish or unpublish the given ids, or every record not yet in that state."""

    target = body.published if isinstance(body.published, bool) else True
    matched, modified = bulk_set_published(session, body.score_ids, target)
    return {"ok": True, "matched": matched, "modified": modified, "published": target}


@router.get("/totals/teams")
def get_team_totals(
    category: Optional[str] = None, session: Session = Depends(get_session)
) -> List[Dict[str, Any]]:
    """Team standings summed over individual position entries."""

    return team_totals(session, category)


@router.get("/totals/teams-group")
def get_group_team_totals(session: Session = Depends(get_session)) -> List[Dict[str, Any]]:
    """Team standings over group events only."""

    return group_team_totals(session)


@router.get("/{score_id}")
def get_score_by_id(score_id: int, session: Session = Depends(get_session)):
    try:
        score = get_score(session, score_id)
    except ScoreNotFoundError as exc:
        raise HTTPException(404, "Score not found") from exc
    return score_to_dict(score)


@router.put("/{score_id}")
def put_score(
    score_id: int,
    body: ScoreUpdateInput,
    session: Session = Depends(get_session),
    _admin: str = Depends(require_admin),
) -> Dict[str, Any]:
    """Replace a record's positions and recompute its total."""

    try:
        score = update_score(session, score_id, body)
    except ScoreNotFoundError as exc:
        raise HTTPException(404, "Score not found") from exc
    except ScoreValidationError as exc:
        raise _validation_error(exc) from exc
    return score_to_dict(score)


@router.delete("/{score_id}")
def remove_score(
    score_id: int,
    session: Session = Depends(get_session),
    _admin: str = Depends(require_admin),
) -> Dict[str, bool]:
    """Delete a record permanently; unknown ids succeed as well."""

    delete_score(session, score_id)
    return {"ok": True}


__all__ = ["router"]
