"""Scoring services: normalisation, validation, storage and standings."""

from .categories import ALL_CATEGORIES, CATEGORIES, normalize_category
from .errors import (
    ScoreNotFoundError,
    ScoreValidationError,
    ScoringError,
    TeamNotFoundError,
)
from .leaderboard import TEAM_NOT_FOUND, group_team_totals, team_totals
from .points import compute_total
from .positions import PositionEntry, validate_positions
from .scores import (
    bulk_set_published,
    create_score,
    delete_score,
    get_score,
    list_scores,
    score_to_dict,
    update_score,
)
from .teams import TeamDirectory

__all__ = [
    "ALL_CATEGORIES",
    "CATEGORIES",
    "PositionEntry",
    "ScoreNotFoundError",
    "ScoreValidationError",
    "ScoringError",
    "TEAM_NOT_FOUND",
    "TeamDirectory",
    "TeamNotFoundError",
    "bulk_set_published",
    "compute_total",
    "create_score",
    "delete_score",
    "get_score",
    "group_team_totals",
    "list_scores",
    "normalize_category",
    "score_to_dict",
    "team_totals",
    "update_score",
    "validate_positions",
]
