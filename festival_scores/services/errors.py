"""Domain errors raised by the scoring services."""

from __future__ import annotations


class ScoringError(Exception):
    """Base class for scoring failures."""


class ScoreValidationError(ScoringError):
    """A field failed a constraint after lenient coercion."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class ScoreNotFoundError(ScoringError):
    def __init__(self, score_id: int) -> None:
        super().__init__(f"Score {score_id} not found")
        self.score_id = score_id


class TeamNotFoundError(ScoringError):
    def __init__(self, team_id: int) -> None:
        super().__init__(f"Team {team_id} not found")
        self.team_id = team_id


__all__ = [
    "ScoreNotFoundError",
    "ScoreValidationError",
    "ScoringError",
    "TeamNotFoundError",
]
