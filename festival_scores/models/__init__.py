"""Database model exports."""

from .score import PublishRequest, Score, ScoreInput, ScoreUpdateInput
from .team import ParticipantInput, Team, TeamInput

__all__ = [
    "ParticipantInput",
    "PublishRequest",
    "Score",
    "ScoreInput",
    "ScoreUpdateInput",
    "Team",
    "TeamInput",
]
