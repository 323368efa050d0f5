"""Lenient validation of submitted position entries.

Entries without a usable team reference are dropped rather than reported;
rank and points are coerced to integers. The accepted subset keeps the
submission order.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, TypedDict

logger = logging.getLogger(__name__)

TeamReferenceCheck = Callable[[int], bool]


class PositionEntry(TypedDict):
    teamId: int
    participantName: Optional[str]
    position: int
    points: int


def _coerce_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return int(number)


def coerce_team_reference(value: Any) -> Optional[int]:
    """Return the team id if ``value`` is a well-formed identifier."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    text = str(value).strip()
    if not text.isdigit():
        return None
    team_id = int(text)
    return team_id if team_id > 0 else None


def coerce_position(value: Any) -> int:
    """Rank as an integer, 0 when absent or unparseable."""

    number = _coerce_int(value)
    return number if number is not None else 0


def coerce_points(value: Any) -> int:
    """Points as a non-negative integer, 0 when absent or unparseable."""

    number = _coerce_int(value)
    if number is None or number < 0:
        return 0
    return number


def _raw_team_reference(raw: Mapping[str, Any]) -> Any:
    for key in ("teamId", "team_id", "team"):
        if raw.get(key) is not None:
            return raw[key]
    return None


def validate_positions_with_diagnostics(
    raw_positions: Optional[Iterable[Any]],
    is_valid_team_reference: Optional[TeamReferenceCheck] = None,
) -> Tuple[List[PositionEntry], List[Dict[str, Any]]]:
    """Split raw entries into accepted records and a list of dropped ones.

    Each dropped item is ``{"index": i, "reason": "..."}``.
    """

    accepted: List[PositionEntry] = []
    dropped: List[Dict[str, Any]] = []

    for index, raw in enumerate(raw_positions or []):
        if not isinstance(raw, Mapping):
            dropped.append({"index": index, "reason": "entry is not an object"})
            continue

        raw_team = _raw_team_reference(raw)
        if raw_team is None:
            dropped.append({"index": index, "reason": "missing team reference"})
            continue

        team_id = coerce_team_reference(raw_team)
        if team_id is None:
            dropped.append(
                {"index": index, "reason": f"malformed team reference {raw_team!r}"}
            )
            continue

        if is_valid_team_reference is not None and not is_valid_team_reference(team_id):
            dropped.append({"index": index, "reason": f"unknown team {team_id}"})
            continue

        participant = raw.get("participantName", raw.get("participant_name"))
        accepted.append(
            PositionEntry(
                teamId=team_id,
                participantName=participant,
                position=coerce_position(raw.get("position")),
                points=coerce_points(raw.get("points")),
            )
        )

    for item in dropped:
        logger.debug("Dropped position entry %(index)s: %(reason)s", item)

    return accepted, dropped


def validate_positions(
    raw_positions: Optional[Iterable[Any]],
    is_valid_team_reference: Optional[TeamReferenceCheck] = None,
) -> List[PositionEntry]:
    """Return only the well-formed entries of ``raw_positions``."""

    accepted, _ = validate_positions_with_diagnostics(
        raw_positions, is_valid_team_reference
    )
    return accepted


__all__ = [
    "PositionEntry",
    "TeamReferenceCheck",
    "coerce_points",
    "coerce_position",
    "coerce_team_reference",
    "validate_positions",
    "validate_positions_with_diagnostics",
]
