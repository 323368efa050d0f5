"""Point totals derived from validated position entries."""

from __future__ import annotations

from typing import Iterable

from .positions import PositionEntry, coerce_points


def compute_total(positions: Iterable[PositionEntry]) -> int:
    """Sum the points of every entry, counting missing or invalid points as 0."""

    return sum(coerce_points(entry.get("points")) for entry in positions)


__all__ = ["compute_total"]
