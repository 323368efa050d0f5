"""Canonical category labels for individual results."""

from __future__ import annotations

from typing import Optional

SUPER_SENIOR = "Super-Senior"
GENERAL = "General"
SENIOR = "Senior"
JUNIOR = "Junior"

CATEGORIES = (JUNIOR, SENIOR, SUPER_SENIOR, GENERAL)

# Query value meaning "every category".
ALL_CATEGORIES = "All"


def normalize_category(raw: Optional[str]) -> str:
    """Map a free-text category label onto the canonical vocabulary.

    Matching is a case-insensitive substring test in priority order
    (super+senior, general, senior, junior). Unrecognised text is returned
    unchanged and blank input becomes an empty string.
    """

    if raw is None or not str(raw).strip():
        return ""

    text = str(raw)
    lowered = text.lower()
    if "super" in lowered and "senior" in lowered:
        return SUPER_SENIOR
    if "general" in lowered:
        return GENERAL
    if "senior" in lowered:
        return SENIOR
    if "junior" in lowered:
        return JUNIOR
    return text


def category_for_result(raw: Optional[str], is_group_event: bool) -> Optional[str]:
    """Return the category to store on a result record.

    Group events never carry a category.
    """

    if is_group_event:
        return None
    return normalize_category(raw) or None


def category_filter(raw: Optional[str]) -> Optional[str]:
    """Translate a ``category`` query value into a filter, or ``None`` for all."""

    if raw is None:
        return None
    value = raw.strip()
    if not value or value == ALL_CATEGORIES:
        return None
    return normalize_category(value)


__all__ = [
    "ALL_CATEGORIES",
    "CATEGORIES",
    "GENERAL",
    "JUNIOR",
    "SENIOR",
    "SUPER_SENIOR",
    "category_filter",
    "category_for_result",
    "normalize_category",
]
