"""
Tests for position validation and point totals.
"""

import pytest

from festival_scores.services.points import compute_total
from festival_scores.services.positions import (
    coerce_points,
    coerce_position,
    coerce_team_reference,
    validate_positions,
    validate_positions_with_diagnostics,
)


class TestCoercion:
    """Tests for the integer coercion helpers."""

    @pytest.mark.parametrize(
        "value, expected",
        [(5, 5), ("7", 7), (" 3 ", 3), (2.9, 2), (None, 0), ("abc", 0), (-4, 0), ("nan", 0), (True, 0)],
    )
    def test_points(self, value, expected):
        assert coerce_points(value) == expected

    def test_large_integer_strings_keep_precision(self):
        assert coerce_points("12345678901234567891") == 12345678901234567891
        assert coerce_position("900000000000000000001") == 900000000000000000001

    def test_decimal_strings_truncate(self):
        assert coerce_points("7.8") == 7

    @pytest.mark.parametrize(
        "value, expected",
        [(1, 1), ("2", 2), (None, 0), ("first", 0), ("inf", 0)],
    )
    def test_position(self, value, expected):
        assert coerce_position(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [(3, 3), ("12", 12), (" 4 ", 4), (0, None), (-1, None), ("abc", None), ("1.5", None), (None, None), (True, None)],
    )
    def test_team_reference(self, value, expected):
        assert coerce_team_reference(value) == expected


class TestValidatePositions:
    """Tests for validate_positions."""

    def test_drops_entries_without_team(self):
        raw = [
            {"teamId": 1, "participantName": "Ann", "position": "1", "points": "5"},
            {"position": 2, "points": 3},
            {"teamId": "not-an-id", "position": 3, "points": 1},
        ]
        assert validate_positions(raw) == [
            {"teamId": 1, "participantName": "Ann", "position": 1, "points": 5}
        ]

    def test_coerces_defaults(self):
        result = validate_positions([{"teamId": "7", "points": -4}])
        assert result == [{"teamId": 7, "participantName": None, "position": 0, "points": 0}]

    def test_preserves_order(self):
        raw = [{"teamId": 3, "position": 2}, {"teamId": 1, "position": 1}]
        assert [entry["teamId"] for entry in validate_positions(raw)] == [3, 1]

    def test_unresolvable_teams_dropped(self):
        raw = [{"teamId": 1, "points": 4}, {"teamId": 2, "points": 6}]
        result = validate_positions(raw, lambda team_id: team_id == 1)
        assert [entry["teamId"] for entry in result] == [1]

    def test_non_objects_dropped(self):
        assert validate_positions(["junk", None, 5]) == []

    def test_none_input(self):
        assert validate_positions(None) == []

    def test_diagnostics_report_dropped_indexes(self):
        raw = [{"teamId": 1}, {}, {"teamId": "x"}, {"teamId": 9}]
        accepted, dropped = validate_positions_with_diagnostics(raw, lambda t: t != 9)
        assert len(accepted) == 1
        assert [item["index"] for item in dropped] == [1, 2, 3]
        assert dropped[0]["reason"] == "missing team reference"
        assert dropped[2]["reason"] == "unknown team 9"


class TestComputeTotal:
    """Tests for compute_total."""

    def test_sums_points(self):
        assert compute_total([{"points": 5}, {"points": 3}]) == 8

    def test_invalid_points_count_as_zero(self):
        assert compute_total([{"points": 5}, {"points": "x"}, {}]) == 5

    def test_empty(self):
        assert compute_total([]) == 0
