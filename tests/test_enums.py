"""Tests for activity and goal tables."""

import pytest

from kalorix.domain.enums import (
    DietMode,
    Goal,
    activity_bonus_kcal,
    activity_multiplier,
    goal_adjustment_kcal,
    goal_description,
    goal_label,
    goal_protein_per_kg,
    normalize_legacy_goal,
    parse_activity_level,
    parse_diet_mode,
)
from kalorix.domain.errors import CalculationError, InvalidActivityLevel, UnknownGoal


def test_activity_tables_cover_levels_one_to_five() -> None:
    assert [activity_bonus_kcal(level) for level in range(1, 6)] == [
        0,
        200,
        400,
        600,
        800,
    ]
    assert [activity_multiplier(level) for level in range(1, 6)] == [
        1.2,
        1.375,
        1.55,
        1.725,
        1.9,
    ]


def test_activity_tables_are_monotonic() -> None:
    bonuses = [activity_bonus_kcal(level) for level in range(1, 6)]
    multipliers = [activity_multiplier(level) for level in range(1, 6)]
    assert bonuses == sorted(bonuses)
    assert multipliers == sorted(multipliers)


@pytest.mark.parametrize("raw", [0, 6, -1, "7", "abc", "", True, 2.5, None])
def test_parse_activity_level_rejects_invalid(raw: object) -> None:
    with pytest.raises(InvalidActivityLevel):
        parse_activity_level(raw)  # type: ignore[arg-type]


def test_parse_activity_level_accepts_digit_strings() -> None:
    assert parse_activity_level(" 3 ") == 3
    assert parse_activity_level(5) == 5


def test_activity_lookup_validates_level() -> None:
    with pytest.raises(CalculationError):
        activity_bonus_kcal(6)
    with pytest.raises(CalculationError):
        activity_multiplier(0)


def test_goal_adjustments() -> None:
    assert goal_adjustment_kcal(Goal.LOSE_AGGRESSIVE) == -750
    assert goal_adjustment_kcal(Goal.LOSE_MODERATE) == -500
    assert goal_adjustment_kcal(Goal.MAINTENANCE) == 0
    assert goal_adjustment_kcal(Goal.GAIN_LEAN) == 300
    assert goal_adjustment_kcal(Goal.GAIN_AGGRESSIVE) == 500


def test_every_goal_has_one_distinct_label() -> None:
    labels = [goal_label(goal) for goal in Goal]
    assert len(set(labels)) == len(Goal)
    assert all(goal_description(goal) for goal in Goal)


def test_goal_protein_per_kg() -> None:
    assert goal_protein_per_kg(Goal.MAINTENANCE) == 1.8
    assert goal_protein_per_kg(Goal.LOSE_AGGRESSIVE) == 2.2
    assert goal_protein_per_kg(Goal.GAIN_AGGRESSIVE) == 2.4


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1", Goal.LOSE_MODERATE),
        ("2", Goal.MAINTENANCE),
        ("3", Goal.GAIN_LEAN),
        (1, Goal.LOSE_MODERATE),
        ("gain_aggressive", Goal.GAIN_AGGRESSIVE),
        (" maintenance ", Goal.MAINTENANCE),
    ],
)
def test_normalize_legacy_goal(raw: object, expected: Goal) -> None:
    assert normalize_legacy_goal(raw) is expected  # type: ignore[arg-type]


def test_normalize_legacy_goal_is_idempotent() -> None:
    for raw in ("1", "2", "3", *(goal.value for goal in Goal)):
        once = normalize_legacy_goal(raw)
        assert normalize_legacy_goal(once.value) is once
        assert normalize_legacy_goal(once) is once


@pytest.mark.parametrize("raw", ["4", "bulk", "", None, True])
def test_normalize_legacy_goal_rejects_unknown(raw: object) -> None:
    with pytest.raises(UnknownGoal):
        normalize_legacy_goal(raw)  # type: ignore[arg-type]


def test_parse_diet_mode() -> None:
    assert parse_diet_mode(True) is DietMode.DYNAMIC
    assert parse_diet_mode(False) is DietMode.STATIC
    assert parse_diet_mode("Static") is DietMode.STATIC
    with pytest.raises(ValueError, match="Unknown diet mode"):
        parse_diet_mode("weekly")
