"""Activity and goal lookup tables."""

from enum import Enum

from kalorix.domain.errors import InvalidActivityLevel, UnknownGoal

MIN_ACTIVITY_LEVEL = 1
MAX_ACTIVITY_LEVEL = 5

_ACTIVITY_BONUS_KCAL = (0.0, 200.0, 400.0, 600.0, 800.0)
_ACTIVITY_MULTIPLIERS = (1.2, 1.375, 1.55, 1.725, 1.9)


class Sex(Enum):
    """Biological sex used by the BMR equations."""

    MALE = "male"
    FEMALE = "female"


class Goal(Enum):
    """Weight-management objective."""

    LOSE_AGGRESSIVE = "lose_aggressive"
    LOSE_MODERATE = "lose_moderate"
    MAINTENANCE = "maintenance"
    GAIN_LEAN = "gain_lean"
    GAIN_AGGRESSIVE = "gain_aggressive"


class DietMode(Enum):
    """Whether logged workouts add to the day's budget."""

    DYNAMIC = "dynamic"
    STATIC = "static"


_GOAL_ADJUSTMENT_KCAL: dict[Goal, float] = {
    Goal.LOSE_AGGRESSIVE: -750.0,
    Goal.LOSE_MODERATE: -500.0,
    Goal.MAINTENANCE: 0.0,
    Goal.GAIN_LEAN: 300.0,
    Goal.GAIN_AGGRESSIVE: 500.0,
}

_GOAL_LABELS: dict[Goal, str] = {
    Goal.LOSE_AGGRESSIVE: "🔥 Aggressive cut",
    Goal.LOSE_MODERATE: "🎯 Healthy weight loss",
    Goal.MAINTENANCE: "⚖️ Maintain weight",
    Goal.GAIN_LEAN: "📈 Lean gain",
    Goal.GAIN_AGGRESSIVE: "⚡ Full hypertrophy",
}

_GOAL_DESCRIPTIONS: dict[Goal, str] = {
    Goal.LOSE_AGGRESSIVE: "750 kcal/day deficit",
    Goal.LOSE_MODERATE: "500 kcal/day deficit",
    Goal.MAINTENANCE: "No calorie change",
    Goal.GAIN_LEAN: "300 kcal/day surplus",
    Goal.GAIN_AGGRESSIVE: "500 kcal/day surplus",
}

_GOAL_PROTEIN_PER_KG: dict[Goal, float] = {
    Goal.LOSE_AGGRESSIVE: 2.2,
    Goal.LOSE_MODERATE: 2.0,
    Goal.MAINTENANCE: 1.8,
    Goal.GAIN_LEAN: 2.4,
    Goal.GAIN_AGGRESSIVE: 2.4,
}

_LEGACY_GOALS: dict[str, Goal] = {
    "1": Goal.LOSE_MODERATE,
    "2": Goal.MAINTENANCE,
    "3": Goal.GAIN_LEAN,
}


def parse_activity_level(raw: int | str) -> int:
    """Return a validated activity level from an int or a digit string."""
    if isinstance(raw, bool):
        raise InvalidActivityLevel(f"Activity level must be an integer, got {raw!r}")
    if isinstance(raw, str):
        cleaned = raw.strip()
        if not cleaned.isdigit():
            raise InvalidActivityLevel(f"Activity level must be an integer, got {raw!r}")
        level = int(cleaned)
    elif isinstance(raw, int):
        level = raw
    else:
        raise InvalidActivityLevel(f"Activity level must be an integer, got {raw!r}")
    if not MIN_ACTIVITY_LEVEL <= level <= MAX_ACTIVITY_LEVEL:
        raise InvalidActivityLevel(
            f"Activity level must be between {MIN_ACTIVITY_LEVEL} and "
            f"{MAX_ACTIVITY_LEVEL}, got {level}"
        )
    return level


def activity_bonus_kcal(level: int) -> float:
    """Return the flat daily kcal bonus for an activity level."""
    return _ACTIVITY_BONUS_KCAL[parse_activity_level(level) - 1]


def activity_multiplier(level: int) -> float:
    """Return the BMR multiplier for an activity level."""
    return _ACTIVITY_MULTIPLIERS[parse_activity_level(level) - 1]


def goal_adjustment_kcal(goal: Goal) -> float:
    """Return the daily kcal adjustment applied for a goal."""
    return _GOAL_ADJUSTMENT_KCAL[goal]


def goal_label(goal: Goal) -> str:
    """Return the display label for a goal."""
    return _GOAL_LABELS[goal]


def goal_description(goal: Goal) -> str:
    """Return a short description of a goal's calorie change."""
    return _GOAL_DESCRIPTIONS[goal]


def goal_protein_per_kg(goal: Goal) -> float:
    """Return grams of protein per kg of body weight for a goal."""
    return _GOAL_PROTEIN_PER_KG[goal]


def normalize_legacy_goal(raw: Goal | str | int) -> Goal:
    """Map a stored goal value, including legacy 1/2/3 codes, to a Goal.

    Canonical values pass through unchanged, so normalizing twice is a no-op.
    """
    if isinstance(raw, Goal):
        return raw
    if isinstance(raw, bool):
        raise UnknownGoal(f"Unknown goal: {raw!r}")
    if isinstance(raw, int):
        raw = str(raw)
    if not isinstance(raw, str):
        raise UnknownGoal(f"Unknown goal: {raw!r}")
    value = raw.strip()
    legacy = _LEGACY_GOALS.get(value)
    if legacy is not None:
        return legacy
    try:
        return Goal(value)
    except ValueError:
        raise UnknownGoal(f"Unknown goal: {raw!r}") from None


def parse_diet_mode(raw: DietMode | str | bool) -> DietMode:
    """Return a DietMode from its name or from the stored dynamic flag."""
    if isinstance(raw, DietMode):
        return raw
    if isinstance(raw, bool):
        return DietMode.DYNAMIC if raw else DietMode.STATIC
    try:
        return DietMode(raw.strip().lower())
    except (AttributeError, ValueError):
        raise ValueError(f"Unknown diet mode: {raw!r}") from None
