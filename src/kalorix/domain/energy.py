"""Daily energy budget: BMR plus NEAT or activity bonus plus goal adjustment."""

from dataclasses import dataclass
from typing import Protocol

from kalorix.domain.enums import (
    DietMode,
    Goal,
    activity_bonus_kcal,
    activity_multiplier,
    goal_adjustment_kcal,
)
from kalorix.domain.models import EnergyBudget

DEFAULT_FIXED_NEAT_KCAL = 350.0


class ActivityModel(Protocol):
    """Converts an activity level into the kcal added on top of BMR."""

    name: str

    def neat_kcal(
        self, bmr: float, activity_level: int, mode: DietMode, fixed_neat: float
    ) -> float:
        """Return the NEAT/activity term of the budget."""


@dataclass(frozen=True)
class FlatBonus(ActivityModel):
    """Fixed NEAT plus a per-level bonus that only static diets include.

    Dynamic diets leave exercise out of the base and add logged workouts
    day by day instead.
    """

    name: str = "flat_bonus"

    def neat_kcal(
        self, bmr: float, activity_level: int, mode: DietMode, fixed_neat: float
    ) -> float:
        bonus = activity_bonus_kcal(activity_level)
        if mode is DietMode.STATIC:
            return fixed_neat + bonus
        return fixed_neat


@dataclass(frozen=True)
class MultiplierOnBmr(ActivityModel):
    """NEAT as the TDEE surplus: ``bmr × multiplier − bmr``."""

    name: str = "multiplier_on_bmr"

    def neat_kcal(
        self, bmr: float, activity_level: int, mode: DietMode, fixed_neat: float
    ) -> float:
        return bmr * activity_multiplier(activity_level) - bmr


def calculate_energy_budget(  # noqa: PLR0913
    bmr: float,
    activity_level: int,
    goal: Goal,
    mode: DietMode,
    fixed_neat: float = DEFAULT_FIXED_NEAT_KCAL,
    activity_model: ActivityModel | None = None,
) -> EnergyBudget:
    """Build the daily energy budget.

    ``activity_model`` defaults to ``FlatBonus``. The final target is not
    floored; rejecting absurd inputs is up to the caller.
    """
    model = activity_model or FlatBonus()
    neat = model.neat_kcal(bmr, activity_level, mode, fixed_neat)
    base_target = bmr + neat
    adjustment = goal_adjustment_kcal(goal)
    return EnergyBudget(
        bmr=bmr,
        neat_or_bonus=neat,
        base_target=base_target,
        goal_adjustment=adjustment,
        final_target=base_target + adjustment,
        mode=mode,
        goal=goal,
    )


def effective_target(budget: EnergyBudget, exercise_calories: float) -> float:
    """Return the day's calorie target after workouts are accounted for."""
    if budget.mode is DietMode.DYNAMIC:
        return budget.final_target + exercise_calories
    return budget.final_target
