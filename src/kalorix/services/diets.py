"""Persisted diet goals and conversions to calculator values."""

from typing import Protocol

from kalorix.domain.bmr import round_half_up
from kalorix.domain.enums import Goal, goal_adjustment_kcal
from kalorix.domain.models import EnergyBudget, MacroBudget
from kalorix.domain.records import DietRecord


class DietNotFound(LookupError):
    """Raised when a user has no persisted diet."""


class DietRepository(Protocol):
    """Persistence interface for diet goals."""

    def get_diet(self, phone: str) -> DietRecord | None:
        """Return the diet stored for a phone, if any."""

    def upsert_diet(self, diet: DietRecord) -> None:
        """Create or replace the diet for ``diet.phone``."""


def diet_from_budget(
    phone: str, budget: EnergyBudget, macros: MacroBudget
) -> DietRecord:
    """Round a computed budget and macros into a persistable diet."""
    return DietRecord(
        phone=phone,
        daily_calories=round_half_up(macros.calories),
        protein_g=round_half_up(macros.protein_g),
        carb_g=round_half_up(macros.carb_g),
        fat_g=round_half_up(macros.fat_g),
        bmr=round_half_up(budget.bmr),
        neat=round_half_up(budget.neat_or_bonus),
        base_target=round_half_up(budget.base_target),
        final_target=round_half_up(budget.final_target),
        mode=budget.mode,
    )


def budget_from_diet(diet: DietRecord, goal: Goal) -> EnergyBudget:
    """Rebuild the energy budget from a stored diet and the user's goal."""
    adjustment = goal_adjustment_kcal(goal)
    return EnergyBudget(
        bmr=diet.bmr,
        neat_or_bonus=diet.neat,
        base_target=diet.base_target,
        goal_adjustment=adjustment,
        final_target=diet.base_target + adjustment,
        mode=diet.mode,
        goal=goal,
    )


def macros_from_diet(diet: DietRecord) -> MacroBudget:
    """Return the stored macro targets."""
    return MacroBudget(
        calories=diet.daily_calories,
        protein_g=diet.protein_g,
        carb_g=diet.carb_g,
        fat_g=diet.fat_g,
    )


def serialize_diet(diet: DietRecord) -> dict[str, object]:
    """Return a JSON-friendly view of a diet."""
    return {
        "phone": diet.phone,
        "daily_calories": diet.daily_calories,
        "protein_g": diet.protein_g,
        "carb_g": diet.carb_g,
        "fat_g": diet.fat_g,
        "bmr": diet.bmr,
        "neat": diet.neat,
        "base_target": diet.base_target,
        "final_target": diet.final_target,
        "mode": diet.mode.value,
    }
