"""Macro allocation: calories into protein, carbohydrate and fat grams."""

from kalorix.domain.bmr import round_half_up
from kalorix.domain.enums import Goal, goal_protein_per_kg
from kalorix.domain.errors import DivisionByZero
from kalorix.domain.models import MacroBudget, MacroPercentages

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARB = 4
KCAL_PER_G_FAT = 9

DEFAULT_PROTEIN_SHARE = 0.30
DEFAULT_CARB_SHARE = 0.40
DEFAULT_FAT_SHARE = 0.30

BODY_WEIGHT_FAT_SHARE = 0.25


def allocate_default_split(calories: float) -> MacroBudget:
    """Split calories 30/40/30 (protein/carb/fat).

    Each gram value is rounded on its own, so the grams may not add back up
    to exactly ``calories``.
    """
    return MacroBudget(
        calories=calories,
        protein_g=round_half_up(calories * DEFAULT_PROTEIN_SHARE / KCAL_PER_G_PROTEIN),
        carb_g=round_half_up(calories * DEFAULT_CARB_SHARE / KCAL_PER_G_CARB),
        fat_g=round_half_up(calories * DEFAULT_FAT_SHARE / KCAL_PER_G_FAT),
    )


def allocate_by_body_weight(
    calories: float, weight_kg: float, goal: Goal
) -> MacroBudget:
    """Protein from body weight, 25% of calories from fat, carbs fill the rest.

    Values are not rounded; the profile flow rounds them when persisting.
    """
    protein_g = weight_kg * goal_protein_per_kg(goal)
    fat_g = calories * BODY_WEIGHT_FAT_SHARE / KCAL_PER_G_FAT
    carb_g = (
        calories - protein_g * KCAL_PER_G_PROTEIN - fat_g * KCAL_PER_G_FAT
    ) / KCAL_PER_G_CARB
    return MacroBudget(
        calories=calories, protein_g=protein_g, carb_g=carb_g, fat_g=fat_g
    )


def manual_split(
    calories: float, protein_g: float, carb_g: float, fat_g: float
) -> MacroBudget:
    """Accept grams chosen by a nutritionist as-is."""
    return MacroBudget(
        calories=calories, protein_g=protein_g, carb_g=carb_g, fat_g=fat_g
    )


def macro_kcal(macros: MacroBudget) -> float:
    """Return the calories the gram values account for."""
    return (
        macros.protein_g * KCAL_PER_G_PROTEIN
        + macros.carb_g * KCAL_PER_G_CARB
        + macros.fat_g * KCAL_PER_G_FAT
    )


def macro_percentages(macros: MacroBudget) -> MacroPercentages:
    """Return each macro's share of the stated calories, for display.

    Raises ``DivisionByZero`` when the budget has no calories.
    """
    if macros.calories == 0:
        raise DivisionByZero("Cannot compute macro percentages for 0 kcal")
    return MacroPercentages(
        protein=macros.protein_g * KCAL_PER_G_PROTEIN / macros.calories * 100,
        carb=macros.carb_g * KCAL_PER_G_CARB / macros.calories * 100,
        fat=macros.fat_g * KCAL_PER_G_FAT / macros.calories * 100,
    )
