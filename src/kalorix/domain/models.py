"""Value objects for the nutrition goal calculator."""

from dataclasses import dataclass

from kalorix.domain.enums import DietMode, Goal, Sex


@dataclass(frozen=True)
class BodyMetrics:
    """Body measurements supplied for a single calculation."""

    weight_kg: float
    height_cm: float
    age_years: int
    sex: Sex


@dataclass(frozen=True)
class EnergyBudget:
    """Daily calorie budget and the terms it was built from."""

    bmr: float
    neat_or_bonus: float
    base_target: float
    goal_adjustment: float
    final_target: float
    mode: DietMode
    goal: Goal


@dataclass(frozen=True)
class MacroBudget:
    """Daily calories split into macronutrient grams."""

    calories: float
    protein_g: float
    carb_g: float
    fat_g: float


@dataclass(frozen=True)
class MacroPercentages:
    """Share of calories coming from each macronutrient, in percent."""

    protein: float
    carb: float
    fat: float


@dataclass(frozen=True)
class NutrientTotals:
    """Calories and macro grams summed over some entries."""

    calories: float = 0.0
    protein_g: float = 0.0
    carb_g: float = 0.0
    fat_g: float = 0.0

    def __add__(self, other: "NutrientTotals") -> "NutrientTotals":
        return NutrientTotals(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            carb_g=self.carb_g + other.carb_g,
            fat_g=self.fat_g + other.fat_g,
        )
