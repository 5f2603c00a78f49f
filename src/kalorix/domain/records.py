"""Persisted records read and written by the services."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from kalorix.domain.enums import DietMode
from kalorix.domain.models import NutrientTotals


@dataclass(frozen=True)
class UserProfile:
    """A user row with the inputs the diet is computed from.

    ``goal`` keeps the stored value, which may be a legacy 1/2/3 code.
    """

    id: UUID
    name: str
    phone: str
    email: str | None
    weight_kg: float
    height_cm: float
    age_years: int
    sex: str
    activity_level: int | str
    goal: str
    mode: DietMode = DietMode.DYNAMIC
    subscription_active: bool = False


@dataclass(frozen=True)
class DietRecord:
    """Persisted daily goal, stored as rounded integers."""

    phone: str
    daily_calories: int
    protein_g: int
    carb_g: int
    fat_g: int
    bmr: int
    neat: int
    base_target: int
    final_target: int
    mode: DietMode


@dataclass(frozen=True)
class MealEntry:
    """A logged meal."""

    name: str
    consumed_on: date
    calories: float
    protein_g: float
    carb_g: float
    fat_g: float

    @property
    def totals(self) -> NutrientTotals:
        """Return the meal's nutrients as ledger input."""
        return NutrientTotals(
            calories=self.calories,
            protein_g=self.protein_g,
            carb_g=self.carb_g,
            fat_g=self.fat_g,
        )


@dataclass(frozen=True)
class WorkoutEntry:
    """A logged workout."""

    name: str
    performed_on: date
    duration_minutes: float
    calories_burned: float


@dataclass(frozen=True)
class WeightEntry:
    """A logged weigh-in."""

    weight_kg: float
    logged_at: datetime
