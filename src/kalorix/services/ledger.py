"""Today's ledger for the dashboard."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from kalorix.domain.enums import normalize_legacy_goal
from kalorix.domain.ledger import (
    DailyBalance,
    DailyLedger,
    build_daily_ledger,
    calorie_balance_history,
)
from kalorix.domain.phone import normalize_phone
from kalorix.domain.records import DietRecord, MealEntry, UserProfile, WorkoutEntry
from kalorix.services.diets import (
    DietNotFound,
    DietRepository,
    budget_from_diet,
    macros_from_diet,
)
from kalorix.services.profiles import ProfileNotFound, ProfileRepository


class MealRepository(Protocol):
    """Persistence interface for logged meals."""

    def list_meals(self, phone: str, start: date, end: date) -> list[MealEntry]:
        """Return meals consumed between two dates, both inclusive."""


class WorkoutRepository(Protocol):
    """Persistence interface for logged workouts."""

    def list_workouts(self, user_id: UUID, day: date) -> list[WorkoutEntry]:
        """Return workouts performed on a day."""


@dataclass(frozen=True)
class DaySnapshot:
    """A day's records together with the ledger computed from them."""

    day: date
    profile: UserProfile
    diet: DietRecord
    meals: list[MealEntry]
    workouts: list[WorkoutEntry]
    ledger: DailyLedger


@dataclass
class LedgerService:
    """Builds the daily ledger from persisted diet, meals and workouts."""

    profile_repository: ProfileRepository
    diet_repository: DietRepository
    meal_repository: MealRepository
    workout_repository: WorkoutRepository
    timezone_name: str = "America/Sao_Paulo"

    def today(self) -> date:
        """Return the current date in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date()

    def get_day(self, phone: str, day: date | None = None) -> DaySnapshot:
        """Return the ledger for a day, today by default."""
        return self.build_day(self._load_profile(phone), day or self.today())

    def build_day(self, profile: UserProfile, day: date) -> DaySnapshot:
        """Return the ledger for an already loaded profile.

        Diet and meals are read under the phone stored on the profile.
        """
        diet = self.diet_repository.get_diet(profile.phone)
        if diet is None:
            raise DietNotFound(f"No diet for phone {profile.phone}")
        meals = self.meal_repository.list_meals(profile.phone, day, day)
        workouts = self.workout_repository.list_workouts(profile.id, day)
        ledger = build_daily_ledger(
            budget=budget_from_diet(diet, normalize_legacy_goal(profile.goal)),
            meals=[meal.totals for meal in meals],
            exercise_calories=sum(workout.calories_burned for workout in workouts),
            macro_targets=macros_from_diet(diet),
        )
        return DaySnapshot(
            day=day,
            profile=profile,
            diet=diet,
            meals=meals,
            workouts=workouts,
            ledger=ledger,
        )

    def balance_history(
        self, phone: str, days: int = 30, today: date | None = None
    ) -> list[DailyBalance]:
        """Return consumed minus the stored daily calories for recent days."""
        profile = self._load_profile(phone)
        diet = self.diet_repository.get_diet(profile.phone)
        if diet is None:
            raise DietNotFound(f"No diet for phone {profile.phone}")
        end = today or self.today()
        start = end - timedelta(days=days - 1)
        consumed: dict[date, float] = {}
        for meal in self.meal_repository.list_meals(profile.phone, start, end):
            day = meal.consumed_on
            consumed[day] = consumed.get(day, 0.0) + meal.calories
        return calorie_balance_history(diet.daily_calories, consumed, end, days)

    def _load_profile(self, phone: str) -> UserProfile:
        key = normalize_phone(phone)
        profile = self.profile_repository.get_profile(key)
        if profile is None:
            raise ProfileNotFound(f"No user for phone {key}")
        return profile


def serialize_ledger(ledger: DailyLedger) -> dict[str, object]:
    """Return a JSON-friendly view of a ledger."""
    budget = ledger.budget
    return {
        "goal": budget.goal.value,
        "mode": budget.mode.value,
        "bmr": budget.bmr,
        "neat": budget.neat_or_bonus,
        "base_target": budget.base_target,
        "goal_adjustment": budget.goal_adjustment,
        "final_target": budget.final_target,
        "exercise_calories": ledger.exercise_calories,
        "effective_target": ledger.effective_target,
        "consumed": {
            "calories": ledger.consumed.calories,
            "protein_g": ledger.consumed.protein_g,
            "carb_g": ledger.consumed.carb_g,
            "fat_g": ledger.consumed.fat_g,
        },
        "remaining": {
            "calories": ledger.remaining.calories,
            "protein_g": ledger.remaining.protein_g,
            "carb_g": ledger.remaining.carb_g,
            "fat_g": ledger.remaining.fat_g,
        },
        "balance": ledger.balance,
        "status": ledger.status.value,
    }


def serialize_balance(history: list[DailyBalance]) -> list[dict[str, object]]:
    """Return a JSON-friendly view of a balance history."""
    return [
        {
            "day": entry.day.isoformat(),
            "consumed": entry.consumed,
            "balance": entry.balance,
        }
        for entry in history
    ]
