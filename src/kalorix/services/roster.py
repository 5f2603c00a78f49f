"""Nutritionist roster with per-client metrics."""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol
from uuid import UUID

from kalorix.domain.bmr import round_half_up
from kalorix.domain.errors import CalculationError
from kalorix.domain.metrics import (
    ADHERENCE_WINDOW_DAYS,
    build_insight,
    calc_adherence,
    calc_bmi,
    classify_bmi,
)
from kalorix.domain.phone import format_phone_display
from kalorix.domain.records import MealEntry, UserProfile
from kalorix.services.diets import DietNotFound
from kalorix.services.ledger import LedgerService, MealRepository

_logger = logging.getLogger(__name__)

PROTEIN_LOW_RATIO = 0.8


class RosterRepository(Protocol):
    """Persistence interface for a nutritionist's clients."""

    def list_clients(self, nutritionist_id: UUID) -> list[UserProfile]:
        """Return the clients linked to a nutritionist."""


@dataclass
class RosterService:
    """Summarizes each client of a nutritionist."""

    roster_repository: RosterRepository
    meal_repository: MealRepository
    ledger_service: LedgerService

    def list_clients(
        self, nutritionist_id: UUID, today: date | None = None
    ) -> list[dict[str, object]]:
        """Return clients with BMI, adherence, insight and today's ledger."""
        day = today or self.ledger_service.today()
        start = day - timedelta(days=ADHERENCE_WINDOW_DAYS - 1)
        summaries = []
        for client in self.roster_repository.list_clients(nutritionist_id):
            meals = self.meal_repository.list_meals(client.phone, start, day)
            summaries.append(self._summarize(client, meals, day))
        return summaries

    def _summarize(
        self, client: UserProfile, meals: list[MealEntry], day: date
    ) -> dict[str, object]:
        bmi = calc_bmi(client.weight_kg, client.height_cm)
        adherence = calc_adherence((meal.consumed_on for meal in meals), day)
        today_view: dict[str, object] | None = None
        protein_target = None
        try:
            snapshot = self.ledger_service.build_day(client, day)
        except DietNotFound:
            _logger.warning("Client has no diet yet: user=%s", client.id)
        except CalculationError:
            _logger.warning("Client diet could not be evaluated: user=%s", client.id)
        else:
            ledger = snapshot.ledger
            protein_target = snapshot.diet.protein_g
            today_view = {
                "consumed_calories": round_half_up(ledger.consumed.calories),
                "target_calories": round_half_up(ledger.effective_target),
                "remaining_calories": round_half_up(ledger.remaining.calories),
                "status": ledger.status.value,
            }
        daily = _daily_totals(meals)
        avg_calories = (
            sum(calories for calories, _ in daily.values()) / len(daily)
            if daily
            else None
        )
        protein_low_days = (
            sum(
                1
                for _, protein in daily.values()
                if protein < protein_target * PROTEIN_LOW_RATIO
            )
            if protein_target
            else 0
        )
        return {
            "id": str(client.id),
            "name": client.name,
            "phone": format_phone_display(client.phone),
            "goal": client.goal,
            "bmi": bmi,
            "bmi_class": classify_bmi(bmi),
            "adherence_percent": adherence.percent,
            "days_with_meals": adherence.days_with_meals,
            "avg_calories_week": round_half_up(avg_calories)
            if avg_calories is not None
            else None,
            "insight": build_insight(
                adherence.percent,
                protein_low_days=protein_low_days,
                avg_calories_week=avg_calories,
            ),
            "today": today_view,
        }


def _daily_totals(meals: list[MealEntry]) -> dict[date, tuple[float, float]]:
    totals: dict[date, tuple[float, float]] = {}
    for meal in meals:
        calories, protein = totals.get(meal.consumed_on, (0.0, 0.0))
        totals[meal.consumed_on] = (calories + meal.calories, protein + meal.protein_g)
    return totals
