"""Daily ledger: today's meals and workouts against the energy budget."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum

from kalorix.domain.bmr import round_half_up
from kalorix.domain.energy import effective_target
from kalorix.domain.enums import DietMode, goal_label
from kalorix.domain.models import EnergyBudget, MacroBudget, NutrientTotals


class LedgerStatus(Enum):
    """Where consumption stands against the day's target."""

    UNDER = "under"
    MET = "met"
    OVER = "over"


@dataclass(frozen=True)
class DailyLedger:
    """Derived view of a day; recomputed on every read."""

    budget: EnergyBudget
    consumed: NutrientTotals
    exercise_calories: float
    effective_target: float
    remaining: NutrientTotals
    balance: float

    @property
    def status(self) -> LedgerStatus:
        """Three-way comparison of consumed calories against the target."""
        return status_for_balance(self.balance)


@dataclass(frozen=True)
class DailyBalance:
    """Calories consumed on a day against the stored daily goal."""

    day: date
    consumed: float
    balance: int


def sum_entries(entries: Iterable[NutrientTotals]) -> NutrientTotals:
    """Return the elementwise sum of entries."""
    total = NutrientTotals()
    for entry in entries:
        total = total + entry
    return total


def status_for_balance(balance: float) -> LedgerStatus:
    """Return the ledger status for ``consumed − target``."""
    if balance < 0:
        return LedgerStatus.UNDER
    if balance == 0:
        return LedgerStatus.MET
    return LedgerStatus.OVER


def build_daily_ledger(
    budget: EnergyBudget,
    meals: Iterable[NutrientTotals],
    exercise_calories: float = 0.0,
    macro_targets: MacroBudget | None = None,
) -> DailyLedger:
    """Fold a day's meals and workouts into a ledger.

    ``exercise_calories`` only moves the target for dynamic diets. Macro
    remaining figures need ``macro_targets``; without them they stay at 0.
    """
    consumed = sum_entries(meals)
    target = effective_target(budget, exercise_calories)
    if macro_targets is None:
        protein_target = carb_target = fat_target = 0.0
    else:
        protein_target = macro_targets.protein_g
        carb_target = macro_targets.carb_g
        fat_target = macro_targets.fat_g
    remaining = NutrientTotals(
        calories=max(0.0, target - consumed.calories),
        protein_g=max(0.0, protein_target - consumed.protein_g),
        carb_g=max(0.0, carb_target - consumed.carb_g),
        fat_g=max(0.0, fat_target - consumed.fat_g),
    )
    return DailyLedger(
        budget=budget,
        consumed=consumed,
        exercise_calories=exercise_calories,
        effective_target=target,
        remaining=remaining,
        balance=consumed.calories - target,
    )


def calorie_balance_history(
    daily_goal: float, consumed_by_day: Mapping[date, float], end: date, days: int
) -> list[DailyBalance]:
    """Return one balance per day for the ``days`` days ending ``end``.

    Entries run oldest first. Days without meals count as 0 kcal consumed.
    """
    if days < 1:
        raise ValueError(f"History needs at least one day, got {days}")
    start = end - timedelta(days=days - 1)
    history = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        consumed = consumed_by_day.get(day, 0.0)
        history.append(
            DailyBalance(
                day=day,
                consumed=consumed,
                balance=round_half_up(consumed - daily_goal),
            )
        )
    return history


def format_status_message(ledger: DailyLedger, platform_url: str | None = None) -> str:
    """Render the daily follow-up message sent over the messaging channel."""
    budget = ledger.budget
    dynamic = budget.mode is DietMode.DYNAMIC
    exercise = _kcal(ledger.exercise_calories)
    base = _kcal(budget.base_target)
    day_target = _kcal(ledger.effective_target - budget.goal_adjustment)
    adjustment = _kcal(budget.goal_adjustment)

    lines = [
        "📊 *Your day so far*",
        "",
        f"🎯 *Goal:* {goal_label(budget.goal)}",
        "📋 *Diet type:* "
        + (
            "🔥 Dynamic (workouts add calories)"
            if dynamic
            else "⚡ Static (workouts already included)"
        ),
        "",
    ]
    if dynamic and ledger.exercise_calories > 0:
        lines += [
            f"🏋️ *Workouts logged today:* {exercise} kcal",
            f"📌 *Base target:* {base} kcal",
            f"📌 *Day target (base + workouts):* {day_target} kcal",
        ]
    elif not dynamic and ledger.exercise_calories > 0:
        lines += [
            f"🏋️ *Workouts logged (tracking only):* {exercise} kcal",
            f"📌 *Base target (activity included):* {base} kcal",
            f"📌 *Day target:* {day_target} kcal",
        ]
    else:
        lines.append(f"📌 *Base target for the day:* {base} kcal")
    sign = "+" if adjustment > 0 else ""
    lines += [
        f"📌 *Goal adjustment:* {sign}{adjustment} kcal",
        f"📌 *Final target for the day:* {_kcal(ledger.effective_target)} kcal",
        "",
        f"🍽️ Consumed so far: {_kcal(ledger.consumed.calories)} kcal",
        "",
    ]

    status = ledger.status
    if status is LedgerStatus.UNDER:
        lines.append(
            f"✅ You can still consume {_kcal(abs(ledger.balance))} kcal "
            "to reach your goal."
        )
    elif status is LedgerStatus.MET:
        lines.append("🎯 You exactly met today's calorie goal!")
    else:
        lines.append(f"⚠️ You exceeded your goal by +{_kcal(ledger.balance)} kcal.")

    if platform_url:
        lines += [
            "",
            "✍️ *To edit your details or see macros and progress:* "
            f"open Kalorix at {platform_url}",
        ]
    lines += [
        "",
        "🔎 Remember: this follow-up is "
        + (
            "dynamic. Tomorrow, new workouts will adjust your balance."
            if dynamic
            else "based on a fixed target. Workouts are tracked but do not "
            "change your target."
        ),
    ]
    return "\n".join(lines)


def _kcal(value: float) -> int:
    return round_half_up(value)
