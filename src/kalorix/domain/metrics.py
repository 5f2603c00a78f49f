"""Client metrics shown on the nutritionist roster."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from kalorix.domain.bmr import round_half_up

ADHERENCE_WINDOW_DAYS = 7

_BMI_CLASSES = (
    (18.5, "Underweight"),
    (25.0, "Normal"),
    (30.0, "Overweight"),
    (35.0, "Obesity I"),
    (40.0, "Obesity II"),
)


@dataclass(frozen=True)
class Adherence:
    """Share of recent days with at least one logged meal."""

    percent: int
    days_with_meals: int
    reference_days: int


def calc_bmi(weight_kg: float | None, height_cm: float | None) -> float | None:
    """Return BMI to one decimal, or None when inputs are missing."""
    if not weight_kg or not height_cm or weight_kg <= 0 or height_cm <= 0:
        return None
    height_m = height_cm / 100
    return round(weight_kg / (height_m * height_m), 1)


def classify_bmi(bmi: float | None) -> str:
    """Return the standard BMI band for a value."""
    if bmi is None:
        return "Unavailable"
    for upper, label in _BMI_CLASSES:
        if bmi < upper:
            return label
    return "Obesity III"


def calc_adherence(meal_dates: Iterable[date], today: date) -> Adherence:
    """Count distinct days with meals in the week ending ``today``."""
    window = {today - timedelta(days=offset) for offset in range(ADHERENCE_WINDOW_DAYS)}
    days = {day for day in meal_dates if day in window}
    return Adherence(
        percent=round_half_up(len(days) / ADHERENCE_WINDOW_DAYS * 100),
        days_with_meals=len(days),
        reference_days=ADHERENCE_WINDOW_DAYS,
    )


def build_insight(
    adherence_percent: int,
    protein_low_days: int = 0,
    avg_calories_week: float | None = None,
) -> str:
    """Return a short badge text summarizing a client's week."""
    parts: list[str] = []
    if adherence_percent >= 85:  # noqa: PLR2004
        parts.append("Good adherence")
    elif adherence_percent >= 60:  # noqa: PLR2004
        parts.append("Moderate adherence")
    else:
        parts.append("Low adherence")
    if protein_low_days >= 3:  # noqa: PLR2004
        parts.append("Recurring low protein")
    if avg_calories_week:
        if avg_calories_week < 1400:  # noqa: PLR2004
            parts.append("Very low calories")
        elif avg_calories_week > 2800:  # noqa: PLR2004
            parts.append("High calories")
    return " • ".join(parts)
