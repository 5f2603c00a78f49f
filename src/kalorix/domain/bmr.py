"""Basal metabolic rate equations.

Two equations are in use and are kept as separate strategies:

- Mifflin-St Jeor, used when a nutritionist creates a client.
- Harris-Benedict (revised, Roza & Shizgal 1984), used when a user edits
  their own profile.

Strategies return unrounded kcal. Rounding belongs to the caller's display
or persistence boundary, see ``round_half_up``.
"""

import math
from dataclasses import dataclass
from typing import Protocol

from kalorix.domain.enums import Sex
from kalorix.domain.errors import InvalidBodyMetrics
from kalorix.domain.models import BodyMetrics


class BmrStrategy(Protocol):
    """Equation that estimates resting energy expenditure."""

    name: str

    def calculate(self, metrics: BodyMetrics) -> float:
        """Return BMR in kcal/day."""


@dataclass(frozen=True)
class MifflinStJeor(BmrStrategy):
    """Mifflin-St Jeor equation.

    Male:   10 × weight(kg) + 6.25 × height(cm) − 5 × age(y) + 5
    Female: 10 × weight(kg) + 6.25 × height(cm) − 5 × age(y) − 161
    """

    name: str = "mifflin_st_jeor"

    def calculate(self, metrics: BodyMetrics) -> float:
        validate_body_metrics(metrics)
        base = 10 * metrics.weight_kg + 6.25 * metrics.height_cm - 5 * metrics.age_years
        if metrics.sex is Sex.MALE:
            return base + 5
        return base - 161


@dataclass(frozen=True)
class HarrisBenedict(BmrStrategy):
    """Revised Harris-Benedict equation.

    Male:   88.362 + 13.397 × weight + 4.799 × height − 5.677 × age
    Female: 447.593 + 9.247 × weight + 3.098 × height − 4.330 × age
    """

    name: str = "harris_benedict"

    def calculate(self, metrics: BodyMetrics) -> float:
        validate_body_metrics(metrics)
        if metrics.sex is Sex.MALE:
            return (
                88.362
                + 13.397 * metrics.weight_kg
                + 4.799 * metrics.height_cm
                - 5.677 * metrics.age_years
            )
        return (
            447.593
            + 9.247 * metrics.weight_kg
            + 3.098 * metrics.height_cm
            - 4.330 * metrics.age_years
        )


BMR_STRATEGIES: dict[str, BmrStrategy] = {
    MifflinStJeor.name: MifflinStJeor(),
    HarrisBenedict.name: HarrisBenedict(),
}


def get_bmr_strategy(name: str) -> BmrStrategy:
    """Return the BMR strategy registered under ``name``."""
    try:
        return BMR_STRATEGIES[name]
    except KeyError:
        known = ", ".join(sorted(BMR_STRATEGIES))
        raise ValueError(
            f"Unknown BMR strategy {name!r} (expected one of: {known})"
        ) from None


def validate_body_metrics(metrics: BodyMetrics) -> None:
    """Reject non-positive measurements."""
    if metrics.weight_kg <= 0:
        raise InvalidBodyMetrics(f"Weight must be positive, got {metrics.weight_kg}")
    if metrics.height_cm <= 0:
        raise InvalidBodyMetrics(f"Height must be positive, got {metrics.height_cm}")
    if metrics.age_years <= 0:
        raise InvalidBodyMetrics(f"Age must be positive, got {metrics.age_years}")


def parse_sex(raw: Sex | str) -> Sex:
    """Parse ``male``/``female`` or the stored ``M``/``F`` codes."""
    if isinstance(raw, Sex):
        return raw
    value = str(raw).strip().lower()
    if value in {"m", "male"}:
        return Sex.MALE
    if value in {"f", "female"}:
        return Sex.FEMALE
    raise InvalidBodyMetrics(f"Unknown sex: {raw!r}")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up, like JS ``Math.round``.

    ``-2.5`` rounds to ``-2``.
    """
    return math.floor(value + 0.5)
