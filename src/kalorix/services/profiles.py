"""Profile updates and the diet recalculation they trigger."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from kalorix.domain.bmr import BmrStrategy, HarrisBenedict, parse_sex, round_half_up
from kalorix.domain.energy import MultiplierOnBmr, calculate_energy_budget
from kalorix.domain.enums import (
    Sex,
    normalize_legacy_goal,
    parse_activity_level,
    parse_diet_mode,
)
from kalorix.domain.errors import InvalidBodyMetrics
from kalorix.domain.macros import allocate_by_body_weight
from kalorix.domain.models import BodyMetrics, EnergyBudget, MacroBudget
from kalorix.domain.phone import normalize_phone
from kalorix.domain.records import DietRecord, UserProfile
from kalorix.services.audit import AuditService
from kalorix.services.diets import DietRepository, diet_from_budget, serialize_diet

_logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset(
    {
        "name",
        "email",
        "weight_kg",
        "height_cm",
        "age_years",
        "sex",
        "activity_level",
        "goal",
        "mode",
    }
)
DIET_FIELDS = frozenset(
    {"weight_kg", "height_cm", "age_years", "sex", "activity_level", "goal", "mode"}
)
BODY_FIELDS = frozenset({"weight_kg", "height_cm", "age_years", "sex"})


class ProfileNotFound(LookupError):
    """Raised when no user exists for a phone."""


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, phone: str) -> UserProfile | None:
        """Return the profile for a phone, if present."""

    def update_profile(self, profile: UserProfile) -> UserProfile:
        """Persist editable profile fields and return the stored profile."""


@dataclass(frozen=True)
class DietPreview:
    """Diet computed from a profile without saving it."""

    budget: EnergyBudget
    macros: MacroBudget

    def summary(self) -> dict[str, int]:
        """Return the rounded figures shown in the live preview."""
        return {
            "bmr": round_half_up(self.budget.bmr),
            "tdee": round_half_up(self.budget.base_target),
            "final_target": round_half_up(self.budget.final_target),
            "protein_g": round_half_up(self.macros.protein_g),
            "carb_g": round_half_up(self.macros.carb_g),
            "fat_g": round_half_up(self.macros.fat_g),
        }


@dataclass(frozen=True)
class ProfileUpdate:
    """Result of a profile update."""

    profile: UserProfile
    diet: DietRecord | None


@dataclass
class ProfileService:
    """Applies profile edits and keeps the stored diet in sync."""

    profile_repository: ProfileRepository
    diet_repository: DietRepository
    audit_service: AuditService
    bmr_strategy: BmrStrategy = HarrisBenedict()

    def get_profile(self, phone: str) -> UserProfile:
        """Return the profile for a phone or raise ProfileNotFound."""
        key = normalize_phone(phone)
        profile = self.profile_repository.get_profile(key)
        if profile is None:
            raise ProfileNotFound(f"No user for phone {key}")
        return profile

    def simulate_diet(self, profile: UserProfile) -> DietPreview:
        """Compute the diet a profile would get, without persisting it."""
        metrics = BodyMetrics(
            weight_kg=float(profile.weight_kg),
            height_cm=float(profile.height_cm),
            age_years=int(profile.age_years),
            sex=parse_sex(profile.sex),
        )
        goal = normalize_legacy_goal(profile.goal)
        bmr = self.bmr_strategy.calculate(metrics)
        budget = calculate_energy_budget(
            bmr=bmr,
            activity_level=parse_activity_level(profile.activity_level),
            goal=goal,
            mode=profile.mode,
            activity_model=MultiplierOnBmr(),
        )
        macros = allocate_by_body_weight(budget.final_target, metrics.weight_kg, goal)
        return DietPreview(budget=budget, macros=macros)

    def preview_update(self, phone: str, changes: dict[str, object]) -> DietPreview:
        """Return the diet the profile would get with ``changes`` applied."""
        _reject_unknown_fields(changes)
        return self.simulate_diet(_apply_changes(self.get_profile(phone), changes))

    def update_profile(self, phone: str, changes: dict[str, object]) -> ProfileUpdate:
        """Apply changes and recalculate the diet when its inputs changed.

        The merged profile is validated through the calculator before anything
        is written, so invalid metrics leave the stored profile untouched.
        """
        _reject_unknown_fields(changes)
        current = self.get_profile(phone)
        updated = _apply_changes(current, changes)

        preview = None
        if DIET_FIELDS & set(changes):
            preview = self.simulate_diet(updated)

        stored = self.profile_repository.update_profile(updated)
        if preview is None:
            return ProfileUpdate(profile=stored, diet=None)

        diet = diet_from_budget(stored.phone, preview.budget, preview.macros)
        previous = self.diet_repository.get_diet(stored.phone)
        self.diet_repository.upsert_diet(diet)
        if previous != diet:
            self.audit_service.record_diet_change(
                user_id=stored.id,
                phone=stored.phone,
                before=serialize_diet(previous) if previous else None,
                after=serialize_diet(diet),
            )
        _logger.info(
            "Diet recalculated: phone=%s strategy=%s final_target=%s",
            stored.phone,
            self.bmr_strategy.name,
            diet.final_target,
        )
        return ProfileUpdate(profile=stored, diet=diet)


def _reject_unknown_fields(changes: dict[str, object]) -> None:
    unknown = set(changes) - EDITABLE_FIELDS
    if unknown:
        raise ValueError(f"Fields cannot be edited: {', '.join(sorted(unknown))}")


def _apply_changes(profile: UserProfile, changes: dict[str, object]) -> UserProfile:
    updates: dict[str, object] = {}
    for key, value in changes.items():
        if key in BODY_FIELDS and value is None:
            raise InvalidBodyMetrics(f"{key} cannot be empty")
        if key == "goal":
            updates[key] = normalize_legacy_goal(value).value
        elif key == "activity_level":
            updates[key] = parse_activity_level(value)
        elif key == "sex":
            updates[key] = "M" if parse_sex(value) is Sex.MALE else "F"
        elif key == "mode":
            updates[key] = parse_diet_mode(value)
        else:
            updates[key] = value
    return replace(profile, **updates)


def serialize_profile(profile: UserProfile) -> dict[str, object]:
    """Return a JSON-friendly view of a profile."""
    return {
        "id": str(profile.id),
        "name": profile.name,
        "phone": profile.phone,
        "email": profile.email,
        "weight_kg": profile.weight_kg,
        "height_cm": profile.height_cm,
        "age_years": profile.age_years,
        "sex": profile.sex,
        "activity_level": profile.activity_level,
        "goal": profile.goal,
        "mode": profile.mode.value,
        "subscription_active": profile.subscription_active,
    }
