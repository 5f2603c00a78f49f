"""Weigh-ins and the profile update they trigger."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from kalorix.domain.records import DietRecord, UserProfile, WeightEntry
from kalorix.services.profiles import ProfileService

_logger = logging.getLogger(__name__)


class WeightRepository(Protocol):
    """Persistence interface for the weight log."""

    def log_weight(self, user_id: UUID, phone: str, weight_kg: float) -> WeightEntry:
        """Insert a weigh-in and return it."""

    def list_weights(self, phone: str) -> list[WeightEntry]:
        """Return weigh-ins for a phone, oldest first."""


@dataclass(frozen=True)
class WeightLog:
    """A stored weigh-in with the profile and diet it produced."""

    entry: WeightEntry
    profile: UserProfile
    diet: DietRecord | None


@dataclass
class WeightService:
    """Keeps the weight log and the profile weight in step."""

    weight_repository: WeightRepository
    profile_service: ProfileService

    def log_weight(self, phone: str, weight_kg: float) -> WeightLog:
        """Update the profile weight, then append the weigh-in.

        The profile update recalculates the diet and rejects invalid weights
        before anything is written.
        """
        update = self.profile_service.update_profile(
            phone, {"weight_kg": float(weight_kg)}
        )
        profile = update.profile
        entry = self.weight_repository.log_weight(
            profile.id, profile.phone, float(weight_kg)
        )
        _logger.info("Weight logged: user=%s weight_kg=%s", profile.id, weight_kg)
        return WeightLog(entry=entry, profile=profile, diet=update.diet)

    def list_weights(self, phone: str) -> list[WeightEntry]:
        """Return the weight history of a user."""
        profile = self.profile_service.get_profile(phone)
        return self.weight_repository.list_weights(profile.phone)


def serialize_weight(entry: WeightEntry) -> dict[str, object]:
    """Return a JSON-friendly view of a weigh-in."""
    return {"weight_kg": entry.weight_kg, "logged_at": entry.logged_at.isoformat()}
