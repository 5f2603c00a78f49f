"""Supabase repository for user profiles."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from kalorix.domain.enums import DietMode, parse_activity_level
from kalorix.domain.errors import InvalidActivityLevel
from kalorix.domain.records import UserProfile
from kalorix.services.profiles import ProfileRepository

_logger = logging.getLogger(__name__)

PROFILE_COLUMNS = (
    "id, nome, email, telefone, peso, altura, idade, sexo, nivel_atividade, "
    "objetivo, dieta_dinamica, assinatura_ativa"
)


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for the ``users`` table."""

    client: Client

    def get_profile(self, phone: str) -> UserProfile | None:
        """Return the profile for a phone, if present."""
        response = (
            self.client.table("users")
            .select(PROFILE_COLUMNS)
            .eq("telefone", phone)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_profile(response.data[0])

    def update_profile(self, profile: UserProfile) -> UserProfile:
        """Write editable fields and return the stored profile."""
        response = (
            self.client.table("users")
            .update(
                {
                    "nome": profile.name,
                    "email": profile.email,
                    "peso": str(profile.weight_kg),
                    "altura": profile.height_cm,
                    "idade": profile.age_years,
                    "sexo": profile.sex,
                    "nivel_atividade": str(profile.activity_level),
                    "objetivo": profile.goal,
                    "dieta_dinamica": profile.mode is DietMode.DYNAMIC,
                }
            )
            .eq("telefone", profile.phone)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update profile in Supabase")
        return parse_profile(response.data[0])


def parse_profile(row: dict[str, object]) -> UserProfile:
    """Convert a ``users`` row into a profile.

    Weight and activity level are stored as text. An activity level that is
    not a valid integer is kept as stored and rejected when a diet is computed.
    """
    dynamic = row.get("dieta_dinamica")
    return UserProfile(
        id=UUID(str(row["id"])),
        name=str(row.get("nome") or ""),
        phone=str(row.get("telefone") or ""),
        email=row.get("email"),
        weight_kg=float(row.get("peso") or 0),
        height_cm=float(row.get("altura") or 0),
        age_years=int(row.get("idade") or 0),
        sex=str(row.get("sexo") or ""),
        activity_level=_activity_level(row.get("nivel_atividade")),
        goal=str(row.get("objetivo") or "maintenance"),
        mode=DietMode.STATIC if dynamic is False else DietMode.DYNAMIC,
        subscription_active=bool(row.get("assinatura_ativa")),
    )


def _activity_level(raw: object) -> int | str:
    stored = "" if raw is None else raw
    try:
        return parse_activity_level(stored)  # type: ignore[arg-type]
    except InvalidActivityLevel:
        _logger.warning("Stored activity level %r is not valid", stored)
        return str(stored)
