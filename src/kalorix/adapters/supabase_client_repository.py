"""Supabase repository for nutritionist clients and rosters."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from kalorix.adapters.supabase_profile_repository import (
    PROFILE_COLUMNS,
    parse_profile,
)
from kalorix.domain.enums import DietMode
from kalorix.domain.records import UserProfile
from kalorix.services.clients import ClientRepository
from kalorix.services.roster import RosterRepository


@dataclass
class SupabaseClientRepository(ClientRepository, RosterRepository):
    """Supabase implementation over ``users`` and ``nutritionist_clients``."""

    client: Client

    def create_client(self, payload: dict[str, object]) -> UserProfile:
        """Insert a user row for a new client."""
        response = (
            self.client.table("users")
            .insert(
                {
                    "nome": payload["name"],
                    "telefone": payload["phone"],
                    "email": payload.get("email"),
                    "peso": str(payload["weight_kg"]),
                    "altura": payload["height_cm"],
                    "idade": payload["age_years"],
                    "sexo": payload["sex"],
                    "nivel_atividade": str(payload["activity_level"]),
                    "objetivo": payload["goal"],
                    "dieta_dinamica": payload.get("mode") is not DietMode.STATIC,
                    "user_type": "client",
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create client in Supabase")
        return parse_profile(response.data[0])

    def link_client(self, nutritionist_id: UUID, user_id: UUID) -> None:
        """Attach a client to a nutritionist."""
        self.client.table("nutritionist_clients").insert(
            {"nutritionist_id": str(nutritionist_id), "client_id": str(user_id)}
        ).execute()

    def list_clients(self, nutritionist_id: UUID) -> list[UserProfile]:
        """Return the profiles linked to a nutritionist."""
        links = (
            self.client.table("nutritionist_clients")
            .select("client_id")
            .eq("nutritionist_id", str(nutritionist_id))
            .execute()
        )
        client_ids = [str(row["client_id"]) for row in links.data or []]
        if not client_ids:
            return []
        response = (
            self.client.table("users")
            .select(PROFILE_COLUMNS)
            .in_("id", client_ids)
            .order("nome", desc=False)
            .execute()
        )
        return [parse_profile(row) for row in response.data or []]
