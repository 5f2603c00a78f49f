"""Supabase repository for the weight log."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from kalorix.domain.records import WeightEntry
from kalorix.services.weights import WeightRepository


@dataclass
class SupabaseWeightRepository(WeightRepository):
    """Supabase implementation for the ``registros_peso`` table."""

    client: Client

    def log_weight(self, user_id: UUID, phone: str, weight_kg: float) -> WeightEntry:
        """Insert a weigh-in row."""
        response = (
            self.client.table("registros_peso")
            .insert(
                {
                    "user_telefone": phone,
                    "usuario_id": str(user_id),
                    "peso": weight_kg,
                    "created_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to log weight in Supabase")
        return _parse_row(response.data[0])

    def list_weights(self, phone: str) -> list[WeightEntry]:
        """Return weigh-ins for a phone, oldest first."""
        response = (
            self.client.table("registros_peso")
            .select("peso, created_at")
            .eq("user_telefone", phone)
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> WeightEntry:
    return WeightEntry(
        weight_kg=float(row["peso"]),  # type: ignore[arg-type]
        logged_at=datetime.fromisoformat(str(row["created_at"])),
    )
