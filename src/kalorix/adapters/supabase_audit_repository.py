"""Supabase repository for diet audit events."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from kalorix.services.audit import AuditRepository


@dataclass
class SupabaseAuditRepository(AuditRepository):
    """Writes diet changes to ``diet_audit_events``."""

    client: Client

    def create_event(  # noqa: PLR0913
        self,
        user_id: UUID,
        entity_type: str,
        entity_id: str,
        event_type: str,
        before: dict[str, object] | None,
        after: dict[str, object] | None,
    ) -> None:
        """Insert an audit row."""
        self.client.table("diet_audit_events").insert(
            {
                "user_id": str(user_id),
                "entity_type": entity_type,
                "entity_id": entity_id,
                "event_type": event_type,
                "before_json": before,
                "after_json": after,
                "created_at": datetime.now(tz=UTC).isoformat(),
            }
        ).execute()
