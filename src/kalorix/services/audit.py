"""Audit trail for diet changes."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


class AuditRepository(Protocol):
    """Persistence interface for audit events."""

    def create_event(  # noqa: PLR0913
        self,
        user_id: UUID,
        entity_type: str,
        entity_id: str,
        event_type: str,
        before: dict[str, object] | None,
        after: dict[str, object] | None,
    ) -> None:
        """Create an audit event row."""


@dataclass
class AuditService:
    """Service for recording audit events."""

    repository: AuditRepository

    def record_diet_change(
        self,
        user_id: UUID,
        phone: str,
        before: dict[str, object] | None,
        after: dict[str, object],
    ) -> None:
        """Persist a diet recalculation with before and after snapshots."""
        event_type = "diet_created" if before is None else "diet_recalculated"
        self.repository.create_event(
            user_id=user_id,
            entity_type="diet",
            entity_id=phone,
            event_type=event_type,
            before=before,
            after=after,
        )
