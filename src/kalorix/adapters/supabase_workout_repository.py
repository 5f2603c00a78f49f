"""Supabase repository for logged workouts."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from kalorix.domain.records import WorkoutEntry
from kalorix.services.ledger import WorkoutRepository


@dataclass
class SupabaseWorkoutRepository(WorkoutRepository):
    """Supabase implementation for the ``workouts`` table."""

    client: Client

    def list_workouts(self, user_id: UUID, day: date) -> list[WorkoutEntry]:
        """Return workouts performed on a day."""
        response = (
            self.client.table("workouts")
            .select("name, date, duration_minutes, calories_burned")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .order("created_at", desc=True)
            .execute()
        )
        return [
            WorkoutEntry(
                name=str(row.get("name") or ""),
                performed_on=date.fromisoformat(str(row["date"])),
                duration_minutes=float(row.get("duration_minutes") or 0),
                calories_burned=float(row.get("calories_burned") or 0),
            )
            for row in response.data or []
        ]
