"""Supabase repository for logged meals."""

import logging
from dataclasses import dataclass
from datetime import date

from supabase import Client

from kalorix.domain.records import MealEntry
from kalorix.services.ledger import MealRepository

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for the ``registros_alimentares`` table."""

    client: Client

    def list_meals(self, phone: str, start: date, end: date) -> list[MealEntry]:
        """Return meals consumed between two dates, both inclusive."""
        response = (
            self.client.table("registros_alimentares")
            .select(
                "nome_alimento, data_consumo, calorias, proteinas, carboidratos, "
                "gorduras"
            )
            .eq("usuario_telefone", phone)
            .gte("data_consumo", start.isoformat())
            .lte("data_consumo", end.isoformat())
            .order("data_consumo", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> MealEntry:
    """Nutrient columns are text; unparseable values count as 0."""
    return MealEntry(
        name=str(row.get("nome_alimento") or ""),
        consumed_on=date.fromisoformat(str(row["data_consumo"])[:10]),
        calories=_to_float(row.get("calorias")),
        protein_g=_to_float(row.get("proteinas")),
        carb_g=_to_float(row.get("carboidratos")),
        fat_g=_to_float(row.get("gorduras")),
    )


def _to_float(value: object) -> float:
    if value is None or value == "":
        return 0.0
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        _logger.warning("Unparseable meal nutrient value %r counted as 0", value)
        return 0.0
