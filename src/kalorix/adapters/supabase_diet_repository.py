"""Supabase repository for diet goals."""

from dataclasses import dataclass

from supabase import Client

from kalorix.domain.bmr import round_half_up
from kalorix.domain.enums import DietMode
from kalorix.domain.records import DietRecord
from kalorix.services.diets import DietRepository


@dataclass
class SupabaseDietRepository(DietRepository):
    """Supabase implementation for the ``dietas`` table."""

    client: Client

    def get_diet(self, phone: str) -> DietRecord | None:
        """Return the diet for a phone, if present."""
        response = (
            self.client.table("dietas")
            .select(
                "usuario_telefone, calorias_diarias, proteina_gramas, "
                "carboidrato_gramas, gordura_gramas, gasto_basal, neat, "
                "meta_base, meta_alvo, dieta_dinamica"
            )
            .eq("usuario_telefone", phone)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def upsert_diet(self, diet: DietRecord) -> None:
        """Create or replace the diet row for a phone.

        Calorie and macro targets are text columns.
        """
        self.client.table("dietas").upsert(
            {
                "usuario_telefone": diet.phone,
                "calorias_diarias": str(diet.daily_calories),
                "proteina_gramas": str(diet.protein_g),
                "carboidrato_gramas": str(diet.carb_g),
                "gordura_gramas": str(diet.fat_g),
                "gasto_basal": diet.bmr,
                "neat": diet.neat,
                "meta_base": diet.base_target,
                "meta_alvo": diet.final_target,
                "dieta_dinamica": diet.mode is DietMode.DYNAMIC,
            },
            on_conflict="usuario_telefone",
        ).execute()


def _parse_row(row: dict[str, object]) -> DietRecord:
    dynamic = row.get("dieta_dinamica")
    return DietRecord(
        phone=str(row.get("usuario_telefone") or ""),
        daily_calories=_to_int(row.get("calorias_diarias")),
        protein_g=_to_int(row.get("proteina_gramas")),
        carb_g=_to_int(row.get("carboidrato_gramas")),
        fat_g=_to_int(row.get("gordura_gramas")),
        bmr=_to_int(row.get("gasto_basal")),
        neat=_to_int(row.get("neat")),
        base_target=_to_int(row.get("meta_base")),
        final_target=_to_int(row.get("meta_alvo")),
        mode=DietMode.STATIC if dynamic is False else DietMode.DYNAMIC,
    )


def _to_int(value: object) -> int:
    if value is None or value == "":
        return 0
    return round_half_up(float(value))
