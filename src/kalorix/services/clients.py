"""Client creation for nutritionists."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from kalorix.domain.bmr import BmrStrategy, MifflinStJeor, parse_sex, round_half_up
from kalorix.domain.energy import (
    DEFAULT_FIXED_NEAT_KCAL,
    FlatBonus,
    calculate_energy_budget,
)
from kalorix.domain.enums import (
    DietMode,
    Sex,
    normalize_legacy_goal,
    parse_activity_level,
)
from kalorix.domain.errors import DivisionByZero
from kalorix.domain.macros import (
    allocate_default_split,
    macro_percentages,
    manual_split,
)
from kalorix.domain.metrics import calc_bmi
from kalorix.domain.models import (
    BodyMetrics,
    EnergyBudget,
    MacroBudget,
    MacroPercentages,
)
from kalorix.domain.phone import normalize_phone
from kalorix.domain.records import DietRecord, UserProfile
from kalorix.services.diets import DietRepository, diet_from_budget

_logger = logging.getLogger(__name__)


class InvalidClientForm(ValueError):
    """Raised when a new client's form is incomplete."""


class ClientRepository(Protocol):
    """Persistence interface for nutritionist clients."""

    def create_client(self, payload: dict[str, object]) -> UserProfile:
        """Insert a user row and return it."""

    def link_client(self, nutritionist_id: UUID, user_id: UUID) -> None:
        """Attach a user to a nutritionist's roster."""


@dataclass(frozen=True)
class ManualMacros:
    """Macros typed in by the nutritionist instead of auto-calculated."""

    calories: float
    protein_g: float
    carb_g: float
    fat_g: float


@dataclass(frozen=True)
class ClientGoalRequest:
    """Body data and diet choices from the client form."""

    weight_kg: float
    height_cm: float
    age_years: int
    sex: str
    goal: str = "maintenance"
    activity_level: int = 1
    mode: DietMode = DietMode.DYNAMIC
    manual_macros: ManualMacros | None = None


@dataclass(frozen=True)
class ClientGoalPreview:
    """Goal pre-populated for a new client."""

    bmr: int
    bmi: float | None
    budget: EnergyBudget
    macros: MacroBudget
    percentages: MacroPercentages | None


@dataclass(frozen=True)
class NewClient:
    """Identity fields plus the goal request for a new client."""

    name: str
    phone: str
    email: str | None
    goal: ClientGoalRequest


@dataclass(frozen=True)
class CreatedClient:
    """A persisted client and their first diet."""

    profile: UserProfile
    diet: DietRecord
    preview: ClientGoalPreview


@dataclass
class ClientService:
    """Computes and persists the initial goal of new clients."""

    client_repository: ClientRepository
    diet_repository: DietRepository
    bmr_strategy: BmrStrategy = MifflinStJeor()
    fixed_neat: float = DEFAULT_FIXED_NEAT_KCAL

    def preview_goal(self, request: ClientGoalRequest) -> ClientGoalPreview:
        """Compute the goal shown before the client is saved.

        BMR is rounded before NEAT and the activity bonus are added. Manual
        macros replace the 30/40/30 split; their percentages are None when
        the calories are 0.
        """
        metrics = BodyMetrics(
            weight_kg=float(request.weight_kg),
            height_cm=float(request.height_cm),
            age_years=int(request.age_years),
            sex=parse_sex(request.sex),
        )
        bmr = round_half_up(self.bmr_strategy.calculate(metrics))
        budget = calculate_energy_budget(
            bmr=bmr,
            activity_level=parse_activity_level(request.activity_level),
            goal=normalize_legacy_goal(request.goal),
            mode=request.mode,
            fixed_neat=self.fixed_neat,
            activity_model=FlatBonus(),
        )
        if request.manual_macros is None:
            macros = allocate_default_split(budget.final_target)
        else:
            manual = request.manual_macros
            macros = manual_split(
                manual.calories, manual.protein_g, manual.carb_g, manual.fat_g
            )
        try:
            percentages = macro_percentages(macros)
        except DivisionByZero:
            _logger.warning("Macro percentages unavailable for a 0 kcal budget")
            percentages = None
        return ClientGoalPreview(
            bmr=bmr,
            bmi=calc_bmi(metrics.weight_kg, metrics.height_cm),
            budget=budget,
            macros=macros,
            percentages=percentages,
        )

    def create_client(self, nutritionist_id: UUID, client: NewClient) -> CreatedClient:
        """Validate the form, then persist the user, the diet and the link."""
        _validate_form(client)
        preview = self.preview_goal(client.goal)
        phone = normalize_phone(client.phone)
        request = client.goal
        sex = parse_sex(request.sex)
        profile = self.client_repository.create_client(
            {
                "name": client.name.strip(),
                "phone": phone,
                "email": client.email or None,
                "weight_kg": float(request.weight_kg),
                "height_cm": float(request.height_cm),
                "age_years": int(request.age_years),
                "sex": "M" if sex is Sex.MALE else "F",
                "activity_level": parse_activity_level(request.activity_level),
                "goal": preview.budget.goal.value,
                "mode": request.mode,
            }
        )
        diet = diet_from_budget(phone, preview.budget, preview.macros)
        self.diet_repository.upsert_diet(diet)
        self.client_repository.link_client(nutritionist_id, profile.id)
        _logger.info(
            "Client created: nutritionist=%s user=%s daily_calories=%s",
            nutritionist_id,
            profile.id,
            diet.daily_calories,
        )
        return CreatedClient(profile=profile, diet=diet, preview=preview)


def _validate_form(client: NewClient) -> None:
    missing = []
    if not client.name.strip():
        missing.append("name")
    if not normalize_phone(client.phone):
        missing.append("phone")
    manual = client.goal.manual_macros
    if manual is not None:
        for field_name in ("calories", "protein_g", "carb_g", "fat_g"):
            if getattr(manual, field_name) <= 0:
                missing.append(field_name)
    if missing:
        raise InvalidClientForm(f"Missing or invalid fields: {', '.join(missing)}")


def serialize_preview(preview: ClientGoalPreview) -> dict[str, object]:
    """Return a JSON-friendly view of a goal preview."""
    budget = preview.budget
    percentages = preview.percentages
    return {
        "bmr": preview.bmr,
        "bmi": preview.bmi,
        "neat": round_half_up(budget.neat_or_bonus),
        "base_target": round_half_up(budget.base_target),
        "goal_adjustment": round_half_up(budget.goal_adjustment),
        "final_target": round_half_up(budget.final_target),
        "mode": budget.mode.value,
        "goal": budget.goal.value,
        "macros": {
            "calories": round_half_up(preview.macros.calories),
            "protein_g": preview.macros.protein_g,
            "carb_g": preview.macros.carb_g,
            "fat_g": preview.macros.fat_g,
        },
        "percentages": None
        if percentages is None
        else {
            "protein": round_half_up(percentages.protein),
            "carb": round_half_up(percentages.carb),
            "fat": round_half_up(percentages.fat),
        },
    }
