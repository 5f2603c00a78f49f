"""Tests for nutritionist client creation."""

from uuid import uuid4

import pytest

from kalorix.domain.enums import DietMode, Goal
from kalorix.services.clients import (
    ClientGoalRequest,
    ClientService,
    InvalidClientForm,
    ManualMacros,
    NewClient,
    serialize_preview,
)
from tests.conftest import (
    InMemoryClientRepository,
    InMemoryDietRepository,
    InMemoryProfileRepository,
)


def _service() -> tuple[
    ClientService, InMemoryClientRepository, InMemoryDietRepository
]:
    clients = InMemoryClientRepository(profiles=InMemoryProfileRepository())
    diets = InMemoryDietRepository()
    service = ClientService(client_repository=clients, diet_repository=diets)
    return service, clients, diets


def _request(**overrides: object) -> ClientGoalRequest:
    values: dict[str, object] = {
        "weight_kg": 70,
        "height_cm": 175,
        "age_years": 30,
        "sex": "M",
        "goal": "maintenance",
        "activity_level": 3,
        "mode": DietMode.STATIC,
    }
    values.update(overrides)
    return ClientGoalRequest(**values)  # type: ignore[arg-type]


def test_preview_static_goal() -> None:
    service, _, _ = _service()

    preview = service.preview_goal(_request())

    assert preview.bmr == 1649
    assert preview.bmi == 22.9
    assert preview.budget.neat_or_bonus == 750
    assert preview.budget.final_target == 2399
    assert (preview.macros.protein_g, preview.macros.carb_g, preview.macros.fat_g) == (
        180,
        240,
        80,
    )
    assert preview.percentages is not None
    assert serialize_preview(preview)["percentages"] == {
        "protein": 30,
        "carb": 40,
        "fat": 30,
    }


def test_preview_dynamic_legacy_goal() -> None:
    service, _, _ = _service()

    preview = service.preview_goal(_request(goal="1", mode=DietMode.DYNAMIC))

    assert preview.budget.goal is Goal.LOSE_MODERATE
    assert preview.budget.base_target == 1999
    assert preview.budget.final_target == 1499
    assert (preview.macros.protein_g, preview.macros.carb_g, preview.macros.fat_g) == (
        112,
        150,
        50,
    )


def test_preview_manual_macros() -> None:
    service, _, _ = _service()

    preview = service.preview_goal(
        _request(
            manual_macros=ManualMacros(
                calories=1800, protein_g=135, carb_g=180, fat_g=60
            )
        )
    )

    assert preview.macros.calories == 1800
    assert preview.percentages is not None
    assert preview.percentages.protein == pytest.approx(30)
    assert preview.percentages.fat == pytest.approx(30)


def test_zero_calorie_manual_macros_have_no_percentages() -> None:
    service, _, _ = _service()

    preview = service.preview_goal(
        _request(
            manual_macros=ManualMacros(calories=0, protein_g=0, carb_g=0, fat_g=0)
        )
    )

    assert preview.percentages is None
    assert serialize_preview(preview)["percentages"] is None


def test_create_client_persists_profile_diet_and_link() -> None:
    service, clients, diets = _service()
    nutritionist_id = uuid4()

    created = service.create_client(
        nutritionist_id,
        NewClient(name=" Bia ", phone="(21) 98765-4321", email="", goal=_request()),
    )

    assert created.profile.name == "Bia"
    assert created.profile.phone == "5521987654321"
    assert created.profile.email is None
    assert created.profile.goal == "maintenance"
    assert created.profile.mode is DietMode.STATIC
    assert clients.links[nutritionist_id] == [created.profile.id]
    stored = diets.get_diet("5521987654321")
    assert stored == created.diet
    assert stored is not None
    assert stored.daily_calories == 2399
    assert stored.bmr == 1649
    assert stored.neat == 750


@pytest.mark.parametrize(
    "client",
    [
        NewClient(name="  ", phone="21987654321", email=None, goal=_request()),
        NewClient(name="Bia", phone="", email=None, goal=_request()),
        NewClient(
            name="Bia",
            phone="21987654321",
            email=None,
            goal=_request(
                manual_macros=ManualMacros(calories=0, protein_g=0, carb_g=0, fat_g=0)
            ),
        ),
    ],
)
def test_invalid_form_creates_nothing(client: NewClient) -> None:
    service, clients, diets = _service()

    with pytest.raises(InvalidClientForm):
        service.create_client(uuid4(), client)

    assert clients.profiles.profiles == {}
    assert clients.links == {}
    assert diets.diets == {}
