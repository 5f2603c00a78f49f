"""Tests for HTTP endpoints."""

from uuid import uuid4

from fastapi.testclient import TestClient

from kalorix.api.app import create_app
from tests.conftest import TEST_PHONE, make_diet, make_meal, make_profile

HEADERS = {"X-Api-Token": "api-token"}


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_requires_api_token(container, profile_repository) -> None:
    profile_repository.add(make_profile())
    client = TestClient(create_app(container))

    missing = client.get(f"/users/{TEST_PHONE}/profile")
    wrong = client.get(f"/users/{TEST_PHONE}/profile", headers={"X-Api-Token": "x"})

    assert missing.status_code == 401
    assert wrong.status_code == 401


def test_get_profile(container, profile_repository) -> None:
    profile_repository.add(make_profile())
    client = TestClient(create_app(container))

    response = client.get(f"/users/{TEST_PHONE}/profile", headers=HEADERS)

    assert response.status_code == 200
    assert response.json()["phone"] == TEST_PHONE
    assert response.json()["mode"] == "dynamic"


def test_unknown_profile_returns_404(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/users/5511000000000/profile", headers=HEADERS)

    assert response.status_code == 404
    assert response.json()["error"] == "ProfileNotFound"


def test_patch_profile_recalculates_diet(
    container, profile_repository, diet_repository
) -> None:
    profile_repository.add(make_profile(activity_level=3))
    client = TestClient(create_app(container))

    response = client.patch(
        f"/users/{TEST_PHONE}/profile",
        headers=HEADERS,
        json={"activity_level": 1, "goal": "maintenance"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["profile"]["activity_level"] == 1
    assert data["diet"]["final_target"] == 2035
    assert diet_repository.get_diet(TEST_PHONE) is not None


def test_patch_profile_invalid_metrics_returns_422(
    container, profile_repository, diet_repository
) -> None:
    profile_repository.add(make_profile())
    client = TestClient(create_app(container))

    response = client.patch(
        f"/users/{TEST_PHONE}/profile", headers=HEADERS, json={"height_cm": 0}
    )

    assert response.status_code == 422
    assert response.json()["error"] == "InvalidBodyMetrics"
    assert diet_repository.diets == {}


def test_patch_profile_invalid_activity_returns_422(
    container, profile_repository
) -> None:
    profile_repository.add(make_profile())
    client = TestClient(create_app(container))

    response = client.patch(
        f"/users/{TEST_PHONE}/profile", headers=HEADERS, json={"activity_level": 9}
    )

    assert response.status_code == 422
    assert response.json()["error"] == "InvalidActivityLevel"


def test_patch_profile_null_weight_returns_422(container, profile_repository) -> None:
    stored = profile_repository.add(make_profile())
    client = TestClient(create_app(container))

    response = client.patch(
        f"/users/{TEST_PHONE}/profile", headers=HEADERS, json={"weight_kg": None}
    )

    assert response.status_code == 422
    assert profile_repository.updates == []
    assert profile_repository.get_profile(TEST_PHONE) == stored


def test_diet_preview(container, profile_repository, diet_repository) -> None:
    profile_repository.add(make_profile())
    client = TestClient(create_app(container))

    response = client.post(
        f"/users/{TEST_PHONE}/diet/preview",
        headers=HEADERS,
        json={"activity_level": "1"},
    )

    assert response.status_code == 200
    assert response.json()["tdee"] == 2035
    assert diet_repository.diets == {}


def test_ledger_today(
    container, profile_repository, diet_repository, meal_repository
) -> None:
    profile_repository.add(make_profile())
    diet_repository.upsert_diet(make_diet())
    meal_repository.add(
        TEST_PHONE, make_meal(500, consumed_on=container.ledger_service.today())
    )
    client = TestClient(create_app(container))

    response = client.get(f"/users/{TEST_PHONE}/ledger/today", headers=HEADERS)

    assert response.status_code == 200
    data = response.json()
    assert data["effective_target"] == 1999
    assert data["remaining"]["calories"] == 1499
    assert data["status"] == "under"


def test_ledger_without_diet_returns_404(container, profile_repository) -> None:
    profile_repository.add(make_profile())
    client = TestClient(create_app(container))

    response = client.get(f"/users/{TEST_PHONE}/ledger/today", headers=HEADERS)

    assert response.status_code == 404
    assert response.json()["error"] == "DietNotFound"


def test_daily_report(container, profile_repository, diet_repository) -> None:
    profile_repository.add(make_profile())
    diet_repository.upsert_diet(make_diet())
    client = TestClient(create_app(container))

    response = client.post(
        "/workflow/daily-report", headers=HEADERS, json={"phone": TEST_PHONE}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["summary"]["status"] == "under"
    assert "You can still consume 1999 kcal" in data["message"]


def test_create_client_and_list_roster(container) -> None:
    client = TestClient(create_app(container))
    nutritionist_id = uuid4()

    created = client.post(
        f"/nutritionists/{nutritionist_id}/clients",
        headers=HEADERS,
        json={
            "name": "Bia",
            "phone": "(21) 98765-4321",
            "weight_kg": 70,
            "height_cm": 175,
            "age_years": 30,
            "sex": "M",
            "activity_level": 3,
            "mode": "static",
        },
    )

    assert created.status_code == 201
    body = created.json()
    assert body["profile"]["phone"] == "5521987654321"
    assert body["diet"]["daily_calories"] == 2399
    assert body["preview"]["macros"]["protein_g"] == 180

    roster = client.get(f"/nutritionists/{nutritionist_id}/clients", headers=HEADERS)

    assert roster.status_code == 200
    clients = roster.json()["clients"]
    assert clients[0]["name"] == "Bia"
    assert clients[0]["phone"] == "+55 (21) 98765-4321"


def test_client_preview_with_zero_manual_calories(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        f"/nutritionists/{uuid4()}/clients/preview",
        headers=HEADERS,
        json={
            "weight_kg": 60,
            "height_cm": 165,
            "age_years": 25,
            "sex": "F",
            "manual_macros": {
                "calories": 0,
                "protein_g": 0,
                "carb_g": 0,
                "fat_g": 0,
            },
        },
    )

    assert response.status_code == 200
    assert response.json()["percentages"] is None
    assert response.json()["bmr"] == 1345


def test_create_client_with_blank_name_returns_422(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        f"/nutritionists/{uuid4()}/clients",
        headers=HEADERS,
        json={
            "name": " ",
            "phone": "21987654321",
            "weight_kg": 70,
            "height_cm": 175,
            "age_years": 30,
            "sex": "M",
        },
    )

    assert response.status_code == 422
    assert response.json()["error"] == "InvalidClientForm"


def test_balance_history(
    container, profile_repository, diet_repository, meal_repository
) -> None:
    profile_repository.add(make_profile())
    diet_repository.upsert_diet(make_diet())
    meal_repository.add(
        TEST_PHONE, make_meal(2100, consumed_on=container.ledger_service.today())
    )
    client = TestClient(create_app(container))

    response = client.get(
        f"/users/{TEST_PHONE}/reports/balance", headers=HEADERS, params={"days": 7}
    )

    assert response.status_code == 200
    days = response.json()["days"]
    assert len(days) == 7
    assert days[-1]["balance"] == 101
    assert days[0]["balance"] == -1999


def test_balance_history_rejects_zero_days(container, profile_repository) -> None:
    profile_repository.add(make_profile())
    client = TestClient(create_app(container))

    response = client.get(
        f"/users/{TEST_PHONE}/reports/balance", headers=HEADERS, params={"days": 0}
    )

    assert response.status_code == 422


def test_log_and_list_weights(
    container, profile_repository, diet_repository, weight_repository
) -> None:
    profile_repository.add(make_profile(weight_kg=80.0, activity_level=1))
    client = TestClient(create_app(container))

    created = client.post(
        f"/users/{TEST_PHONE}/weights", headers=HEADERS, json={"weight_kg": 70}
    )

    assert created.status_code == 201
    data = created.json()
    assert data["entry"]["weight_kg"] == 70.0
    assert data["profile"]["weight_kg"] == 70.0
    assert data["diet"]["final_target"] == 2035
    assert diet_repository.get_diet(TEST_PHONE) is not None

    listed = client.get(f"/users/{TEST_PHONE}/weights", headers=HEADERS)

    assert listed.status_code == 200
    assert [item["weight_kg"] for item in listed.json()["weights"]] == [70.0]


def test_log_invalid_weight_returns_422(
    container, profile_repository, weight_repository
) -> None:
    profile_repository.add(make_profile())
    client = TestClient(create_app(container))

    response = client.post(
        f"/users/{TEST_PHONE}/weights", headers=HEADERS, json={"weight_kg": 0}
    )

    assert response.status_code == 422
    assert response.json()["error"] == "InvalidBodyMetrics"
    assert weight_repository.entries == {}
