"""Endpoints for a user's profile, diet and daily ledger."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request, status

from kalorix.api.auth import require_api_token
from kalorix.api.schemas import ProfileChangesPayload, WeightLogPayload  # noqa: TC001
from kalorix.services.diets import serialize_diet
from kalorix.services.ledger import serialize_balance, serialize_ledger
from kalorix.services.profiles import serialize_profile
from kalorix.services.weights import serialize_weight

if TYPE_CHECKING:
    from kalorix.containers import AppContainer

router = APIRouter(
    prefix="/users", tags=["users"], dependencies=[Depends(require_api_token)]
)


@router.get("/{phone}/profile")
async def get_profile(phone: str, request: Request) -> dict[str, object]:
    """Return a user's profile."""
    container: AppContainer = request.app.state.container
    return serialize_profile(container.profile_service.get_profile(phone))


@router.patch("/{phone}/profile")
async def update_profile(
    phone: str, payload: ProfileChangesPayload, request: Request
) -> dict[str, object]:
    """Update a profile and recalculate the diet when needed."""
    container: AppContainer = request.app.state.container
    result = container.profile_service.update_profile(phone, payload.changes())
    return {
        "profile": serialize_profile(result.profile),
        "diet": serialize_diet(result.diet) if result.diet else None,
    }


@router.post("/{phone}/diet/preview")
async def preview_diet(
    phone: str, payload: ProfileChangesPayload, request: Request
) -> dict[str, object]:
    """Return the diet the profile would get, without saving."""
    container: AppContainer = request.app.state.container
    preview = container.profile_service.preview_update(phone, payload.changes())
    return preview.summary()


@router.get("/{phone}/ledger/today")
async def ledger_today(phone: str, request: Request) -> dict[str, object]:
    """Return today's ledger."""
    container: AppContainer = request.app.state.container
    snapshot = container.ledger_service.get_day(phone)
    return {"day": snapshot.day.isoformat(), **serialize_ledger(snapshot.ledger)}


@router.get("/{phone}/reports/balance")
async def balance_history(
    phone: str, request: Request, days: int = Query(default=30, ge=1, le=365)
) -> dict[str, object]:
    """Return the daily calorie balance for the last ``days`` days."""
    container: AppContainer = request.app.state.container
    history = container.ledger_service.balance_history(phone, days=days)
    return {"days": serialize_balance(history)}


@router.post("/{phone}/weights", status_code=status.HTTP_201_CREATED)
async def log_weight(
    phone: str, payload: WeightLogPayload, request: Request
) -> dict[str, object]:
    """Log a weigh-in and recalculate the diet."""
    container: AppContainer = request.app.state.container
    result = container.weight_service.log_weight(phone, payload.weight_kg)
    return {
        "entry": serialize_weight(result.entry),
        "profile": serialize_profile(result.profile),
        "diet": serialize_diet(result.diet) if result.diet else None,
    }


@router.get("/{phone}/weights")
async def list_weights(phone: str, request: Request) -> dict[str, object]:
    """Return the weight history."""
    container: AppContainer = request.app.state.container
    weights = container.weight_service.list_weights(phone)
    return {"weights": [serialize_weight(entry) for entry in weights]}
