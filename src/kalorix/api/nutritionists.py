"""Endpoints for nutritionists managing their clients."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, status

from kalorix.api.auth import require_api_token
from kalorix.api.schemas import ClientGoalPayload, NewClientPayload  # noqa: TC001
from kalorix.services.clients import serialize_preview
from kalorix.services.diets import serialize_diet
from kalorix.services.profiles import serialize_profile

if TYPE_CHECKING:
    from kalorix.containers import AppContainer

router = APIRouter(
    prefix="/nutritionists",
    tags=["nutritionists"],
    dependencies=[Depends(require_api_token)],
)


@router.get("/{nutritionist_id}/clients")
async def list_clients(nutritionist_id: UUID, request: Request) -> dict[str, object]:
    """Return the roster with per-client metrics."""
    container: AppContainer = request.app.state.container
    return {"clients": container.roster_service.list_clients(nutritionist_id)}


@router.post("/{nutritionist_id}/clients/preview")
async def preview_client_goal(
    nutritionist_id: UUID, payload: ClientGoalPayload, request: Request
) -> dict[str, object]:
    """Return the goal a new client would start with."""
    container: AppContainer = request.app.state.container
    preview = container.client_service.preview_goal(payload.to_request())
    return serialize_preview(preview)


@router.post("/{nutritionist_id}/clients", status_code=status.HTTP_201_CREATED)
async def create_client(
    nutritionist_id: UUID, payload: NewClientPayload, request: Request
) -> dict[str, object]:
    """Create a client with their first diet."""
    container: AppContainer = request.app.state.container
    created = container.client_service.create_client(
        nutritionist_id, payload.to_new_client()
    )
    return {
        "profile": serialize_profile(created.profile),
        "diet": serialize_diet(created.diet),
        "preview": serialize_preview(created.preview),
    }
