"""Endpoint used by the messaging workflow after each logged entry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from kalorix.api.auth import require_api_token
from kalorix.api.schemas import DailyReportRequest  # noqa: TC001

if TYPE_CHECKING:
    from kalorix.containers import AppContainer

router = APIRouter(
    prefix="/workflow", tags=["workflow"], dependencies=[Depends(require_api_token)]
)


@router.post("/daily-report")
async def daily_report(
    payload: DailyReportRequest, request: Request
) -> dict[str, object]:
    """Return the formatted daily report and its structured summary."""
    container: AppContainer = request.app.state.container
    report = container.report_service.build_daily_report(payload.phone)
    return {"summary": report.summary, "message": report.message}
