"""Daily follow-up report for the messaging workflow."""

import logging
from dataclasses import dataclass

from kalorix.domain.enums import DietMode
from kalorix.domain.ledger import format_status_message
from kalorix.services.ledger import DaySnapshot, LedgerService

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DailyReport:
    """Text report plus the figures it was built from."""

    summary: dict[str, object]
    message: str


@dataclass
class ReportService:
    """Builds the report the messaging workflow sends after each log."""

    ledger_service: LedgerService
    platform_url: str | None = None

    def build_daily_report(self, phone: str) -> DailyReport:
        """Return today's report for a user."""
        snapshot = self.ledger_service.get_day(phone)
        report = DailyReport(
            summary=_summary(snapshot),
            message=format_status_message(snapshot.ledger, self.platform_url),
        )
        _logger.info(
            "Daily report built: phone=%s status=%s",
            snapshot.profile.phone,
            snapshot.ledger.status.value,
        )
        return report


def _summary(snapshot: DaySnapshot) -> dict[str, object]:
    ledger = snapshot.ledger
    budget = ledger.budget
    return {
        "day": snapshot.day.isoformat(),
        "bmr": budget.bmr,
        "neat": budget.neat_or_bonus,
        "base_target": budget.base_target,
        "dynamic_diet": budget.mode is DietMode.DYNAMIC,
        "exercise_calories": ledger.exercise_calories,
        "day_target": ledger.effective_target - budget.goal_adjustment,
        "consumed_calories": ledger.consumed.calories,
        "goal_adjustment": budget.goal_adjustment,
        "balance": ledger.balance,
        "user_goal": snapshot.profile.goal,
        "remaining_to_target": -ledger.balance,
        "status": ledger.status.value,
    }
