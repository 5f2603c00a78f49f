"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from kalorix.adapters.supabase_audit_repository import SupabaseAuditRepository
from kalorix.adapters.supabase_client_repository import SupabaseClientRepository
from kalorix.adapters.supabase_diet_repository import SupabaseDietRepository
from kalorix.adapters.supabase_meal_repository import SupabaseMealRepository
from kalorix.adapters.supabase_profile_repository import SupabaseProfileRepository
from kalorix.adapters.supabase_weight_repository import SupabaseWeightRepository
from kalorix.adapters.supabase_workout_repository import SupabaseWorkoutRepository
from kalorix.config import Settings
from kalorix.domain.bmr import get_bmr_strategy
from kalorix.services.audit import AuditService
from kalorix.services.clients import ClientRepository, ClientService
from kalorix.services.diets import DietRepository
from kalorix.services.ledger import (
    LedgerService,
    MealRepository,
    WorkoutRepository,
)
from kalorix.services.profiles import ProfileRepository, ProfileService
from kalorix.services.reports import ReportService
from kalorix.services.roster import RosterRepository, RosterService
from kalorix.services.weights import WeightRepository, WeightService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    client_service: ClientService
    ledger_service: LedgerService
    report_service: ReportService
    roster_service: RosterService
    weight_service: WeightService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_repository = SupabaseProfileRepository(supabase_client)
    diet_repository = SupabaseDietRepository(supabase_client)
    meal_repository = SupabaseMealRepository(supabase_client)
    workout_repository = SupabaseWorkoutRepository(supabase_client)
    client_repository = SupabaseClientRepository(supabase_client)
    audit_service = AuditService(SupabaseAuditRepository(supabase_client))
    return wire_services(
        settings=resolved_settings,
        profile_repository=profile_repository,
        diet_repository=diet_repository,
        meal_repository=meal_repository,
        workout_repository=workout_repository,
        client_repository=client_repository,
        roster_repository=client_repository,
        weight_repository=SupabaseWeightRepository(supabase_client),
        audit_service=audit_service,
    )


def wire_services(  # noqa: PLR0913
    *,
    settings: Settings,
    profile_repository: ProfileRepository,
    diet_repository: DietRepository,
    meal_repository: MealRepository,
    workout_repository: WorkoutRepository,
    client_repository: ClientRepository,
    roster_repository: RosterRepository,
    weight_repository: WeightRepository,
    audit_service: AuditService,
) -> AppContainer:
    """Build the services on top of already-constructed repositories."""
    profile_service = ProfileService(
        profile_repository=profile_repository,
        diet_repository=diet_repository,
        audit_service=audit_service,
        bmr_strategy=get_bmr_strategy(settings.profile_bmr_strategy),
    )
    client_service = ClientService(
        client_repository=client_repository,
        diet_repository=diet_repository,
        bmr_strategy=get_bmr_strategy(settings.client_bmr_strategy),
        fixed_neat=settings.fixed_neat_kcal,
    )
    ledger_service = LedgerService(
        profile_repository=profile_repository,
        diet_repository=diet_repository,
        meal_repository=meal_repository,
        workout_repository=workout_repository,
        timezone_name=settings.timezone,
    )
    report_service = ReportService(
        ledger_service=ledger_service,
        platform_url=settings.platform_url,
    )
    roster_service = RosterService(
        roster_repository=roster_repository,
        meal_repository=meal_repository,
        ledger_service=ledger_service,
    )
    weight_service = WeightService(
        weight_repository=weight_repository,
        profile_service=profile_service,
    )
    return AppContainer(
        settings=settings,
        profile_service=profile_service,
        client_service=client_service,
        ledger_service=ledger_service,
        report_service=report_service,
        roster_service=roster_service,
        weight_service=weight_service,
    )
