"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from daily_diet.adapters.supabase_meal_repository import SupabaseMealRepository
from daily_diet.config import Settings
from daily_diet.services.meals import MealService
from daily_diet.services.metrics import MetricsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_service: MealService
    metrics_service: MetricsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    meal_repository = SupabaseMealRepository(
        supabase_client, table_name=resolved_settings.meals_table
    )

    return AppContainer(
        settings=resolved_settings,
        meal_service=MealService(meal_repository),
        metrics_service=MetricsService(meal_repository),
    )
