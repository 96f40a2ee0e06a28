"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from food_tracker.adapters.fdc_client import HttpxFdcClient
from food_tracker.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from food_tracker.adapters.supabase_goals_repository import SupabaseGoalsRepository
from food_tracker.config import Settings
from food_tracker.services.cache import InMemoryCache
from food_tracker.services.food_log import FoodLogService
from food_tracker.services.nutrition import NutritionService
from food_tracker.tools import ToolRegistry


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrition_service: NutritionService
    food_log_service: FoodLogService
    tool_registry: ToolRegistry
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
    )
    nutrition_service = NutritionService(
        fdc_client=fdc_client,
        cache=InMemoryCache(),
    )
    food_log_service = FoodLogService(
        repository=SupabaseFoodLogRepository(supabase_client),
        goals_repository=SupabaseGoalsRepository(supabase_client),
        nutrition_service=nutrition_service,
        timezone_name=resolved_settings.timezone,
    )
    tool_registry = ToolRegistry(
        food_log_service=food_log_service,
        nutrition_service=nutrition_service,
    )

    async def close_resources() -> None:
        await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        nutrition_service=nutrition_service,
        food_log_service=food_log_service,
        tool_registry=tool_registry,
        close_resources=close_resources,
    )
