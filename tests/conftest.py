"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime, timedelta

import pytest

from food_tracker.adapters.fdc_client import FdcClient
from food_tracker.config import Settings
from food_tracker.containers import AppContainer
from food_tracker.domain.food_log import LogEntry, Meal, NewLogEntry
from food_tracker.domain.goals import Goals
from food_tracker.services.cache import InMemoryCache
from food_tracker.services.food_log import (
    FoodLogRepository,
    FoodLogService,
    GoalsRepository,
)
from food_tracker.services.nutrition import NutritionService
from food_tracker.tools import ToolRegistry

BASE_TIME = datetime(2025, 1, 15, 8, 0, tzinfo=UTC)


def make_entry(  # noqa: PLR0913
    entry_id: int = 1,
    day: date = date(2025, 1, 15),
    calories: float | None = None,
    protein_g: float | None = None,
    carbs_g: float | None = None,
    fat_g: float | None = None,
    fiber_g: float | None = None,
    meal: Meal | None = None,
    food_name: str = "food",
    minutes: int = 0,
) -> LogEntry:
    """Build a stored entry with sensible defaults."""
    return LogEntry(
        id=entry_id,
        logged_at=BASE_TIME + timedelta(minutes=minutes),
        day=day,
        food_name=food_name,
        serving_size=100,
        serving_unit="g",
        meal=meal,
        calories=calories,
        protein_g=protein_g,
        carbs_g=carbs_g,
        fat_g=fat_g,
        fiber_g=fiber_g,
    )


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log repository for tests."""

    entries: dict[int, LogEntry] = field(default_factory=dict)
    next_id: int = 1

    def create_entry(self, entry: NewLogEntry) -> LogEntry:
        stored = LogEntry(
            id=self.next_id,
            logged_at=BASE_TIME + timedelta(minutes=self.next_id),
            **{
                name: getattr(entry, name)
                for name in (
                    "day",
                    "food_name",
                    "serving_size",
                    "serving_unit",
                    "meal",
                    "fdc_id",
                    "calories",
                    "protein_g",
                    "carbs_g",
                    "fat_g",
                    "fiber_g",
                    "notes",
                )
            },
        )
        self.entries[stored.id] = stored
        self.next_id += 1
        return stored

    def add(self, entry: LogEntry) -> None:
        self.entries[entry.id] = entry
        self.next_id = max(self.next_id, entry.id + 1)

    def list_entries_for_day(self, day: date) -> list[LogEntry]:
        return sorted(
            (entry for entry in self.entries.values() if entry.day == day),
            key=lambda entry: entry.logged_at,
        )

    def list_entries_for_range(self, start: date, end: date) -> list[LogEntry]:
        return sorted(
            (entry for entry in self.entries.values() if start <= entry.day <= end),
            key=lambda entry: (entry.day, entry.logged_at),
        )

    def delete_entry(self, entry_id: int) -> bool:
        return self.entries.pop(entry_id, None) is not None


@dataclass
class InMemoryGoalsRepository(GoalsRepository):
    """In-memory goals repository for tests."""

    goals: Goals | None = None
    saves: int = 0

    def get_goals(self) -> Goals | None:
        return self.goals

    def save_goals(self, goals: Goals) -> Goals:
        self.goals = replace(goals)
        self.saves += 1
        return self.goals


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client with in-memory responses."""

    search_payload: dict[str, object] = field(
        default_factory=lambda: {
            "foods": [
                {
                    "fdcId": 171077,
                    "description": "Chicken, broilers or fryers, breast, raw",
                    "dataType": "SR Legacy",
                    "foodNutrients": [
                        {"nutrientId": 1008, "value": 120},
                        {"nutrientId": 1003, "value": 22.5},
                        {"nutrientId": 1005, "value": 0},
                        {"nutrientId": 1004, "value": 2.62},
                    ],
                },
                {
                    "fdcId": 2345678,
                    "description": "Greek Yogurt",
                    "brandOwner": "Fage",
                    "dataType": "Branded",
                    "foodNutrients": [
                        {"nutrientId": 1008, "value": 97},
                        {"nutrientId": 1003, "value": 9},
                        {"nutrientId": 1005, "value": 3.98},
                        {"nutrientId": 1004, "value": 5},
                        {"nutrientId": 1079, "value": 0},
                    ],
                },
            ]
        }
    )
    food_payload: dict[str, object] | None = field(
        default_factory=lambda: {
            "fdcId": 171077,
            "description": "Chicken, broilers or fryers, breast, raw",
            "dataType": "SR Legacy",
            "foodNutrients": [
                {"nutrient": {"id": 1008}, "amount": 120},
                {"nutrient": {"id": 1003}, "amount": 22.5},
                {"nutrient": {"id": 1005}, "amount": 0},
                {"nutrient": {"id": 1004}, "amount": 2.62},
                {"nutrient": {"id": 1079}, "amount": 0},
            ],
        }
    )

    async def search_foods(self, query: str, page_size: int = 10) -> dict[str, object]:
        return self.search_payload

    async def get_food(self, fdc_id: int) -> dict[str, object] | None:
        return self.food_payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        fdc_api_key="fdc-key",
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        api_token="api-token",
    )


@pytest.fixture
def food_log_repository() -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository()


@pytest.fixture
def goals_repository() -> InMemoryGoalsRepository:
    return InMemoryGoalsRepository()


@pytest.fixture
def nutrition_service() -> NutritionService:
    return NutritionService(fdc_client=FakeFdcClient(), cache=InMemoryCache())


@pytest.fixture
def food_log_service(
    food_log_repository: InMemoryFoodLogRepository,
    goals_repository: InMemoryGoalsRepository,
    nutrition_service: NutritionService,
) -> FoodLogService:
    return FoodLogService(
        repository=food_log_repository,
        goals_repository=goals_repository,
        nutrition_service=nutrition_service,
    )


@pytest.fixture
def tool_registry(
    food_log_service: FoodLogService, nutrition_service: NutritionService
) -> ToolRegistry:
    return ToolRegistry(
        food_log_service=food_log_service, nutrition_service=nutrition_service
    )


@pytest.fixture
def container(
    settings: Settings,
    food_log_service: FoodLogService,
    nutrition_service: NutritionService,
    tool_registry: ToolRegistry,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        nutrition_service=nutrition_service,
        food_log_service=food_log_service,
        tool_registry=tool_registry,
        close_resources=close_resources,
    )
