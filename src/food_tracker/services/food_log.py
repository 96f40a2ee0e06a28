"""Food log service: logging, daily views, summaries and goals."""

import logging
from dataclasses import dataclass, replace
from datetime import UTC, date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo

from food_tracker.domain.food_log import LogEntry, NewLogEntry
from food_tracker.domain.goals import Goals
from food_tracker.domain.stats import DailyView, RangeSummary
from food_tracker.services.nutrition import NutritionService, scale_nutrition
from food_tracker.services.summary import (
    Period,
    compute_daily_view,
    compute_range_view,
    resolve_period,
)

GRAM_UNITS = {"g", "gram", "grams"}

_logger = logging.getLogger(__name__)


class FoodLogRepository(Protocol):
    """Persistence interface for food log entries."""

    def create_entry(self, entry: NewLogEntry) -> LogEntry:
        """Store an entry and return it with id and timestamp."""

    def list_entries_for_day(self, day: date) -> list[LogEntry]:
        """Return entries for a day ordered by logged_at."""

    def list_entries_for_range(self, start: date, end: date) -> list[LogEntry]:
        """Return entries with start <= day <= end ordered by day, logged_at."""

    def delete_entry(self, entry_id: int) -> bool:
        """Delete an entry, returning False when it did not exist."""


class GoalsRepository(Protocol):
    """Persistence interface for the singleton goals record."""

    def get_goals(self) -> Goals | None:
        """Return the goals record, if one exists."""

    def save_goals(self, goals: Goals) -> Goals:
        """Create or replace the goals record and return it."""


@dataclass
class FoodLogService:
    """Application service behind the food tracking tools."""

    repository: FoodLogRepository
    goals_repository: GoalsRepository
    nutrition_service: NutritionService
    timezone_name: str = "UTC"

    def today(self) -> date:
        """Return the current date in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date()

    async def log_food(self, entry: NewLogEntry) -> tuple[LogEntry, DailyView]:
        """Store an entry and return it with the updated view of its day."""
        if entry.calories is None and entry.fdc_id is not None:
            entry = await self._prefill_from_fdc(entry)
        stored = self.repository.create_entry(entry)
        _logger.info(
            "Logged food entry id=%s day=%s food=%r",
            stored.id,
            stored.day,
            stored.food_name,
        )
        return stored, self.daily_view(stored.day)

    def daily_view(self, day: date | None = None) -> DailyView:
        """Return entries, totals and goal comparison for a day."""
        target = day or self.today()
        entries = self.repository.list_entries_for_day(target)
        return compute_daily_view(target, entries, self.goals_repository.get_goals())

    def range_summary(
        self,
        period: Period | None = None,
        start: date | None = None,
        end: date | None = None,
    ) -> RangeSummary:
        """Return daily averages for a preset period or explicit range."""
        start, end = resolve_period(self.today(), period, start, end)
        entries = self.repository.list_entries_for_range(start, end)
        return compute_range_view(
            start, end, entries, self.goals_repository.get_goals()
        )

    def delete_entry(self, entry_id: int) -> bool:
        """Delete an entry by id."""
        deleted = self.repository.delete_entry(entry_id)
        if deleted:
            _logger.info("Deleted food entry id=%s", entry_id)
        return deleted

    def get_goals(self) -> Goals | None:
        """Return the current goals, if any."""
        return self.goals_repository.get_goals()

    def update_goals(
        self,
        daily_calories: float | None = None,
        protein_g: float | None = None,
        carbs_g: float | None = None,
        fat_g: float | None = None,
    ) -> Goals:
        """Overwrite the supplied goal fields, keeping the others."""
        current = self.goals_repository.get_goals() or Goals()
        updated = Goals(
            daily_calories=_prefer(daily_calories, current.daily_calories),
            protein_g=_prefer(protein_g, current.protein_g),
            carbs_g=_prefer(carbs_g, current.carbs_g),
            fat_g=_prefer(fat_g, current.fat_g),
            updated_at=datetime.now(tz=UTC),
        )
        saved = self.goals_repository.save_goals(updated)
        _logger.info("Updated goals: %s", saved)
        return saved

    async def _prefill_from_fdc(self, entry: NewLogEntry) -> NewLogEntry:
        if entry.serving_unit.strip().lower() not in GRAM_UNITS:
            raise ValueError(
                "calories are required unless the serving is given in grams"
            )
        reference = await self.nutrition_service.get_nutrition(entry.fdc_id)
        if reference is None:
            raise ValueError(f"FDC food {entry.fdc_id} not found")
        portion = scale_nutrition(reference, entry.serving_size).rounded()
        return replace(
            entry,
            calories=portion.calories,
            protein_g=_prefer(entry.protein_g, portion.protein_g),
            carbs_g=_prefer(entry.carbs_g, portion.carbs_g),
            fat_g=_prefer(entry.fat_g, portion.fat_g),
            fiber_g=_prefer(entry.fiber_g, portion.fiber_g),
        )


def _prefer(value: float | None, fallback: float | None) -> float | None:
    return value if value is not None else fallback
