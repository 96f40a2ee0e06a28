"""Domain models for daily and multi-day statistics."""

from dataclasses import dataclass, field
from datetime import date

from food_tracker.domain.food_log import LogEntry
from food_tracker.domain.goals import Goals
from food_tracker.domain.nutrition import NutritionValues


@dataclass(frozen=True)
class DailyTotals:
    """Totals for all entries sharing one calendar day."""

    day: date
    entry_count: int
    totals: NutritionValues


@dataclass(frozen=True)
class RangeSummary:
    """Daily averages and per-day totals across a date range."""

    start: date
    end: date
    days_tracked: int
    entry_count: int
    average: NutritionValues
    daily: list[DailyTotals] = field(default_factory=list)
    goals: Goals | None = None


@dataclass(frozen=True)
class DailyView:
    """One day's entries with totals and goal comparison."""

    day: date
    entries: list[LogEntry]
    totals: NutritionValues
    goals: Goals | None
    remaining: dict[str, float]
    by_meal: list[tuple[str, list[LogEntry]]]
