"""Daily views, multi-day summaries and period resolution."""

import calendar
from collections.abc import Sequence
from datetime import date, timedelta
from typing import Literal

from food_tracker.domain.food_log import LogEntry
from food_tracker.domain.goals import Goals
from food_tracker.domain.nutrition import NutritionValues
from food_tracker.domain.stats import DailyTotals, DailyView, RangeSummary
from food_tracker.services.aggregation import (
    goal_remaining,
    group_by_day,
    group_by_meal,
    totals,
)

Period = Literal["week", "month"]

DEFAULT_WINDOW_DAYS = 7


def compute_daily_view(
    day: date, entries: Sequence[LogEntry], goals: Goals | None
) -> DailyView:
    """Return totals, goal deltas and meal groups for one day."""
    day_totals = totals(entries)
    return DailyView(
        day=day,
        entries=list(entries),
        totals=day_totals,
        goals=goals,
        remaining=goal_remaining(day_totals, goals),
        by_meal=group_by_meal(entries),
    )


def summarize(
    entries: Sequence[LogEntry],
    goals: Goals | None,
    start: date,
    end: date,
) -> RangeSummary:
    """Average daily totals over the days that have at least one entry.

    Days without entries are not counted, so they do not pull the average
    down. Averages are rounded once, after averaging.
    """
    daily = [
        DailyTotals(day=day, entry_count=len(day_entries), totals=totals(day_entries))
        for day, day_entries in group_by_day(entries)
    ]
    if not daily:
        return RangeSummary(
            start=start,
            end=end,
            days_tracked=0,
            entry_count=0,
            average=NutritionValues(),
            goals=goals,
        )

    combined = NutritionValues()
    for day_totals in daily:
        combined = combined + day_totals.totals
    return RangeSummary(
        start=start,
        end=end,
        days_tracked=len(daily),
        entry_count=len(entries),
        average=combined.divided(len(daily)).rounded(),
        daily=daily,
        goals=goals,
    )


def compute_range_view(
    start: date, end: date, entries: Sequence[LogEntry], goals: Goals | None
) -> RangeSummary:
    """Summarize entries that fall within ``[start, end]``."""
    in_range = [entry for entry in entries if start <= entry.day <= end]
    return summarize(in_range, goals, start, end)


def resolve_period(
    today: date,
    period: Period | None = None,
    start: date | None = None,
    end: date | None = None,
) -> tuple[date, date]:
    """Translate a preset period or explicit range into date boundaries.

    A preset period takes precedence over an explicit range. Without either,
    the trailing seven days ending today are used.
    """
    if period == "week":
        return today - timedelta(days=DEFAULT_WINDOW_DAYS), today
    if period == "month":
        return _one_month_before(today), today
    if start is not None and end is not None:
        return start, end
    return today - timedelta(days=DEFAULT_WINDOW_DAYS), today


def _one_month_before(day: date) -> date:
    if day.month == 1:
        year, month = day.year - 1, 12
    else:
        year, month = day.year, day.month - 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))
