"""Totals, goal comparison and grouping for food log entries."""

from collections.abc import Iterable, Sequence
from datetime import date

from food_tracker.domain.food_log import UNSPECIFIED_MEAL, LogEntry, Meal
from food_tracker.domain.goals import GOAL_FIELDS, Goals
from food_tracker.domain.nutrition import NutritionValues, round_half_up

MEAL_ORDER = (*(meal.value for meal in Meal), UNSPECIFIED_MEAL)


def totals(entries: Iterable[LogEntry]) -> NutritionValues:
    """Sum nutrition across entries, counting unknown values as zero.

    The sum is not rounded; call ``rounded()`` on the result for display.
    """
    total = NutritionValues()
    for entry in entries:
        total = total + entry.nutrition
    return total


def goal_remaining(values: NutritionValues, goals: Goals | None) -> dict[str, float]:
    """Return ``goal - actual`` for each nutrient that has a goal.

    Keys are nutrient field names. A positive value means under goal.
    """
    if goals is None:
        return {}
    remaining: dict[str, float] = {}
    for goal_field, nutrient in GOAL_FIELDS.items():
        goal = getattr(goals, goal_field)
        if goal is None:
            continue
        remaining[nutrient] = goal - getattr(values, nutrient)
    return remaining


def percent_of_goal(actual: float, goal: float | None) -> int | None:
    """Return ``actual`` as a whole percentage of ``goal``.

    A missing or non-positive goal yields ``None``.
    """
    if goal is None or goal <= 0:
        return None
    return int(round_half_up(actual / goal * 100))


def describe_remaining(remaining: float, unit: str = "", digits: int = 1) -> str:
    """Format a goal delta as ``N remaining`` or ``N over goal``."""
    if remaining > 0:
        return f"{format_amount(remaining, digits)}{unit} remaining"
    return f"{format_amount(abs(remaining), digits)}{unit} over goal"


def format_amount(value: float, digits: int = 1) -> str:
    """Round for display and drop a trailing ``.0``."""
    value = round_half_up(value, digits)
    if value.is_integer():
        return str(int(value))
    return str(value)


def group_by_meal(entries: Sequence[LogEntry]) -> list[tuple[str, list[LogEntry]]]:
    """Group entries by meal label in canonical meal order."""
    groups: dict[str, list[LogEntry]] = {}
    for entry in _by_logged_at(entries):
        label = entry.meal.value if entry.meal else UNSPECIFIED_MEAL
        groups.setdefault(label, []).append(entry)
    return [(label, groups[label]) for label in MEAL_ORDER if label in groups]


def group_by_day(entries: Sequence[LogEntry]) -> list[tuple[date, list[LogEntry]]]:
    """Group entries by calendar day, earliest day first."""
    groups: dict[date, list[LogEntry]] = {}
    for entry in _by_logged_at(entries):
        groups.setdefault(entry.day, []).append(entry)
    return sorted(groups.items())


def _by_logged_at(entries: Sequence[LogEntry]) -> list[LogEntry]:
    return sorted(entries, key=lambda entry: entry.logged_at)
