"""Markdown rendering of tool results."""

from food_tracker.domain.food_log import LogEntry
from food_tracker.domain.goals import Goals
from food_tracker.domain.nutrition import FoodSearchResult
from food_tracker.domain.stats import DailyView, RangeSummary
from food_tracker.services.aggregation import (
    describe_remaining,
    format_amount,
    percent_of_goal,
)

_MACRO_LABELS = (
    ("protein_g", "Protein"),
    ("carbs_g", "Carbs"),
    ("fat_g", "Fat"),
)


def format_search_results(query: str, results: list[FoodSearchResult]) -> str:
    """Format FDC search candidates."""
    if not results:
        return f'No foods found matching "{query}". Try a different search term.'
    blocks = []
    for index, food in enumerate(results, start=1):
        brand = f" ({food.brand_owner})" if food.brand_owner else ""
        per_100 = food.nutrition.rounded()
        blocks.append(
            f"{index}. **{food.description}**{brand}\n"
            f"   FDC ID: {food.fdc_id} | Type: {food.data_type or 'unknown'}\n"
            f"   Per 100g: {format_amount(per_100.calories)} cal | "
            f"P: {format_amount(per_100.protein_g)}g | "
            f"C: {format_amount(per_100.carbs_g)}g | "
            f"F: {format_amount(per_100.fat_g)}g"
        )
    return (
        f'Found {len(results)} foods matching "{query}":\n\n'
        + "\n\n".join(blocks)
        + "\n\n*Nutrition values are per 100g. Scale accordingly when logging.*"
    )


def format_logged_entry(entry: LogEntry, view: DailyView) -> str:
    """Format the confirmation for a new entry with the updated daily total."""
    lines = [
        f"Logged: **{entry.food_name}** "
        f"({format_amount(entry.serving_size)} {entry.serving_unit})",
        _entry_nutrition(entry, include_macros=("protein_g", "carbs_g", "fat_g")),
    ]
    if entry.meal:
        lines.append(f"Meal: {entry.meal.value}")
    total = (
        f"\n**Daily Total ({view.day.isoformat()}):** "
        f"{format_amount(view.totals.rounded().calories)} cal"
    )
    if "calories" in view.remaining:
        total += f" | {describe_remaining(view.remaining['calories'], digits=0)}"
    lines.append(total)
    return "\n".join(lines)


def format_daily_log(view: DailyView) -> str:
    """Format a day's entries by meal, totals and goal comparison."""
    if not view.entries:
        return (
            f"No food entries for {view.day.isoformat()}. "
            "Start logging with the log_food tool!"
        )
    lines = [f"## Food Log for {view.day.isoformat()}", ""]
    for label, entries in view.by_meal:
        lines.append(f"### {label.capitalize()}")
        for entry in entries:
            lines.append(
                f"- **{entry.food_name}** "
                f"({format_amount(entry.serving_size)} {entry.serving_unit}) - "
                f"{_entry_nutrition(entry, include_macros=('protein_g',))} "
                f"[ID: {entry.id}]"
            )
        lines.append("")

    goals = view.goals or Goals()
    totals = view.totals.rounded()
    calories_line = f"- Calories: {format_amount(totals.calories)}"
    if goals.daily_calories is not None:
        calories_line += f" / {format_amount(goals.daily_calories)}"
        percent = percent_of_goal(view.totals.calories, goals.daily_calories)
        if percent is not None:
            calories_line += f" ({percent}%)"
    lines.extend(["### Daily Totals", calories_line])
    for field_name, label in _MACRO_LABELS:
        line = f"- {label}: {format_amount(getattr(totals, field_name))}g"
        goal = getattr(goals, field_name)
        if goal is not None:
            line += f" / {format_amount(goal)}g"
        lines.append(line)
    lines.append(f"- Fiber: {format_amount(totals.fiber_g)}g")

    if view.remaining:
        lines.extend(["", "### Remaining"])
        if "calories" in view.remaining:
            calories_left = describe_remaining(view.remaining["calories"], digits=0)
            lines.append(f"- Calories: {calories_left}")
        for field_name, label in _MACRO_LABELS:
            if field_name in view.remaining:
                lines.append(
                    f"- {label}: {describe_remaining(view.remaining[field_name], 'g')}"
                )
    return "\n".join(lines)


def format_goals(goals: Goals | None, heading: str = "Current Goals") -> str:
    """Format the goals record, marking unset goals."""
    goals = goals or Goals()
    return "\n".join(
        [
            f"**{heading}:**",
            f"- Calories: {_goal_value(goals.daily_calories)}",
            f"- Protein: {_goal_value(goals.protein_g, 'g')}",
            f"- Carbs: {_goal_value(goals.carbs_g, 'g')}",
            f"- Fat: {_goal_value(goals.fat_g, 'g')}",
        ]
    )


def format_range_summary(summary: RangeSummary) -> str:
    """Format daily averages and the per-day breakdown."""
    if summary.entry_count == 0:
        return (
            f"No food entries found between {summary.start.isoformat()} "
            f"and {summary.end.isoformat()}."
        )
    goals = summary.goals or Goals()
    average = summary.average
    lines = [
        f"## Nutrition Summary: {summary.start.isoformat()} "
        f"to {summary.end.isoformat()}",
        "",
        f"**{summary.days_tracked} days tracked** | "
        f"{summary.entry_count} total entries",
        "",
        "### Daily Averages",
    ]
    calories_line = f"- Calories: {format_amount(average.calories)}"
    percent = percent_of_goal(average.calories, goals.daily_calories)
    if percent is not None:
        calories_line += (
            f" ({percent}% of {format_amount(goals.daily_calories)} goal)"
        )
    lines.append(calories_line)
    for field_name, label in _MACRO_LABELS:
        line = f"- {label}: {format_amount(getattr(average, field_name))}g"
        goal = getattr(goals, field_name)
        if goal is not None:
            line += f" / {format_amount(goal)}g goal"
        lines.append(line)
    lines.append(f"- Fiber: {format_amount(average.fiber_g)}g")

    lines.extend(["", "### Daily Breakdown"])
    for day in summary.daily:
        totals = day.totals.rounded()
        lines.append(
            f"- {day.day.isoformat()}: {format_amount(totals.calories)} cal | "
            f"P: {format_amount(totals.protein_g)}g | "
            f"C: {format_amount(totals.carbs_g)}g | "
            f"F: {format_amount(totals.fat_g)}g"
        )
    return "\n".join(lines)


def format_deleted(entry_id: int, deleted: bool) -> str:
    """Format the outcome of a delete."""
    if deleted:
        return f"Entry {entry_id} deleted successfully."
    return f"Entry {entry_id} not found."


def _entry_nutrition(entry: LogEntry, include_macros: tuple[str, ...]) -> str:
    if entry.calories is None:
        parts = ["calories unknown"]
    else:
        parts = [f"{format_amount(entry.calories)} cal"]
    for field_name, prefix in (("protein_g", "P"), ("carbs_g", "C"), ("fat_g", "F")):
        value = getattr(entry, field_name)
        if field_name in include_macros and value:
            parts.append(f"{prefix}: {format_amount(value)}g")
    return " | ".join(parts)


def _goal_value(value: float | None, unit: str = "") -> str:
    if value is None:
        return "not set"
    return f"{format_amount(value)}{unit}"
