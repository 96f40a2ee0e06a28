"""Tests for tool result rendering."""

from datetime import date

from food_tracker.domain.food_log import Meal
from food_tracker.domain.goals import Goals
from food_tracker.domain.nutrition import FoodSearchResult, NutritionValues
from food_tracker.formatting import (
    format_daily_log,
    format_deleted,
    format_goals,
    format_logged_entry,
    format_range_summary,
    format_search_results,
)
from food_tracker.services.summary import compute_daily_view, summarize
from tests.conftest import make_entry

JAN_15 = date(2025, 1, 15)


def test_search_results_list_per_100g_values() -> None:
    results = [
        FoodSearchResult(
            fdc_id=2345678,
            description="Greek Yogurt",
            data_type="Branded",
            brand_owner="Fage",
            nutrition=NutritionValues(calories=97, protein_g=9, carbs_g=3.98, fat_g=5),
        )
    ]

    text = format_search_results("yogurt", results)

    assert text.startswith('Found 1 foods matching "yogurt":')
    assert "1. **Greek Yogurt** (Fage)" in text
    assert "FDC ID: 2345678 | Type: Branded" in text
    assert "Per 100g: 97 cal | P: 9g | C: 4g | F: 5g" in text


def test_search_results_empty() -> None:
    assert format_search_results("zzz", []).startswith('No foods found matching "zzz"')


def test_logged_entry_reports_daily_total() -> None:
    entry = make_entry(2, calories=400, protein_g=40, meal=Meal.DINNER)
    entry_view = compute_daily_view(
        JAN_15,
        [make_entry(1, calories=150), entry],
        Goals(daily_calories=2000),
    )

    text = format_logged_entry(entry, entry_view)

    assert text.splitlines()[0] == "Logged: **food** (100 g)"
    assert "400 cal | P: 40g" in text
    assert "Meal: dinner" in text
    assert text.endswith("**Daily Total (2025-01-15):** 550 cal | 1450 remaining")


def test_logged_entry_over_goal() -> None:
    entry = make_entry(1, calories=2100)
    view = compute_daily_view(JAN_15, [entry], Goals(daily_calories=2000))

    assert format_logged_entry(entry, view).endswith("2100 cal | 100 over goal")


def test_daily_log_groups_by_meal_and_compares_goals() -> None:
    entries = [
        make_entry(
            1, calories=150, protein_g=5, meal=Meal.BREAKFAST, food_name="Oatmeal"
        ),
        make_entry(
            2,
            calories=400,
            protein_g=40,
            meal=Meal.DINNER,
            food_name="Chicken",
            minutes=600,
        ),
    ]
    view = compute_daily_view(
        JAN_15, entries, Goals(daily_calories=2000, protein_g=100)
    )

    assert format_daily_log(view).splitlines() == [
        "## Food Log for 2025-01-15",
        "",
        "### Breakfast",
        "- **Oatmeal** (100 g) - 150 cal | P: 5g [ID: 1]",
        "",
        "### Dinner",
        "- **Chicken** (100 g) - 400 cal | P: 40g [ID: 2]",
        "",
        "### Daily Totals",
        "- Calories: 550 / 2000 (28%)",
        "- Protein: 45g / 100g",
        "- Carbs: 0g",
        "- Fat: 0g",
        "- Fiber: 0g",
        "",
        "### Remaining",
        "- Calories: 1450 remaining",
        "- Protein: 55g remaining",
    ]


def test_daily_log_marks_unknown_calories_and_unspecified_meal() -> None:
    view = compute_daily_view(JAN_15, [make_entry(3, food_name="Tea")], None)

    text = format_daily_log(view)

    assert "### Unspecified" in text
    assert "- **Tea** (100 g) - calories unknown [ID: 3]" in text
    assert "### Remaining" not in text


def test_daily_log_empty_day() -> None:
    view = compute_daily_view(JAN_15, [], Goals(daily_calories=2000))

    assert format_daily_log(view) == (
        "No food entries for 2025-01-15. Start logging with the log_food tool!"
    )


def test_goals_mark_unset_values() -> None:
    text = format_goals(Goals(daily_calories=2000, protein_g=150))

    assert text.splitlines() == [
        "**Current Goals:**",
        "- Calories: 2000",
        "- Protein: 150g",
        "- Carbs: not set",
        "- Fat: not set",
    ]
    assert format_goals(None).count("not set") == 4


def test_range_summary_shows_averages_and_breakdown() -> None:
    entries = [
        make_entry(1, day=date(2025, 1, 14), calories=1800, protein_g=90),
        make_entry(2, day=JAN_15, calories=2200, protein_g=110),
    ]
    summary = summarize(
        entries,
        Goals(daily_calories=2000, protein_g=120),
        date(2025, 1, 8),
        JAN_15,
    )

    lines = format_range_summary(summary).splitlines()

    assert lines[0] == "## Nutrition Summary: 2025-01-08 to 2025-01-15"
    assert "**2 days tracked** | 2 total entries" in lines
    assert "- Calories: 2000 (100% of 2000 goal)" in lines
    assert "- Protein: 100g / 120g goal" in lines
    assert "- 2025-01-14: 1800 cal | P: 90g | C: 0g | F: 0g" in lines
    assert lines[-1] == "- 2025-01-15: 2200 cal | P: 110g | C: 0g | F: 0g"


def test_range_summary_empty() -> None:
    summary = summarize([], None, date(2025, 1, 8), JAN_15)

    assert format_range_summary(summary) == (
        "No food entries found between 2025-01-08 and 2025-01-15."
    )


def test_deleted_messages() -> None:
    assert format_deleted(4, True) == "Entry 4 deleted successfully."
    assert format_deleted(4, False) == "Entry 4 not found."
