"""Supabase repository for food log entries."""

from dataclasses import dataclass
from datetime import date, datetime

from supabase import Client

from food_tracker.domain.food_log import LogEntry, Meal, NewLogEntry
from food_tracker.services.food_log import FoodLogRepository

_COLUMNS = (
    "id, logged_at, date, meal, food_name, fdc_id, serving_size, serving_unit, "
    "calories, protein_g, carbs_g, fat_g, fiber_g, notes"
)


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for the ``food_logs`` table."""

    client: Client

    def create_entry(self, entry: NewLogEntry) -> LogEntry:
        """Insert an entry; the database assigns id and logged_at."""
        response = (
            self.client.table("food_logs")
            .insert(
                {
                    "date": entry.day.isoformat(),
                    "meal": entry.meal.value if entry.meal else None,
                    "food_name": entry.food_name,
                    "fdc_id": entry.fdc_id,
                    "serving_size": entry.serving_size,
                    "serving_unit": entry.serving_unit,
                    "calories": entry.calories,
                    "protein_g": entry.protein_g,
                    "carbs_g": entry.carbs_g,
                    "fat_g": entry.fat_g,
                    "fiber_g": entry.fiber_g,
                    "notes": entry.notes,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food log entry")
        return _parse_row(response.data[0])

    def list_entries_for_day(self, day: date) -> list[LogEntry]:
        """Return entries for one day."""
        response = (
            self.client.table("food_logs")
            .select(_COLUMNS)
            .eq("date", day.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_entries_for_range(self, start: date, end: date) -> list[LogEntry]:
        """Return entries between two days, inclusive."""
        response = (
            self.client.table("food_logs")
            .select(_COLUMNS)
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def delete_entry(self, entry_id: int) -> bool:
        """Delete an entry by id."""
        response = self.client.table("food_logs").delete().eq("id", entry_id).execute()
        return bool(response.data)


def _parse_row(row: dict[str, object]) -> LogEntry:
    return LogEntry(
        id=int(row["id"]),
        logged_at=datetime.fromisoformat(str(row["logged_at"])),
        day=date.fromisoformat(str(row["date"])),
        meal=_parse_meal(row.get("meal")),
        food_name=str(row.get("food_name", "")),
        fdc_id=int(row["fdc_id"]) if row.get("fdc_id") is not None else None,
        serving_size=float(row.get("serving_size") or 0.0),
        serving_unit=str(row.get("serving_unit") or ""),
        calories=_optional_float(row.get("calories")),
        protein_g=_optional_float(row.get("protein_g")),
        carbs_g=_optional_float(row.get("carbs_g")),
        fat_g=_optional_float(row.get("fat_g")),
        fiber_g=_optional_float(row.get("fiber_g")),
        notes=row.get("notes"),
    )


def _parse_meal(value: object) -> Meal | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        return Meal(value)
    except ValueError:
        return None


def _optional_float(value: object) -> float | None:
    if isinstance(value, int | float):
        return float(value)
    return None
