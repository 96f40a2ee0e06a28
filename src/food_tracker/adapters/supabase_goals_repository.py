"""Supabase repository for the singleton goals record."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from food_tracker.domain.goals import Goals
from food_tracker.services.food_log import GoalsRepository

GOALS_ROW_ID = 1


@dataclass
class SupabaseGoalsRepository(GoalsRepository):
    """Supabase implementation for the ``goals`` table (a single row)."""

    client: Client

    def get_goals(self) -> Goals | None:
        """Return the goals row, if present."""
        response = (
            self.client.table("goals")
            .select("daily_calories, protein_g, carbs_g, fat_g, updated_at")
            .eq("id", GOALS_ROW_ID)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def save_goals(self, goals: Goals) -> Goals:
        """Upsert the goals row."""
        response = (
            self.client.table("goals")
            .upsert(
                {
                    "id": GOALS_ROW_ID,
                    "daily_calories": goals.daily_calories,
                    "protein_g": goals.protein_g,
                    "carbs_g": goals.carbs_g,
                    "fat_g": goals.fat_g,
                    "updated_at": (
                        goals.updated_at.isoformat() if goals.updated_at else None
                    ),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save goals")
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> Goals:
    updated_at_raw = row.get("updated_at")
    return Goals(
        daily_calories=_optional_float(row.get("daily_calories")),
        protein_g=_optional_float(row.get("protein_g")),
        carbs_g=_optional_float(row.get("carbs_g")),
        fat_g=_optional_float(row.get("fat_g")),
        updated_at=(
            datetime.fromisoformat(updated_at_raw)
            if isinstance(updated_at_raw, str) and updated_at_raw
            else None
        ),
    )


def _optional_float(value: object) -> float | None:
    if isinstance(value, int | float):
        return float(value)
    return None
