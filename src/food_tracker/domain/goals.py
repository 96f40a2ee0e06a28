"""Domain models for nutrition goals."""

from dataclasses import dataclass
from datetime import datetime

# Goal field -> nutrient field it is compared against.
GOAL_FIELDS = {
    "daily_calories": "calories",
    "protein_g": "protein_g",
    "carbs_g": "carbs_g",
    "fat_g": "fat_g",
}


@dataclass(frozen=True)
class Goals:
    """Daily targets; ``None`` means no goal for that dimension."""

    daily_calories: float | None = None
    protein_g: float | None = None
    carbs_g: float | None = None
    fat_g: float | None = None
    updated_at: datetime | None = None
