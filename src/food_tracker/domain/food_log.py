"""Domain models for the food log."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

from food_tracker.domain.nutrition import NutritionValues


class Meal(StrEnum):
    """Meal labels in canonical display order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


UNSPECIFIED_MEAL = "unspecified"


@dataclass(frozen=True)
class NewLogEntry:
    """Food log entry that has not been stored yet."""

    day: date
    food_name: str
    serving_size: float
    serving_unit: str
    meal: Meal | None = None
    fdc_id: int | None = None
    calories: float | None = None
    protein_g: float | None = None
    carbs_g: float | None = None
    fat_g: float | None = None
    fiber_g: float | None = None
    notes: str | None = None


@dataclass(frozen=True)
class LogEntry:
    """Stored food log entry.

    ``day`` is the calendar date the entry counts toward, which may differ
    from the date of ``logged_at``.
    """

    id: int
    logged_at: datetime
    day: date
    food_name: str
    serving_size: float
    serving_unit: str
    meal: Meal | None = None
    fdc_id: int | None = None
    calories: float | None = None
    protein_g: float | None = None
    carbs_g: float | None = None
    fat_g: float | None = None
    fiber_g: float | None = None
    notes: str | None = None

    @property
    def nutrition(self) -> NutritionValues:
        """Nutrition values with unknown fields as zero."""
        return NutritionValues(
            calories=self.calories or 0.0,
            protein_g=self.protein_g or 0.0,
            carbs_g=self.carbs_g or 0.0,
            fat_g=self.fat_g or 0.0,
            fiber_g=self.fiber_g or 0.0,
        )
