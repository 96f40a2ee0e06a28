"""Nutrition domain models."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

NUTRIENT_FIELDS = ("calories", "protein_g", "carbs_g", "fat_g", "fiber_g")


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to the given number of decimals, halves away from zero."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class NutritionValues:
    """Calories and macronutrients for a food, an entry, or a set of entries."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    fiber_g: float = 0.0

    def __add__(self, other: "NutritionValues") -> "NutritionValues":
        return NutritionValues(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            carbs_g=self.carbs_g + other.carbs_g,
            fat_g=self.fat_g + other.fat_g,
            fiber_g=self.fiber_g + other.fiber_g,
        )

    def scaled(self, factor: float) -> "NutritionValues":
        """Return the values multiplied by a factor."""
        return NutritionValues(
            calories=self.calories * factor,
            protein_g=self.protein_g * factor,
            carbs_g=self.carbs_g * factor,
            fat_g=self.fat_g * factor,
            fiber_g=self.fiber_g * factor,
        )

    def divided(self, count: int) -> "NutritionValues":
        """Return the values divided by a positive count."""
        return self.scaled(1 / count)

    def rounded(self) -> "NutritionValues":
        """Round for display: whole calories, macros to one decimal."""
        return NutritionValues(
            calories=round_half_up(self.calories),
            protein_g=round_half_up(self.protein_g, 1),
            carbs_g=round_half_up(self.carbs_g, 1),
            fat_g=round_half_up(self.fat_g, 1),
            fiber_g=round_half_up(self.fiber_g, 1),
        )


@dataclass(frozen=True)
class FoodSearchResult:
    """Candidate food from FoodData Central with per-100g nutrients."""

    fdc_id: int
    description: str
    data_type: str | None
    brand_owner: str | None
    nutrition: NutritionValues
    serving_size: float | None = None
    serving_size_unit: str | None = None
