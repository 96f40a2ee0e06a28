"""Pydantic models for tool arguments and tool call payloads."""

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from food_tracker.domain.food_log import Meal


class SearchFoodArgs(BaseModel):
    """Arguments for ``search_food``."""

    query: str = Field(description="Food name or description to search for")
    limit: int = Field(
        default=10, ge=1, le=200, description="Number of results (default: 10)"
    )


class LogFoodArgs(BaseModel):
    """Arguments for ``log_food``."""

    food_name: str = Field(description="Name of the food")
    serving_size: float = Field(description="Amount of the serving")
    serving_unit: str = Field(description="Unit (g, oz, cup, piece, etc.)")
    calories: float | None = Field(
        default=None,
        description="Calories for this serving (may be omitted with fdc_id and grams)",
    )
    protein_g: float | None = Field(default=None, description="Protein in grams")
    carbs_g: float | None = Field(default=None, description="Carbs in grams")
    fat_g: float | None = Field(default=None, description="Fat in grams")
    fiber_g: float | None = Field(default=None, description="Fiber in grams")
    meal: Meal | None = Field(default=None, description="Meal type")
    day: date | None = Field(
        default=None, alias="date", description="Date YYYY-MM-DD (default: today)"
    )
    fdc_id: int | None = Field(default=None, description="USDA FDC ID if from search")
    notes: str | None = Field(default=None, description="Optional notes")

    @model_validator(mode="after")
    def require_calories_or_fdc_id(self) -> "LogFoodArgs":
        if self.calories is None and self.fdc_id is None:
            raise ValueError("calories is required unless fdc_id is given")
        return self


class GetDailyLogArgs(BaseModel):
    """Arguments for ``get_daily_log``."""

    day: date | None = Field(
        default=None, alias="date", description="Date YYYY-MM-DD (default: today)"
    )


class SetGoalsArgs(BaseModel):
    """Arguments for ``set_goals``; omitted fields keep their value."""

    daily_calories: float | None = Field(default=None, description="Daily calorie goal")
    protein_g: float | None = Field(default=None, description="Daily protein goal (g)")
    carbs_g: float | None = Field(default=None, description="Daily carb goal (g)")
    fat_g: float | None = Field(default=None, description="Daily fat goal (g)")


class GetSummaryArgs(BaseModel):
    """Arguments for ``get_summary``."""

    start_date: date | None = Field(default=None, description="Start date YYYY-MM-DD")
    end_date: date | None = Field(default=None, description="End date YYYY-MM-DD")
    period: Literal["week", "month"] | None = Field(
        default=None, description="Preset period instead of a date range"
    )


class DeleteEntryArgs(BaseModel):
    """Arguments for ``delete_entry``."""

    entry_id: int = Field(description="ID of the food log entry to delete")


class ToolCallRequest(BaseModel):
    """Body of a tool call."""

    arguments: dict[str, Any] = Field(default_factory=dict)


class TextContent(BaseModel):
    """Single text block of a tool result."""

    type: Literal["text"] = "text"
    text: str


class ToolCallResponse(BaseModel):
    """Tool result in the shape agents expect."""

    content: list[TextContent]
    is_error: bool = Field(default=False, serialization_alias="isError")
