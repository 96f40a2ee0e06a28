"""Agent tool definitions."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel

from food_tracker.api.tool_models import (
    DeleteEntryArgs,
    GetDailyLogArgs,
    GetSummaryArgs,
    LogFoodArgs,
    SearchFoodArgs,
    SetGoalsArgs,
)


@dataclass(frozen=True)
class ToolSpec:
    """Declarative tool definition."""

    name: str
    description: str
    arguments: type[BaseModel]


class FoodTool(Enum):
    """Enum of agent tools (single source of truth)."""

    SEARCH_FOOD = ToolSpec(
        "search_food",
        "Search the USDA FoodData Central database for foods. "
        "Returns nutrition information per 100g serving.",
        SearchFoodArgs,
    )
    LOG_FOOD = ToolSpec(
        "log_food",
        "Log a food entry to your daily food diary. "
        "Include nutrition info from search or estimate.",
        LogFoodArgs,
    )
    GET_DAILY_LOG = ToolSpec(
        "get_daily_log",
        "Get all food entries for a specific day with totals and comparison to goals.",
        GetDailyLogArgs,
    )
    SET_GOALS = ToolSpec(
        "set_goals",
        "Set your daily nutrition goals for calories and macros. "
        "Call without arguments to see the current goals.",
        SetGoalsArgs,
    )
    GET_SUMMARY = ToolSpec(
        "get_summary",
        "Get nutrition summary and averages for a date range or period.",
        GetSummaryArgs,
    )
    DELETE_ENTRY = ToolSpec(
        "delete_entry",
        "Delete a food log entry by its ID.",
        DeleteEntryArgs,
    )


def tool_definitions() -> list[dict[str, object]]:
    """Return tool definitions with JSON schemas for their arguments."""
    return [
        {
            "name": tool.value.name,
            "description": tool.value.description,
            "inputSchema": tool.value.arguments.model_json_schema(),
        }
        for tool in FoodTool
    ]


def find_tool(name: str) -> ToolSpec | None:
    """Return the tool with the given name, if any."""
    for tool in FoodTool:
        if tool.value.name == name:
            return tool.value
    return None
