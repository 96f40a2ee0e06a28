"""Dispatch of agent tool calls to the food log services."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from food_tracker.api.tool_models import (
    DeleteEntryArgs,
    GetDailyLogArgs,
    GetSummaryArgs,
    LogFoodArgs,
    SearchFoodArgs,
    SetGoalsArgs,
)
from food_tracker.domain.food_log import NewLogEntry
from food_tracker.formatting import (
    format_daily_log,
    format_deleted,
    format_goals,
    format_logged_entry,
    format_range_summary,
    format_search_results,
)
from food_tracker.services.food_log import FoodLogService
from food_tracker.services.nutrition import NutritionService
from food_tracker.tool_commands import FoodTool, find_tool

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolResult:
    """Text produced by a tool call."""

    text: str
    is_error: bool = False


@dataclass
class ToolRegistry:
    """Validates tool arguments and runs the matching handler."""

    food_log_service: FoodLogService
    nutrition_service: NutritionService

    async def call(self, name: str, arguments: dict[str, Any] | None) -> ToolResult:
        """Run a tool; failures become error results instead of exceptions."""
        spec = find_tool(name)
        if spec is None:
            return ToolResult(f"Unknown tool: {name}", is_error=True)
        try:
            args = spec.arguments.model_validate(arguments or {})
        except ValidationError as exc:
            message = _describe_validation_error(exc)
            return ToolResult(f"Error: {message}", is_error=True)
        handler = self._handlers()[name]
        try:
            return ToolResult(await handler(args))
        except ValueError as exc:
            return ToolResult(f"Error: {exc}", is_error=True)
        except Exception as exc:
            _logger.exception("Tool %s failed", name)
            return ToolResult(f"Error: {exc}", is_error=True)

    def _handlers(self) -> dict[str, Callable[[Any], Awaitable[str]]]:
        return {
            FoodTool.SEARCH_FOOD.value.name: self._search_food,
            FoodTool.LOG_FOOD.value.name: self._log_food,
            FoodTool.GET_DAILY_LOG.value.name: self._get_daily_log,
            FoodTool.SET_GOALS.value.name: self._set_goals,
            FoodTool.GET_SUMMARY.value.name: self._get_summary,
            FoodTool.DELETE_ENTRY.value.name: self._delete_entry,
        }

    async def _search_food(self, args: SearchFoodArgs) -> str:
        results = await self.nutrition_service.search(args.query, limit=args.limit)
        return format_search_results(args.query, results)

    async def _log_food(self, args: LogFoodArgs) -> str:
        entry = NewLogEntry(
            day=args.day or self.food_log_service.today(),
            food_name=args.food_name,
            serving_size=args.serving_size,
            serving_unit=args.serving_unit,
            meal=args.meal,
            fdc_id=args.fdc_id,
            calories=args.calories,
            protein_g=args.protein_g,
            carbs_g=args.carbs_g,
            fat_g=args.fat_g,
            fiber_g=args.fiber_g,
            notes=args.notes,
        )
        stored, view = await self.food_log_service.log_food(entry)
        return format_logged_entry(stored, view)

    async def _get_daily_log(self, args: GetDailyLogArgs) -> str:
        return format_daily_log(self.food_log_service.daily_view(args.day))

    async def _set_goals(self, args: SetGoalsArgs) -> str:
        fields = args.model_dump(exclude_none=True)
        if not fields:
            return format_goals(self.food_log_service.get_goals())
        updated = self.food_log_service.update_goals(**fields)
        return format_goals(updated, heading="Goals Updated")

    async def _get_summary(self, args: GetSummaryArgs) -> str:
        summary = self.food_log_service.range_summary(
            period=args.period, start=args.start_date, end=args.end_date
        )
        return format_range_summary(summary)

    async def _delete_entry(self, args: DeleteEntryArgs) -> str:
        deleted = self.food_log_service.delete_entry(args.entry_id)
        return format_deleted(args.entry_id, deleted)


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)

