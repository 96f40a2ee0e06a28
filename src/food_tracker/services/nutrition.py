"""Nutrition lookups against USDA FoodData Central."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from food_tracker.adapters.fdc_client import FdcClient
from food_tracker.domain.nutrition import FoodSearchResult, NutritionValues
from food_tracker.services.cache import Cache

_NUTRIENT_IDS = {
    1008: "calories",
    1003: "protein_g",
    1005: "carbs_g",
    1004: "fat_g",
    1079: "fiber_g",
}

# FDC nutrient values are reported per 100 g (or ml).
BASE_SERVING_SIZE = 100.0

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

_T = TypeVar("_T")


@dataclass
class NutritionService:
    """Service for nutrition lookups with caching."""

    fdc_client: FdcClient
    cache: Cache
    search_ttl_seconds: int = 3600
    food_ttl_seconds: int = 86400
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def search(self, query: str, limit: int = 10) -> list[FoodSearchResult]:
        """Search FDC foods, returning candidates with per-100g nutrients."""
        cache_key = f"fdc:search:{query.lower()}:{limit}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.search_foods(query, page_size=limit),
            action="search",
        )
        foods = [_parse_search_food(food) for food in payload.get("foods") or []]
        self.cache.set(cache_key, foods, ttl_seconds=self.search_ttl_seconds)
        _logger.info("FDC search: query=%r results=%s", query, len(foods))
        return foods

    async def get_nutrition(self, fdc_id: int) -> NutritionValues | None:
        """Return per-100g nutrition for a food, or None if FDC has no such id."""
        cache_key = f"fdc:food:{fdc_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, NutritionValues):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.get_food(fdc_id),
            action=f"get_food:{fdc_id}",
        )
        if payload is None:
            return None
        nutrition = extract_nutrition(payload.get("foodNutrients") or [])
        self.cache.set(cache_key, nutrition, ttl_seconds=self.food_ttl_seconds)
        return nutrition

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[_T]]", *, action: str
    ) -> _T:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                _logger.warning(
                    "FDC %s failed (attempt %s/%s, status=%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    _status_code_from_exception(exc),
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def scale_nutrition(
    nutrition: NutritionValues,
    serving_size: float,
    base_serving_size: float = BASE_SERVING_SIZE,
) -> NutritionValues:
    """Scale reference nutrition to a serving size."""
    return nutrition.scaled(serving_size / base_serving_size)


def extract_nutrition(food_nutrients: list[dict[str, object]]) -> NutritionValues:
    """Pick calories and macros out of FDC nutrient rows.

    Search results carry ``nutrientId``/``value``; food details nest the id
    under ``nutrient`` and use ``amount``. Missing nutrients count as zero.
    """
    values: dict[str, float] = {}
    for nutrient in food_nutrients:
        nutrient_info = nutrient.get("nutrient") or {}
        nutrient_id = nutrient.get("nutrientId") or nutrient_info.get("id")
        field_name = _NUTRIENT_IDS.get(nutrient_id)
        if field_name is None or field_name in values:
            continue
        amount = nutrient.get("value", nutrient.get("amount"))
        if isinstance(amount, int | float):
            values[field_name] = float(amount)
    return NutritionValues(**values)


def _parse_search_food(food: dict[str, object]) -> FoodSearchResult:
    return FoodSearchResult(
        fdc_id=int(food["fdcId"]),
        description=str(food.get("description", "")),
        data_type=food.get("dataType"),
        brand_owner=food.get("brandOwner"),
        nutrition=extract_nutrition(food.get("foodNutrients") or []),
        serving_size=food.get("servingSize"),
        serving_size_unit=food.get("servingSizeUnit"),
    )


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
