"""TheMealDB adapter for recipe listing and lookup.
"""

from typing import List, Optional
import logging
import httpx
from pydantic import ValidationError

from adapters import http_adapter
from app.config import settings
from app.exceptions import NetworkError
from domain.schemas.recipe_schemas import (
    CategoryListResponse,
    MealDetailResponse,
    MealListResponse,
    MealSummary,
    RawMeal,
)

logger = logging.getLogger("mealmuse.mealdb")


class MealDBAdapter:
    """Thin wrapper over TheMealDB JSON API (v1, public test key)."""

    def __init__(self, client: httpx.AsyncClient, base_url: Optional[str] = None):
        self.client = client
        self.base_url = (base_url or settings.mealdb_base_url).rstrip("/")

    async def _get(self, endpoint: str, params: dict):
        return await http_adapter.get_json(
            self.client, f"{self.base_url}/{endpoint}", params=params
        )

    async def list_by_category(self, category: str) -> List[MealSummary]:
        """Fetch the filter.php listing for a category.

        Returns:
            Listing entries; empty when the API answers ``{"meals": null}``
        """
        data = await self._get("filter.php", {"c": category})
        try:
            meals = MealListResponse.model_validate(data).meals or []
        except ValidationError as exc:
            raise NetworkError(
                "Unexpected listing payload",
                details={"category": category},
                code="INVALID_PAYLOAD",
            ) from exc
        logger.debug("Category %s has %d meals", category, len(meals))
        return meals

    async def lookup(self, meal_id: str) -> Optional[RawMeal]:
        """Fetch the full record for a meal id, or None when unknown."""
        data = await self._get("lookup.php", {"i": meal_id})
        try:
            meals = MealDetailResponse.model_validate(data).meals
        except ValidationError as exc:
            raise NetworkError(
                "Unexpected lookup payload",
                details={"meal_id": meal_id},
                code="INVALID_PAYLOAD",
            ) from exc
        if not meals:
            logger.debug("Meal not found: %s", meal_id)
            return None
        return meals[0]

    async def list_categories(self) -> List[str]:
        data = await self._get("list.php", {"c": "list"})
        try:
            categories = CategoryListResponse.model_validate(data).meals or []
        except ValidationError as exc:
            raise NetworkError(
                "Unexpected category payload", code="INVALID_PAYLOAD"
            ) from exc
        return [c.name for c in categories]
