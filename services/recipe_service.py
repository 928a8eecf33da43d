"""Recipe service - random and by-id recipes from TheMealDB."""

from typing import List, Optional
import random

import httpx

from adapters import http_adapter
from adapters.mealdb_adapter import MealDBAdapter
from app.config import settings
from app.exceptions import EmptyResultError, FetchError, NotFoundError
from core.base.base_service import BaseService
from domain.mappers.meal_mapper import MealMapper
from domain.schemas.recipe_schemas import RawMeal, Recipe
from services.image_service import ImageService

RANDOM_RECIPE_ERROR = "Failed to fetch recipe. Please try again."
RECIPE_DETAILS_ERROR = "Failed to fetch recipe details. Please try again."
CATEGORIES_ERROR = "Failed to fetch categories. Please try again."


class RecipeService(BaseService):
    """
    Fetches recipes and normalizes them for display.

    Public methods raise only FetchError. Internal failures (network, empty
    listing, unknown id) are logged and replaced with a generic message.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        mealdb: Optional[MealDBAdapter] = None,
        images: Optional[ImageService] = None,
        rng: Optional[random.Random] = None,
    ):
        super().__init__("mealmuse.recipes")
        self.mealdb = mealdb or MealDBAdapter(client)
        self.images = images or ImageService(client)
        self.rng = rng or random.Random()

    async def normalize(self, meal: RawMeal) -> Recipe:
        """Convert a raw record to a Recipe, settling the image first."""
        image = await self.images.resolve_display_image(meal.thumbnail, meal.name)
        return MealMapper.to_recipe(meal, image)

    async def fetch_random_by_category(self, category: Optional[str] = None) -> Recipe:
        """
        Pick a random meal from a category and return its full recipe.

        Raises:
            FetchError: for any failure, with a generic message
        """
        category = category or settings.default_category
        self.log_info("Fetching random recipe", category=category)
        try:
            meals = await self.mealdb.list_by_category(category)
            if not meals:
                raise EmptyResultError(
                    f"No {category} recipes found", details={"category": category}
                )

            chosen = self.rng.choice(meals)
            self.log_info("Selected random recipe", name=chosen.name, id=chosen.id)
            return await self.fetch_by_id(chosen.id)
        except Exception as e:
            self.log_error("Error fetching random recipe", category=category, error=repr(e))
            raise FetchError(RANDOM_RECIPE_ERROR) from None

    async def fetch_by_id(self, meal_id: str) -> Recipe:
        """
        Look up a meal by TheMealDB id and return its recipe.

        Raises:
            FetchError: for any failure, with a generic message
        """
        self.log_info("Fetching recipe details", id=meal_id)
        try:
            meal = await self.mealdb.lookup(meal_id)
            if meal is None:
                raise NotFoundError("Recipe not found", details={"meal_id": meal_id})

            self.log_info("Fetched recipe details", name=meal.name)
            return await self.normalize(meal)
        except Exception as e:
            self.log_error("Error fetching recipe details", id=meal_id, error=repr(e))
            raise FetchError(RECIPE_DETAILS_ERROR) from None

    async def list_categories(self) -> List[str]:
        try:
            return await self.mealdb.list_categories()
        except Exception as e:
            self.log_error("Error fetching categories", error=repr(e))
            raise FetchError(CATEGORIES_ERROR) from None


async def get_random_recipe(category: Optional[str] = None) -> Recipe:
    """Random recipe from a category using the shared HTTP client."""
    return await RecipeService(http_adapter.get_client()).fetch_random_by_category(category)


async def get_recipe_details(meal_id: str) -> Recipe:
    """Recipe by TheMealDB id using the shared HTTP client."""
    return await RecipeService(http_adapter.get_client()).fetch_by_id(meal_id)
