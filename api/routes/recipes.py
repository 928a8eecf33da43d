"""
Recipe routes - Random and by-id recipe retrieval.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from typing import Optional
import logging

from api.responses import ErrorResponse
from core.dependencies import get_recipe_service
from domain.schemas.recipe_schemas import CategoryNames, Recipe
from services.recipe_service import RecipeService

router = APIRouter(
    prefix="/recipes",
    tags=["Recipes"],
    responses={502: {"model": ErrorResponse, "description": "Upstream fetch failed"}},
)
logger = logging.getLogger("mealmuse.api.recipes")

# TheMealDB ids are short numeric strings
MAX_MEAL_ID_LENGTH = 32


@router.get("/random", response_model=Recipe)
async def random_recipe(
    category: Optional[str] = Query(
        default=None,
        min_length=1,
        max_length=64,
        description="TheMealDB category; defaults to the configured category",
    ),
    service: RecipeService = Depends(get_recipe_service),
) -> Recipe:
    """
    Get a random recipe from a category.

    - **category**: e.g. Dessert, Seafood, Vegetarian
    """
    return await service.fetch_random_by_category(category)


@router.get("/categories", response_model=CategoryNames)
async def list_categories(
    service: RecipeService = Depends(get_recipe_service),
) -> CategoryNames:
    """List the category names accepted by /recipes/random."""
    return CategoryNames(categories=await service.list_categories())


@router.get("/{meal_id}", response_model=Recipe)
async def get_recipe(
    meal_id: str = Path(..., description="TheMealDB meal id"),
    service: RecipeService = Depends(get_recipe_service),
) -> Recipe:
    """
    Get a single recipe by TheMealDB id.

    Returns ingredients, instructions, tags and a display image.
    """
    if not meal_id.strip() or len(meal_id) > MAX_MEAL_ID_LENGTH:
        raise HTTPException(status_code=400, detail="Invalid recipe ID format")

    return await service.fetch_by_id(meal_id.strip())
