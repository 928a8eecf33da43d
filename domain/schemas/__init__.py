"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.recipe_schemas import (
    MEAL_SLOT_COUNT,
    MealSummary,
    MealListResponse,
    RawMeal,
    MealDetailResponse,
    Category,
    CategoryListResponse,
    CategoryNames,
    Ingredient,
    Recipe,
)

__all__ = [
    "MEAL_SLOT_COUNT",
    "MealSummary",
    "MealListResponse",
    "RawMeal",
    "MealDetailResponse",
    "Category",
    "CategoryListResponse",
    "CategoryNames",
    "Ingredient",
    "Recipe",
]
