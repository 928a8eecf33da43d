"""Services package - Business logic layer"""

from services.image_service import ImageService
from services.recipe_service import RecipeService, get_random_recipe, get_recipe_details

__all__ = [
    "ImageService",
    "RecipeService",
    "get_random_recipe",
    "get_recipe_details",
]
