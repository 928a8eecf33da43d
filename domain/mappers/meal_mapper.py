"""
Meal domain mappers.
Handles transformation from TheMealDB records to normalized Recipe DTOs.
"""

from typing import List

from core.utils.helpers import expand_units, split_tags, blank_to_none
from domain.schemas.recipe_schemas import (
    MEAL_SLOT_COUNT,
    Ingredient,
    RawMeal,
    Recipe,
)


class MealMapper:
    """Mapper for TheMealDB record transformations."""

    @staticmethod
    def extract_ingredients(meal: RawMeal) -> List[Ingredient]:
        """
        Decode the fixed strIngredientN / strMeasureN slots into a list.

        Slots are read in order 1..20; a slot whose ingredient name is blank
        or missing is skipped. Measures are trimmed and unit-expanded.

        Args:
            meal: Raw lookup.php record

        Returns:
            Ingredients in slot order
        """
        ingredients: List[Ingredient] = []
        for index in range(1, MEAL_SLOT_COUNT + 1):
            name, measure = meal.slot(index)
            name = (name or "").strip()
            if not name:
                continue
            measure = (measure or "").strip()
            ingredients.append(
                Ingredient(name=name, measure=expand_units(measure) if measure else "")
            )
        return ingredients

    @staticmethod
    def to_recipe(meal: RawMeal, image: str) -> Recipe:
        """
        Convert a raw record to a Recipe DTO.

        Args:
            meal: Raw lookup.php record
            image: Image URL already chosen by the image pipeline

        Returns:
            Recipe with tags split and an empty YouTube link treated as absent
        """
        return Recipe(
            id=meal.id,
            name=meal.name,
            category=meal.category,
            area=meal.area,
            instructions=meal.instructions,
            image=image,
            tags=split_tags(meal.tags),
            youtube_url=blank_to_none(meal.youtube),
            ingredients=MealMapper.extract_ingredients(meal),
        )
