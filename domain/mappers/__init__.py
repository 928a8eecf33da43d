"""
Domain mappers package.
Handles transformation between external API records and DTOs (Data Transfer Objects).
"""

from domain.mappers.meal_mapper import MealMapper

__all__ = ["MealMapper"]
