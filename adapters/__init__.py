"""
Adapters package - External service connections.
HTTP adapters for TheMealDB and Wikimedia Commons.
"""

from adapters import http_adapter
from adapters.mealdb_adapter import MealDBAdapter
from adapters.wikimedia_adapter import WikimediaAdapter

__all__ = [
    "http_adapter",
    "MealDBAdapter",
    "WikimediaAdapter",
]
