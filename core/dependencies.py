"""
Centralized dependency injection for FastAPI.
This module provides all injectable dependencies used across the application.
"""

import httpx

from adapters import http_adapter
from services.recipe_service import RecipeService


def get_http_client() -> httpx.AsyncClient:
    """
    Shared outbound HTTP client dependency.
    Opened by the application lifespan; created lazily if the lifespan did not run.
    """
    return http_adapter.get_client()


def get_recipe_service() -> RecipeService:
    """Get recipe service instance bound to the shared client"""
    return RecipeService(get_http_client())
