"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    FetchError,
    NotFoundError,
    EmptyResultError,
    NetworkError,
)

__all__ = [
    "settings",
    "FetchError",
    "NotFoundError",
    "EmptyResultError",
    "NetworkError",
]
