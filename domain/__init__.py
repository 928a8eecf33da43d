"""
Domain layer - Recipe schemas and mappers.
"""

from domain import mappers, schemas

__all__ = ["mappers", "schemas"]
