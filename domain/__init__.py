"""
Domain layer - Foods, catalog, meal plans, schemas, and enums.
"""

from domain import enums, models, schemas

__all__ = ["enums", "models", "schemas"]
