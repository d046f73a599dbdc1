"""
API dependencies for dependency injection
"""

import random

from fastapi import Depends

from app.config import settings
from domain.models import DEFAULT_CATALOG, FoodCatalog
from services.meal_assembler import MealAssembler
from services.planner_service import PlannerService


def get_catalog() -> FoodCatalog:
    """Food catalog dependency. Tests can override it with a custom catalog."""
    return DEFAULT_CATALOG


def get_planner(catalog: FoodCatalog = Depends(get_catalog)) -> PlannerService:
    """
    Planner dependency for FastAPI routes.

    A fresh random source is created per request. With ``random_seed`` set,
    every request starts from the same seed and identical inputs produce
    identical plans.

    Usage:
        @router.post("/example")
        def example(planner: PlannerService = Depends(get_planner)):
            ...
    """
    rng = random.Random(settings.random_seed)
    return PlannerService(MealAssembler(catalog=catalog, rng=rng))
