"""
Domain schemas package - Pydantic models for request validation and responses.
"""

from domain.schemas.plan_schemas import (
    MealDistribution,
    GeneratePlanRequest,
    PlanResponse,
    CatalogResponse,
)

__all__ = [
    "MealDistribution",
    "GeneratePlanRequest",
    "PlanResponse",
    "CatalogResponse",
]
