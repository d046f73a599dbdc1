from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field

from domain.models import DailyMealPlan, FoodItem


class MealDistribution(BaseModel):
    """Percentage of one macro assigned to each meal. Not required to sum to 100."""

    breakfast: float = Field(..., ge=0, le=100)
    lunch: float = Field(..., ge=0, le=100)
    dinner: float = Field(..., ge=0, le=100)


class GeneratePlanRequest(BaseModel):
    carbs: float = Field(default=0, ge=0, le=1000, description="Daily carbohydrates (g)")
    protein: float = Field(default=0, ge=0, le=1000, description="Daily protein (g)")
    fat: float = Field(default=0, ge=0, le=1000, description="Daily fat (g)")
    carbs_distribution: MealDistribution = Field(
        default_factory=lambda: MealDistribution(breakfast=35, lunch=35, dinner=30)
    )
    protein_distribution: MealDistribution = Field(
        default_factory=lambda: MealDistribution(breakfast=33, lunch=33, dinner=34)
    )
    fat_distribution: MealDistribution = Field(
        default_factory=lambda: MealDistribution(breakfast=35, lunch=30, dinner=35)
    )


class PlanResponse(BaseModel):
    plan: DailyMealPlan
    message: str = "Your custom meal plan has been created based on the provided macronutrients."


class CatalogResponse(BaseModel):
    foods: Dict[str, List[FoodItem]]
