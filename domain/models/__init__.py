"""
Domain models package - immutable foods, the catalog and meal plans.
"""

from domain.models.food import FoodItem, MacroAmounts
from domain.models.catalog import FoodCatalog, DEFAULT_CATALOG
from domain.models.meal_plan import Meal, TotalNutrition, DailyMealPlan

__all__ = [
    "FoodItem",
    "MacroAmounts",
    "FoodCatalog",
    "DEFAULT_CATALOG",
    "Meal",
    "TotalNutrition",
    "DailyMealPlan",
]
