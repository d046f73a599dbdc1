"""Services package"""

from services.meal_assembler import MealAssembler, TOLERANCE
from services.planner_service import PlannerService, meal_targets, total_calories

__all__ = [
    "MealAssembler",
    "TOLERANCE",
    "PlannerService",
    "meal_targets",
    "total_calories",
]
