"""
Meal plan models returned by the plan composer.
"""

from typing import List

from pydantic import BaseModel, Field, computed_field

from domain.models.food import FoodItem, MacroAmounts


class TotalNutrition(BaseModel):
    """Calories and macro grams"""

    calories: float = 0.0
    carbs: float = 0.0
    protein: float = 0.0
    fat: float = 0.0


class Meal(BaseModel):
    """One assembled meal.

    ``foods`` keeps selection order. ``targets`` are the grams the meal was
    assembled against and ``nutrition`` is the sum of what was actually picked.
    """

    name: str
    foods: List[FoodItem] = Field(default_factory=list)
    targets: MacroAmounts = Field(default_factory=MacroAmounts)

    @computed_field
    @property
    def nutrition(self) -> TotalNutrition:
        return TotalNutrition(
            calories=sum(f.calories for f in self.foods),
            carbs=sum(f.carbs for f in self.foods),
            protein=sum(f.protein for f in self.foods),
            fat=sum(f.fat for f in self.foods),
        )


class DailyMealPlan(BaseModel):
    """Breakfast, lunch and dinner plus the day's totals.

    ``total_nutrition`` reports the requested daily targets, not the sum of
    the selected foods. Use ``Meal.nutrition`` for what was assembled.
    """

    breakfast: Meal
    lunch: Meal
    dinner: Meal
    total_nutrition: TotalNutrition

    def meals(self) -> List[Meal]:
        return [self.breakfast, self.lunch, self.dinner]
