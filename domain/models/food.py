"""
Food and macronutrient value objects.
"""

from pydantic import BaseModel, ConfigDict, Field


class FoodItem(BaseModel):
    """A single catalog food with fixed nutrition per serving.

    Calories are stored as listed, not derived from the macros.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    serving_size: str
    carbs: float = Field(ge=0, description="Carbohydrates per serving (g)")
    protein: float = Field(ge=0, description="Protein per serving (g)")
    fat: float = Field(ge=0, description="Fat per serving (g)")
    calories: float = Field(ge=0, description="Energy per serving (kcal)")


class MacroAmounts(BaseModel):
    """Carbs/protein/fat gram triple"""

    model_config = ConfigDict(frozen=True)

    carbs: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
