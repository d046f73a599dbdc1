"""
Domain enums for MacroMeal application.
Contains all enumeration types used across the domain models.
"""

import enum


class MealSlot(str, enum.Enum):
    """Daily meal categories, in the order meals are assembled"""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()
