from __future__ import annotations

import logging
from typing import Dict, Optional

from domain.enums import MealSlot
from domain.models import DailyMealPlan, MacroAmounts, Meal, TotalNutrition
from domain.schemas.plan_schemas import MealDistribution
from services.meal_assembler import MealAssembler


logger = logging.getLogger("macromeal.planner")

# Atwater factors, kcal per gram
KCAL_PER_G_CARBS = 4
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_FAT = 9


def total_calories(carbs: float, protein: float, fat: float) -> float:
    return carbs * KCAL_PER_G_CARBS + protein * KCAL_PER_G_PROTEIN + fat * KCAL_PER_G_FAT


def _share(daily: float, distribution: MealDistribution, slot: MealSlot) -> float:
    return daily * getattr(distribution, slot.value) / 100


def meal_targets(
    carbs: float,
    protein: float,
    fat: float,
    carbs_split: MealDistribution,
    protein_split: MealDistribution,
    fat_split: MealDistribution,
) -> Dict[MealSlot, MacroAmounts]:
    """Split each daily macro across the meals by its own percentages."""
    return {
        slot: MacroAmounts(
            carbs=_share(carbs, carbs_split, slot),
            protein=_share(protein, protein_split, slot),
            fat=_share(fat, fat_split, slot),
        )
        for slot in MealSlot
    }


class PlannerService:
    """
    Planner:
    - derives per-meal gram targets from daily totals and percentage splits
    - assembles breakfast, lunch and dinner in that order
    - reports the requested daily totals (with Atwater calories) as total_nutrition
    """

    def __init__(self, assembler: Optional[MealAssembler] = None):
        self.assembler: MealAssembler = assembler if assembler is not None else MealAssembler()

    def _build_meal(self, slot: MealSlot, targets: MacroAmounts) -> Meal:
        foods = self.assembler.select_foods(targets.carbs, targets.protein, targets.fat, slot)
        return Meal(name=slot.display_name, foods=foods, targets=targets)

    def generate_plan(
        self,
        daily_carbs: float,
        daily_protein: float,
        daily_fat: float,
        carbs_split: MealDistribution,
        protein_split: MealDistribution,
        fat_split: MealDistribution,
    ) -> DailyMealPlan:
        logger.info(
            "Generating plan: carbs=%s protein=%s fat=%s", daily_carbs, daily_protein, daily_fat
        )

        targets = meal_targets(daily_carbs, daily_protein, daily_fat, carbs_split, protein_split, fat_split)
        meals = {slot: self._build_meal(slot, targets[slot]) for slot in MealSlot}

        # Totals mirror the request, not the foods that were picked.
        totals = TotalNutrition(
            calories=total_calories(daily_carbs, daily_protein, daily_fat),
            carbs=daily_carbs,
            protein=daily_protein,
            fat=daily_fat,
        )

        return DailyMealPlan(
            breakfast=meals[MealSlot.BREAKFAST],
            lunch=meals[MealSlot.LUNCH],
            dinner=meals[MealSlot.DINNER],
            total_nutrition=totals,
        )
