from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import get_planner
from domain.schemas.plan_schemas import GeneratePlanRequest, PlanResponse
from services.planner_service import PlannerService

router = APIRouter(prefix="/plans", tags=["Meal Planning"])
logger = logging.getLogger("macromeal.api.plans")


@router.post("", response_model=PlanResponse, status_code=status.HTTP_201_CREATED)
def generate_daily_plan(body: GeneratePlanRequest, planner: PlannerService = Depends(get_planner)):
    """
    Generate a sample daily meal plan from macronutrient targets.

    This endpoint:
    1. Splits each daily macro across breakfast, lunch and dinner by its percentages
    2. Draws random foods for each meal until its targets are met (within 110%)
       or the meal's candidates run out
    3. Reports the requested daily totals with calories (4/4/9 kcal per gram)

    Returns:
        PlanResponse with the three meals, total nutrition and a confirmation message
    """
    plan = planner.generate_plan(
        daily_carbs=body.carbs,
        daily_protein=body.protein,
        daily_fat=body.fat,
        carbs_split=body.carbs_distribution,
        protein_split=body.protein_distribution,
        fat_split=body.fat_distribution,
    )

    logger.info(
        "Plan generated with %d/%d/%d foods",
        len(plan.breakfast.foods),
        len(plan.lunch.foods),
        len(plan.dinner.foods),
    )
    return PlanResponse(plan=plan)


@router.get("/defaults", response_model=GeneratePlanRequest)
def get_plan_defaults():
    """Default request values, used to pre-populate the plan form."""
    return GeneratePlanRequest()
