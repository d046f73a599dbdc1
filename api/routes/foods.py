"""Food catalog routes"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from api.dependencies import get_catalog
from domain.enums import MealSlot
from domain.models import FoodCatalog, FoodItem
from domain.schemas.plan_schemas import CatalogResponse

router = APIRouter(prefix="/foods", tags=["Food Catalog"])
logger = logging.getLogger("macromeal.api.foods")


@router.get("", response_model=CatalogResponse)
def list_catalog(catalog: FoodCatalog = Depends(get_catalog)):
    """All candidate foods, keyed by meal slot."""
    return CatalogResponse(foods=catalog.as_dict())


@router.get("/{slot}", response_model=List[FoodItem])
def list_slot_foods(slot: MealSlot, catalog: FoodCatalog = Depends(get_catalog)):
    """Candidate foods for one meal slot."""
    return list(catalog.foods_for(slot))


@router.get("/{slot}/{name}", response_model=FoodItem)
def get_food(slot: MealSlot, name: str, catalog: FoodCatalog = Depends(get_catalog)):
    """A single food by name (case-insensitive). Unknown names return 404."""
    food = catalog.get_food(slot, name)
    logger.info("Looked up %s for %s", food.name, slot.value)
    return food
