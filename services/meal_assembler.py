"""Meal assembly: random draws from a slot's catalog within a macro tolerance band."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Union

from domain.enums import MealSlot
from domain.models import DEFAULT_CATALOG, FoodCatalog, FoodItem

logger = logging.getLogger("macromeal.assembler")

# Running totals may reach at most this multiple of each target.
TOLERANCE = 1.10


class MealAssembler:
    """
    Builds one meal from a catalog partition:
    - draws a remaining candidate uniformly at random
    - accepts it only if carbs, protein and fat all stay within the tolerance band
    - drops the candidate from the pool whether or not it was accepted
    - stops once every target is reached or nothing is left to try

    ``rng`` is anything with ``randrange(n)``; pass a seeded ``random.Random``
    (or a scripted stand-in) to make selections reproducible.
    """

    def __init__(self, catalog: Optional[FoodCatalog] = None, rng=None):
        self.catalog: FoodCatalog = catalog if catalog is not None else DEFAULT_CATALOG
        self.rng = rng if rng is not None else random.Random()

    def select_foods(
        self,
        target_carbs: float,
        target_protein: float,
        target_fat: float,
        slot: Union[MealSlot, str],
    ) -> List[FoodItem]:
        slot = MealSlot(slot)
        pool: List[FoodItem] = list(self.catalog.foods_for(slot))
        selected: List[FoodItem] = []
        carbs = protein = fat = 0.0

        max_carbs = target_carbs * TOLERANCE
        max_protein = target_protein * TOLERANCE
        max_fat = target_fat * TOLERANCE

        while pool and (carbs < target_carbs or protein < target_protein or fat < target_fat):
            candidate = pool.pop(self.rng.randrange(len(pool)))

            if (
                carbs + candidate.carbs <= max_carbs
                and protein + candidate.protein <= max_protein
                and fat + candidate.fat <= max_fat
            ):
                selected.append(candidate)
                carbs += candidate.carbs
                protein += candidate.protein
                fat += candidate.fat
                logger.debug("%s: accepted %s", slot.value, candidate.name)
            else:
                logger.debug("%s: rejected %s (over tolerance)", slot.value, candidate.name)

        logger.info(
            "%s: selected %d foods (carbs %.1f/%.1f, protein %.1f/%.1f, fat %.1f/%.1f)",
            slot.value,
            len(selected),
            carbs,
            target_carbs,
            protein,
            target_protein,
            fat,
            target_fat,
        )
        return selected
