"""
Static food catalog, partitioned by meal slot.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple, Union

from app.exceptions import NotFoundError, ServiceValidationError
from domain.enums import MealSlot
from domain.models.food import FoodItem


class FoodCatalog:
    """Read-only lookup of candidate foods per meal slot.

    Every slot of ``MealSlot`` must be present. The stored sequences are
    tuples behind a read-only mapping, so a catalog cannot be changed after
    construction.
    """

    def __init__(self, foods_by_slot: Mapping[Union[MealSlot, str], Iterable[FoodItem]]):
        normalized: Dict[MealSlot, Tuple[FoodItem, ...]] = {}
        unknown: List[str] = []
        for key, items in foods_by_slot.items():
            try:
                slot = MealSlot(key)
            except ValueError:
                unknown.append(str(key))
                continue
            normalized[slot] = tuple(items)

        if unknown:
            raise ServiceValidationError(
                "Unknown meal slot in catalog",
                details={"unknown_slots": unknown},
                code="CATALOG_UNKNOWN_SLOT",
            )

        missing = [s.value for s in MealSlot if s not in normalized]
        if missing:
            raise ServiceValidationError(
                "Catalog is missing meal slots",
                details={"missing_slots": missing},
                code="CATALOG_MISSING_SLOT",
            )

        self._foods = MappingProxyType(normalized)

    def foods_for(self, slot: Union[MealSlot, str]) -> Tuple[FoodItem, ...]:
        return self._foods[MealSlot(slot)]

    def get_food(self, slot: Union[MealSlot, str], name: str) -> FoodItem:
        """Find a food in ``slot`` by name, ignoring case."""
        wanted = name.strip().lower()
        for food in self.foods_for(slot):
            if food.name.lower() == wanted:
                return food
        raise NotFoundError(
            f"Food '{name}' not found for {MealSlot(slot).value}",
            details={"slot": MealSlot(slot).value, "name": name},
        )

    def as_dict(self) -> Dict[str, List[FoodItem]]:
        return {slot.value: list(items) for slot, items in self._foods.items()}

    def __len__(self) -> int:
        return sum(len(items) for items in self._foods.values())


DEFAULT_CATALOG = FoodCatalog(
    {
        MealSlot.BREAKFAST: [
            FoodItem(name="Oatmeal", serving_size="1 cup cooked", carbs=27, protein=6, fat=3, calories=158),
            FoodItem(name="Eggs", serving_size="2 large", carbs=1, protein=12, fat=10, calories=144),
            FoodItem(name="Greek Yogurt", serving_size="1 cup", carbs=9, protein=23, fat=5, calories=170),
            FoodItem(name="Banana", serving_size="1 medium", carbs=27, protein=1, fat=0, calories=105),
            FoodItem(name="Whole Wheat Toast", serving_size="2 slices", carbs=24, protein=8, fat=2, calories=138),
            FoodItem(name="Peanut Butter", serving_size="2 tbsp", carbs=6, protein=8, fat=16, calories=188),
        ],
        MealSlot.LUNCH: [
            FoodItem(name="Grilled Chicken Breast", serving_size="4 oz", carbs=0, protein=35, fat=4, calories=187),
            FoodItem(name="Brown Rice", serving_size="1 cup cooked", carbs=45, protein=5, fat=2, calories=216),
            FoodItem(name="Mixed Salad Greens", serving_size="2 cups", carbs=2, protein=1, fat=0, calories=10),
            FoodItem(name="Olive Oil", serving_size="1 tbsp", carbs=0, protein=0, fat=14, calories=119),
            FoodItem(name="Quinoa", serving_size="1 cup cooked", carbs=39, protein=8, fat=4, calories=222),
            FoodItem(name="Salmon", serving_size="4 oz", carbs=0, protein=23, fat=11, calories=206),
        ],
        MealSlot.DINNER: [
            FoodItem(name="Lean Beef", serving_size="4 oz", carbs=0, protein=33, fat=13, calories=250),
            FoodItem(name="Sweet Potato", serving_size="1 medium", carbs=24, protein=2, fat=0, calories=103),
            FoodItem(name="Broccoli", serving_size="1 cup", carbs=6, protein=4, fat=0, calories=31),
            FoodItem(name="Avocado", serving_size="1/2 medium", carbs=6, protein=1, fat=11, calories=114),
            FoodItem(name="Tofu", serving_size="4 oz", carbs=3, protein=16, fat=8, calories=144),
            FoodItem(name="Whole Wheat Pasta", serving_size="1 cup cooked", carbs=37, protein=7, fat=1, calories=174),
        ],
    }
)
