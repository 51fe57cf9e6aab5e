"""Reference food catalogue.

Wraps the static `FOODS_DATA` table with lookup, search and portion scaling.
It is also the source of fallback estimates when a food photo cannot be
analysed.
"""

import random
from typing import Dict, List, Optional

from core.logger import get_logger
from data.foods_dataset import FOODS_DATA
from schemas.food_schema import FoodItem, FoodNutrition, RecognizedFood, Scenario
from services.nutrition_calculator import round_half_up

logger = get_logger("services.food_database")

FALLBACK_CONFIDENCE = 0.6


class FoodDatabase:
    """In-memory catalogue of common foods keyed by id."""

    def __init__(self, rows: List[dict] = None):
        rows = FOODS_DATA if rows is None else rows
        self._foods: List[FoodItem] = [FoodItem(**r) for r in rows]
        self._by_id: Dict[str, FoodItem] = {f.id: f for f in self._foods}
        logger.debug("Loaded %s foods into catalogue", len(self._foods))

    def __len__(self) -> int:
        return len(self._foods)

    def list_foods(self) -> List[FoodItem]:
        return list(self._foods)

    def get_food_by_id(self, food_id: str) -> Optional[FoodItem]:
        return self._by_id.get(food_id)

    def search_foods(self, query: str) -> List[FoodItem]:
        """Case-insensitive substring search over name, aliases and tags."""
        q = (query or "").lower().strip()
        if not q:
            return []
        out = []
        for item in self._foods:
            if q in item.name.lower():
                out.append(item)
            elif any(q in alias.lower() for alias in item.aliases):
                out.append(item)
            elif any(q in tag for tag in item.tags):
                out.append(item)
        return out

    def get_foods_by_tag(self, tag: str) -> List[FoodItem]:
        return [f for f in self._foods if tag in f.tags]

    def find_foods(self, query: Optional[str] = None, tag: Optional[str] = None) -> List[FoodItem]:
        """Search results, or the whole catalogue when `query` is None, limited to `tag`."""
        foods = self.search_foods(query) if query is not None else self.list_foods()
        if tag is None:
            return foods
        tagged = {f.id for f in self.get_foods_by_tag(tag)}
        return [f for f in foods if f.id in tagged]

    def calculate_nutrition(self, food: FoodItem, weight_g: float) -> FoodNutrition:
        """Scale per-100 g values to `weight_g`.

        Calories are rounded to whole kcal, macros to one decimal.
        """
        factor = weight_g / 100
        return FoodNutrition(
            food_id=food.id,
            weight_g=weight_g,
            calories=int(round_half_up(food.per_100g.calories * factor)),
            protein=round_half_up(food.per_100g.protein * factor, 1),
            carbs=round_half_up(food.per_100g.carbs * factor, 1),
            fat=round_half_up(food.per_100g.fat * factor, 1),
        )

    def scenario_pool(self, scenario: Optional[str]) -> List[FoodItem]:
        """Foods tagged for the scenario, or the whole catalogue if unknown."""
        try:
            tag = Scenario(scenario).value
        except ValueError:
            return self.list_foods()
        return self.get_foods_by_tag(tag)

    def get_suggested_foods(
        self, scenario: Optional[str] = None, count: int = 3, rng: random.Random = None
    ) -> List[FoodItem]:
        """Return up to `count` random foods suited to the scenario."""
        rng = rng or random.Random()
        pool = self.scenario_pool(scenario)
        rng.shuffle(pool)
        return pool[:count]

    def estimate_portion(self, food: FoodItem) -> RecognizedFood:
        """Nutrition for one standard serving, shaped like a photo recognition."""
        nutrition = self.calculate_nutrition(food, food.serving_size_g)
        return RecognizedFood(
            name=food.name,
            weight_g=food.serving_size_g,
            calories=nutrition.calories,
            protein=nutrition.protein,
            carbs=nutrition.carbs,
            fat=nutrition.fat,
            confidence=FALLBACK_CONFIDENCE,
            tips=f"{food.category} - {', '.join(food.tags)}",
        )

    def fallback_recognition(
        self, scenario: Optional[str] = None, count: int = 2, rng: random.Random = None
    ) -> List[RecognizedFood]:
        """Low-confidence estimates used when the vision model is unavailable."""
        logger.info("Using catalogue fallback for food recognition (scenario=%s)", scenario)
        return [self.estimate_portion(f) for f in self.get_suggested_foods(scenario, count, rng)]


food_database = FoodDatabase()
__all__ = ["FoodDatabase", "food_database"]
