"""Deficit-driven food recommender.

Represents each catalogue food by the energy its standard serving gets from
protein, carbohydrate and fat, and ranks foods by cosine similarity to the
energy still missing from the day's targets. Foods whose macro profile looks
most like the gap come first.
"""

from typing import List, Optional

import numpy as np
from sklearn.metrics.pairwise import cosine_similarity

from core.exceptions import NotFoundError
from core.logger import get_logger
from data.scenario_knowledge import SCENARIO_KNOWLEDGE
from schemas.food_schema import FoodItem, FoodSuggestion, Scenario, ScenarioAdvice
from schemas.nutrition_schema import MacroDeficit
from services.food_database import FoodDatabase, food_database
from services.nutrition_calculator import KCAL_PER_G_CARBS, KCAL_PER_G_FAT, KCAL_PER_G_PROTEIN

logger = get_logger("services.food_recommender")

_ENERGY = np.array([KCAL_PER_G_PROTEIN, KCAL_PER_G_CARBS, KCAL_PER_G_FAT], dtype=float)


class FoodRecommender:
    """Ranks foods against a macro deficit and serves scenario advice."""

    def __init__(self, foods: FoodDatabase = None):
        self.foods = foods if foods is not None else food_database

    def _vectorize(self, items: List[FoodItem]):
        """Return an (n, 3) matrix of per-serving macro energy and the servings used."""
        servings = [self.foods.calculate_nutrition(f, f.serving_size_g) for f in items]
        grams = np.array([[s.protein, s.carbs, s.fat] for s in servings], dtype=float)
        return grams * _ENERGY, servings

    def recommend_foods(
        self, deficit: MacroDeficit, scenario: Optional[str] = None, top_k: int = 3
    ) -> List[FoodSuggestion]:
        """Return up to `top_k` foods that best match the remaining macros.

        An all-zero deficit means the targets are met and nothing is suggested.
        """
        target = np.array([[deficit.protein, deficit.carbs, deficit.fat]], dtype=float) * _ENERGY
        if not target.any():
            return []

        items = self.foods.scenario_pool(scenario)
        if not items:
            return []

        X, servings = self._vectorize(items)
        scores = cosine_similarity(X, target)[:, 0]
        # stable sort keeps catalogue order between equal scores
        order = sorted(range(len(items)), key=lambda i: -scores[i])

        out = []
        for i in order[:top_k]:
            food, serving = items[i], servings[i]
            out.append(FoodSuggestion(
                food_id=food.id,
                name=food.name,
                serving_size_g=food.serving_size_g,
                calories=serving.calories,
                protein=serving.protein,
                carbs=serving.carbs,
                fat=serving.fat,
                score=round(float(scores[i]), 4),
            ))
        logger.debug("Recommended %s for deficit %s", [s.food_id for s in out], deficit)
        return out

    def scenario_advice(self, scenario: str) -> ScenarioAdvice:
        """Return what to pick, how to order and what to avoid in a scenario.

        Raises:
            NotFoundError: If the scenario has no knowledge base entry.
        """
        try:
            key = Scenario(scenario)
        except ValueError:
            raise NotFoundError("Scenario", scenario)
        entry = SCENARIO_KNOWLEDGE[key.value]
        return ScenarioAdvice(
            scenario=key,
            recommended=list(entry["recommended"]),
            tips=list(entry["tips"]),
            avoid=list(entry["avoid"]),
        )


food_recommender = FoodRecommender()
__all__ = ["FoodRecommender", "food_recommender"]
