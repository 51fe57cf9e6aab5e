"""Food catalogue API router.

Listing, search and portion scaling over the reference catalogue, plus the
low-confidence fallback estimates the photo flow uses when recognition fails.
"""

from typing import List, Optional

from fastapi import APIRouter, Query

from core.config import SUGGESTION_COUNT
from core.exceptions import NotFoundError
from core.logger import get_logger
from schemas.food_schema import FoodItem, FoodNutrition, RecognizedFood
from services.food_database import food_database

logger = get_logger("api.foods")
router = APIRouter(prefix="/api", tags=["foods"])


@router.get("/foods", response_model=List[FoodItem])
def list_foods(q: Optional[str] = None, tag: Optional[str] = None):
    """Return catalogue foods, optionally narrowed by search text or tag.

    Args:
        q: Case-insensitive text matched against names, aliases and tags.
        tag: Exact tag such as `high_protein` or `canteen`.

    Returns:
        List of `FoodItem` objects.
    """
    foods = food_database.find_foods(q, tag)
    logger.info("Listing foods q=%r tag=%r -> %s", q, tag, len(foods))
    return foods


@router.get("/foods/fallback", response_model=List[RecognizedFood])
def fallback_foods(scenario: Optional[str] = None, count: int = Query(min(2, SUGGESTION_COUNT), ge=1, le=10)):
    """Catalogue-based estimates returned when a photo cannot be analysed."""
    return food_database.fallback_recognition(scenario, count)


@router.get("/foods/{food_id}", response_model=FoodItem)
def get_food(food_id: str):
    food = food_database.get_food_by_id(food_id)
    if food is None:
        raise NotFoundError("Food", food_id)
    return food


@router.get("/foods/{food_id}/nutrition", response_model=FoodNutrition)
def get_food_nutrition(food_id: str, weight_g: Optional[float] = Query(None, gt=0)):
    """Scale a food's nutrition to `weight_g`, or to one serving if omitted.

    Raises:
        NotFoundError: If the food id is unknown.
    """
    food = food_database.get_food_by_id(food_id)
    if food is None:
        raise NotFoundError("Food", food_id)
    return food_database.calculate_nutrition(food, weight_g or food.serving_size_g)
