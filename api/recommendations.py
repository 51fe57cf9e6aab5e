"""Recommendation-related endpoints.

Suggests catalogue foods that close the remaining macro gap and serves the
scenario knowledge base the diet assistant draws on.
"""

from fastapi import APIRouter

from core.logger import get_logger
from schemas.food_schema import RecommendationRequest, RecommendationResponse, ScenarioAdvice
from services.food_recommender import food_recommender

logger = get_logger("api.recommendations")
router = APIRouter(prefix="/api", tags=["recommendations"])


@router.post("/recommendations", response_model=RecommendationResponse)
def recommend(payload: RecommendationRequest):
    """Return foods ranked by how well they fill the deficit.

    When a scenario is given, candidates are limited to foods available there
    and the scenario advice is attached.
    """
    suggestions = food_recommender.recommend_foods(payload.deficit, payload.scenario, payload.top_k)
    advice = food_recommender.scenario_advice(payload.scenario) if payload.scenario else None
    logger.info(
        "Recommendations scenario=%s -> %s",
        payload.scenario.value if payload.scenario else None,
        [s.food_id for s in suggestions],
    )
    return RecommendationResponse(suggestions=suggestions, advice=advice)


@router.get("/scenarios/{scenario}", response_model=ScenarioAdvice)
def get_scenario_advice(scenario: str):
    """Return recommended items, tips and items to avoid for a scenario.

    Raises:
        NotFoundError: If the scenario is unknown.
    """
    return food_recommender.scenario_advice(scenario)
