"""Nutrition target API router.

Exposes the calculator: metric validation, BMI, the full target breakdown
and the remaining-macro deficit.
"""

from fastapi import APIRouter

from core.exceptions import ValidationError
from core.logger import get_logger
from schemas.nutrition_schema import (
    BMIRequest,
    BMIResponse,
    DeficitRequest,
    MacroDeficit,
    MetricsValidationResponse,
    NutritionBreakdown,
    PartialUserMetrics,
    UserMetrics,
)
from services.nutrition_calculator import nutrition_calculator

logger = get_logger("api.nutrition")
router = APIRouter(prefix="/api", tags=["nutrition"])


@router.post("/metrics/validate", response_model=MetricsValidationResponse)
def validate_metrics(payload: PartialUserMetrics):
    """Report every out-of-range field in a (possibly partial) metrics form."""
    violations = nutrition_calculator.validate_user_metrics(payload)
    return MetricsValidationResponse(valid=not violations, violations=violations)


@router.post("/bmi", response_model=BMIResponse)
def calculate_bmi(payload: BMIRequest):
    bmi = nutrition_calculator.calculate_bmi(payload.weight, payload.height)
    return BMIResponse(bmi=bmi, category=nutrition_calculator.categorize_bmi(bmi))


@router.post("/targets", response_model=NutritionBreakdown)
def calculate_targets(payload: UserMetrics):
    """Compute BMI, BMR, TDEE and daily targets for a full set of metrics.

    Args:
        payload: `UserMetrics` with body measurements, activity level and goal.

    Returns:
        `NutritionBreakdown` with the intermediate values and the targets.

    Raises:
        ValidationError: If weight, height or age is outside its range. All
            violations are listed in the error details.
    """
    violations = nutrition_calculator.validate_user_metrics(payload)
    if violations:
        raise ValidationError("Invalid body metrics", violations=violations)

    breakdown = nutrition_calculator.nutrition_breakdown(payload)
    logger.info(
        "Targets computed: goal=%s activity=%s calories=%s",
        payload.goal.value,
        payload.activity_level.value,
        breakdown.targets.calories,
    )
    return breakdown


@router.post("/deficit", response_model=MacroDeficit)
def calculate_deficit(payload: DeficitRequest):
    return nutrition_calculator.calculate_macro_deficit(payload.targets, payload.consumed)
