"""Daily intake API router."""

from fastapi import APIRouter

from core.logger import get_logger
from schemas.food_schema import DailyIntakeSummary, IntakeSummaryRequest
from services.intake_tracker import intake_tracker

logger = get_logger("api.intake")
router = APIRouter(prefix="/api/intake", tags=["intake"])


@router.post("/summary", response_model=DailyIntakeSummary)
def summarize_intake(payload: IntakeSummaryRequest):
    """Sum the day's food logs and compare them with the targets if given.

    Args:
        payload: The day to summarise, the logged entries (any day; others are
            ignored) and optional targets.

    Returns:
        `DailyIntakeSummary` with totals, and deficit plus calorie progress
        when targets are supplied.
    """
    summary = intake_tracker.summarize_day(payload.entries, payload.day, payload.targets)
    logger.info("Intake summary for %s: %s entries", payload.day, summary.entries)
    return summary
