"""Schemas for catalogue foods, food logs and food suggestions."""

import datetime as dt
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from .nutrition_schema import MacroDeficit, MacroIntake, NutritionTargets


class Scenario(str, Enum):
    """Where the user is about to eat; drives suggestions and advice."""

    CONVENIENCE_STORE = "convenience_store"
    CANTEEN = "canteen"
    TAKEOUT = "takeout"


class Per100g(BaseModel):
    calories: float
    protein: float
    carbs: float
    fat: float


class FoodItem(BaseModel):
    """Reference food with nutrition per 100 g and a standard serving size."""

    id: str
    name: str
    category: str
    serving_size_g: float
    per_100g: Per100g
    tags: List[str] = []
    aliases: List[str] = []


class FoodNutrition(BaseModel):
    """Nutrition of a food scaled to a given weight."""

    food_id: str
    weight_g: float
    calories: int
    protein: float
    carbs: float
    fat: float


class RecognizedFood(BaseModel):
    """Food estimate in the same shape the photo analysis produces."""

    name: str
    weight_g: float
    calories: int
    protein: float
    carbs: float
    fat: float
    confidence: float = Field(..., ge=0, le=1)
    tips: str = ""


class FoodLogEntry(BaseModel):
    """One logged food as saved after the user confirms a recognition."""

    food_name: str = Field(..., min_length=1, examples=["Chicken breast"])
    calories: float = Field(..., ge=0, examples=[220])
    protein: float = Field(..., ge=0, examples=[46.0])
    carbs: float = Field(..., ge=0, examples=[0.0])
    fat: float = Field(..., ge=0, examples=[3.0])
    weight_g: Optional[float] = Field(None, ge=0, examples=[200])
    context_tag: Optional[str] = Field(None, examples=["convenience_store"])
    confidence: float = Field(1.0, ge=0, le=1, examples=[0.85])
    logged_at: dt.datetime = Field(..., examples=["2026-10-19T12:30:00"])


class DailyTotals(BaseModel):
    date: dt.date
    calories: float
    protein: float
    carbs: float
    fat: float
    entries: int


class IntakeSummaryRequest(BaseModel):
    day: dt.date = Field(..., examples=["2026-10-19"])
    entries: List[FoodLogEntry] = []
    targets: Optional[NutritionTargets] = None


class DailyIntakeSummary(BaseModel):
    """Intake for one day, reconciled against targets when they are known."""

    date: dt.date
    entries: int
    consumed: MacroIntake
    targets: Optional[NutritionTargets] = None
    deficit: Optional[MacroDeficit] = None
    calorie_progress: Optional[float] = None


class FoodSuggestion(BaseModel):
    food_id: str
    name: str
    serving_size_g: float
    calories: int
    protein: float
    carbs: float
    fat: float
    score: float


class ScenarioAdvice(BaseModel):
    scenario: Scenario
    recommended: List[str]
    tips: List[str]
    avoid: List[str]


class RecommendationRequest(BaseModel):
    deficit: MacroDeficit
    scenario: Optional[Scenario] = None
    top_k: int = Field(3, ge=1, le=20)


class RecommendationResponse(BaseModel):
    suggestions: List[FoodSuggestion]
    advice: Optional[ScenarioAdvice] = None
