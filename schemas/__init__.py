"""Pydantic schema package for request and response models."""

from .nutrition_schema import (
    ActivityLevel,
    BMICategory,
    Gender,
    Goal,
    MacroDeficit,
    MacroIntake,
    NutritionTargets,
    PartialUserMetrics,
    UserMetrics,
)
from .food_schema import FoodItem, FoodLogEntry, FoodNutrition, RecognizedFood, Scenario

__all__ = [
    "ActivityLevel",
    "BMICategory",
    "Gender",
    "Goal",
    "MacroDeficit",
    "MacroIntake",
    "NutritionTargets",
    "PartialUserMetrics",
    "UserMetrics",
    "FoodItem",
    "FoodLogEntry",
    "FoodNutrition",
    "RecognizedFood",
    "Scenario",
]
