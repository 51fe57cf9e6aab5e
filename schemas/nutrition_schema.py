"""Schemas for body metrics, nutrition targets and macro reconciliation."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Five ordered activity tiers; each maps to a fixed TDEE multiplier."""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    EXTREMELY_ACTIVE = "extremely_active"


class Goal(str, Enum):
    GAIN_MUSCLE = "gain_muscle"
    LOSE_FAT = "lose_fat"
    MAINTAIN = "maintain"


class BMICategory(str, Enum):
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"


class UserMetrics(BaseModel):
    """Body metrics used as calculator input.

    Only positivity is enforced here. The supported ranges are checked by
    `NutritionCalculator.validate_user_metrics` so that every violation can be
    reported together.
    """

    model_config = ConfigDict(frozen=True)

    weight: float = Field(..., gt=0, examples=[55.0], description="Weight in kilograms (30-200)")
    height: float = Field(..., gt=0, examples=[164.0], description="Height in centimeters (100-250)")
    age: int = Field(..., gt=0, examples=[20], description="Age in years (10-100)")
    gender: Gender = Field(..., examples=["female"], description="Gender (male/female)")
    activity_level: ActivityLevel = Field(..., examples=["moderately_active"], description="Activity level: sedentary, lightly_active, moderately_active, very_active, extremely_active")
    goal: Goal = Field(Goal.MAINTAIN, examples=["lose_fat"], description="Goal: gain_muscle, lose_fat, maintain")
    body_fat: Optional[float] = Field(None, ge=0, le=100, examples=[22.5], description="Body fat percentage (stored, not used by the calculation)")


class PartialUserMetrics(BaseModel):
    """Any subset of the metrics, used for partial-update validation."""

    weight: Optional[float] = Field(None, examples=[70.0])
    height: Optional[float] = Field(None, examples=[175.0])
    age: Optional[int] = Field(None, examples=[30])
    gender: Optional[Gender] = None
    activity_level: Optional[ActivityLevel] = None
    goal: Optional[Goal] = None
    body_fat: Optional[float] = None


class NutritionTargets(BaseModel):
    """Daily calorie and macro targets in kcal and grams."""

    model_config = ConfigDict(frozen=True)

    calories: int
    protein: int
    carbs: int
    fat: int


class MacroIntake(BaseModel):
    """Amounts consumed so far, usually the sum of today's food logs."""

    calories: float = Field(0, ge=0, examples=[850])
    protein: float = Field(0, ge=0, examples=[42.5])
    carbs: float = Field(0, ge=0, examples=[96.0])
    fat: float = Field(0, ge=0, examples=[28.3])


class MacroDeficit(BaseModel):
    """What is still missing from the targets; never negative."""

    calories: float = Field(..., ge=0, examples=[1280])
    protein: float = Field(..., ge=0, examples=[34.0])
    carbs: float = Field(..., ge=0, examples=[190.0])
    fat: float = Field(..., ge=0, examples=[42.0])


class MetricsValidationResponse(BaseModel):
    valid: bool
    violations: List[str]


class BMIRequest(BaseModel):
    weight: float = Field(..., gt=0, examples=[70.0])
    height: float = Field(..., gt=0, examples=[175.0])


class BMIResponse(BaseModel):
    bmi: float
    category: BMICategory


class NutritionBreakdown(BaseModel):
    """Everything the profile screen shows for a set of metrics."""

    bmi: float
    bmi_category: BMICategory
    bmr: int
    tdee: int
    targets: NutritionTargets


class DeficitRequest(BaseModel):
    targets: NutritionTargets
    consumed: MacroIntake
