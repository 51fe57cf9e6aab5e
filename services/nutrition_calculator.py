"""Nutrition calculation helpers.

Turns body metrics into daily targets: BMI, BMR (Mifflin-St Jeor), TDEE and a
goal-dependent calorie and macro split. Everything here is a pure function of
its arguments, so one shared instance serves all requests.
"""

import math
from typing import Any, Dict, List, Mapping, Union

from core.exceptions import UnsupportedValueError
from core.logger import get_logger
from schemas.nutrition_schema import (
    ActivityLevel,
    BMICategory,
    Gender,
    Goal,
    MacroDeficit,
    MacroIntake,
    NutritionBreakdown,
    NutritionTargets,
    PartialUserMetrics,
    UserMetrics,
)

logger = get_logger("services.nutrition_calculator")

ACTIVITY_FACTORS: Dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREMELY_ACTIVE: 1.9,
}

# calorie adjustment (kcal), protein (g per kg bodyweight), share of calories from fat
GOAL_STRATEGIES: Dict[Goal, Dict[str, float]] = {
    Goal.GAIN_MUSCLE: {"calorie_adjustment": 400, "protein_per_kg": 1.8, "fat_ratio": 0.20},
    Goal.LOSE_FAT: {"calorie_adjustment": -500, "protein_per_kg": 2.0, "fat_ratio": 0.25},
    Goal.MAINTAIN: {"calorie_adjustment": 0, "protein_per_kg": 1.2, "fat_ratio": 0.25},
}

# field -> (min, max, unit), inclusive bounds
VALIDATION_RANGES = {
    "weight": (30, 200, "kg"),
    "height": (100, 250, "cm"),
    "age": (10, 100, "years"),
}

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with ties going up (2.5 -> 3), unlike the built-in `round`."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _round_int(value: float) -> int:
    return int(round_half_up(value))


class NutritionCalculator:
    """Class-based nutrition calculator used across the app."""

    def calculate_bmi(self, weight: float, height: float) -> float:
        """Calculate BMI from weight in kg and height in cm, to one decimal."""
        height_m = height / 100.0
        return round_half_up(weight / (height_m ** 2), 1)

    def categorize_bmi(self, bmi: float) -> BMICategory:
        """Map a BMI value onto its category using half-open bands."""
        if bmi < 18.5:
            return BMICategory.UNDERWEIGHT
        if bmi < 24:
            return BMICategory.NORMAL
        if bmi < 28:
            return BMICategory.OVERWEIGHT
        return BMICategory.OBESE

    def calculate_bmr(self, metrics: UserMetrics) -> int:
        """Calculate BMR using the Mifflin-St Jeor equation.

        Male: 10W + 6.25H - 5A + 5
        Female: 10W + 6.25H - 5A - 161

        `body_fat` is ignored even when present.
        """
        try:
            gender = Gender(metrics.gender)
        except ValueError:
            raise UnsupportedValueError("gender", metrics.gender)

        bmr = 10 * metrics.weight + 6.25 * metrics.height - 5 * metrics.age
        if gender == Gender.MALE:
            bmr += 5
        else:
            bmr -= 161
        return _round_int(bmr)

    def activity_factor(self, activity_level: Union[ActivityLevel, str]) -> float:
        """Return the TDEE multiplier for an activity tier.

        Raises:
            UnsupportedValueError: If the tier is not one of the five known ones.
        """
        try:
            return ACTIVITY_FACTORS[ActivityLevel(activity_level)]
        except (ValueError, KeyError):
            raise UnsupportedValueError("activity_level", activity_level)

    def goal_strategy(self, goal: Union[Goal, str]) -> Dict[str, float]:
        """Return calorie adjustment, protein per kg and fat ratio for a goal.

        Raises:
            UnsupportedValueError: If the goal is unknown.
        """
        try:
            return GOAL_STRATEGIES[Goal(goal)]
        except (ValueError, KeyError):
            raise UnsupportedValueError("goal", goal)

    def calculate_tdee(self, metrics: UserMetrics) -> int:
        """Estimate TDEE as BMR times the activity multiplier."""
        factor = self.activity_factor(metrics.activity_level)
        tdee = _round_int(self.calculate_bmr(metrics) * factor)
        logger.debug("TDEE calculated: %s", tdee)
        return tdee

    def calculate_nutrition_targets(self, metrics: UserMetrics) -> NutritionTargets:
        """Derive daily calorie and macro targets for the user's goal.

        Macros are filled in priority order: protein from bodyweight first,
        then fat as a share of calories, and carbohydrates take whatever
        energy is left. A negative remainder yields zero carbs rather than
        an error.
        """
        tdee = self.calculate_tdee(metrics)
        strategy = self.goal_strategy(metrics.goal)

        target_calories = tdee + strategy["calorie_adjustment"]

        protein = _round_int(metrics.weight * strategy["protein_per_kg"])
        protein_calories = protein * KCAL_PER_G_PROTEIN

        fat_calories = target_calories * strategy["fat_ratio"]
        fat = _round_int(fat_calories / KCAL_PER_G_FAT)

        remaining_calories = target_calories - protein_calories - fat_calories
        carbs = max(0, _round_int(remaining_calories / KCAL_PER_G_CARBS))

        targets = NutritionTargets(
            calories=_round_int(target_calories),
            protein=protein,
            carbs=carbs,
            fat=fat,
        )
        logger.debug("Targets for goal %s: %s", metrics.goal, targets)
        return targets

    def nutrition_breakdown(self, metrics: UserMetrics) -> NutritionBreakdown:
        """Collect BMI, BMR, TDEE and targets in one object for display."""
        bmi = self.calculate_bmi(metrics.weight, metrics.height)
        return NutritionBreakdown(
            bmi=bmi,
            bmi_category=self.categorize_bmi(bmi),
            bmr=self.calculate_bmr(metrics),
            tdee=self.calculate_tdee(metrics),
            targets=self.calculate_nutrition_targets(metrics),
        )

    def validate_user_metrics(
        self, metrics: Union[PartialUserMetrics, UserMetrics, Mapping[str, Any]]
    ) -> List[str]:
        """Check whichever of weight, height and age are present.

        Returns every violation found as a readable message, or an empty list
        when all present values are inside their ranges. Missing fields are
        not checked, so partial updates can be validated on their own.
        """
        if isinstance(metrics, Mapping):
            values = dict(metrics)
        else:
            values = metrics.model_dump()

        errors = []
        for field, (low, high, unit) in VALIDATION_RANGES.items():
            value = values.get(field)
            if value is None:
                continue
            if value < low or value > high:
                errors.append(f"{field.capitalize()} must be between {low} and {high} {unit}")
        return errors

    def calculate_macro_deficit(self, targets: NutritionTargets, consumed: MacroIntake) -> MacroDeficit:
        """Return what is still missing for the day, floored at zero per macro."""
        return MacroDeficit(
            calories=max(0, targets.calories - consumed.calories),
            protein=max(0, targets.protein - consumed.protein),
            carbs=max(0, targets.carbs - consumed.carbs),
            fat=max(0, targets.fat - consumed.fat),
        )


# export singleton
nutrition_calculator = NutritionCalculator()
__all__ = ["NutritionCalculator", "nutrition_calculator", "round_half_up", "ACTIVITY_FACTORS", "GOAL_STRATEGIES"]
