"""Daily intake aggregation.

Sums logged foods per calendar day and reconciles a day's totals against
nutrition targets through the calculator's deficit operation.
"""

from __future__ import annotations

import datetime as dt
from typing import List, Optional

import pandas as pd

from core.logger import get_logger
from schemas.food_schema import DailyIntakeSummary, DailyTotals, FoodLogEntry
from schemas.nutrition_schema import MacroIntake, NutritionTargets
from services.nutrition_calculator import NutritionCalculator, nutrition_calculator, round_half_up

logger = get_logger("services.intake_tracker")

MACROS = ["calories", "protein", "carbs", "fat"]


class IntakeTracker:
    """Aggregates food log entries into per-day totals."""

    def __init__(self, calculator: NutritionCalculator | None = None):
        self._calc = calculator or nutrition_calculator

    def _frame(self, entries: List[FoodLogEntry]) -> pd.DataFrame:
        rows = [{**{k: getattr(e, k) for k in MACROS}, "date": e.logged_at.date()} for e in entries]
        return pd.DataFrame(rows, columns=MACROS + ["date"])

    def daily_totals(self, entries: List[FoodLogEntry]) -> List[DailyTotals]:
        """Return one totals row per day that has entries, oldest first."""
        if not entries:
            return []
        df = self._frame(entries)
        grouped = df.groupby("date")
        sums = grouped[MACROS].sum()
        counts = grouped.size()
        out = []
        for day, row in sums.sort_index().iterrows():
            out.append(DailyTotals(
                date=day,
                calories=float(row["calories"]),
                protein=float(row["protein"]),
                carbs=float(row["carbs"]),
                fat=float(row["fat"]),
                entries=int(counts[day]),
            ))
        return out

    def summarize_day(
        self,
        entries: List[FoodLogEntry],
        day: dt.date,
        targets: Optional[NutritionTargets] = None,
    ) -> DailyIntakeSummary:
        """Totals for `day`, plus deficit and calorie progress when targets are given."""
        totals = next((t for t in self.daily_totals(entries) if t.date == day), None)
        if totals is None:
            consumed = MacroIntake()
            count = 0
        else:
            consumed = MacroIntake(
                calories=totals.calories,
                protein=totals.protein,
                carbs=totals.carbs,
                fat=totals.fat,
            )
            count = totals.entries

        deficit = progress = None
        if targets is not None:
            deficit = self._calc.calculate_macro_deficit(targets, consumed)
            progress = self.calorie_progress(consumed.calories, targets.calories)
        logger.debug("Summary for %s: %s entries, %s kcal", day, count, consumed.calories)
        return DailyIntakeSummary(
            date=day,
            entries=count,
            consumed=consumed,
            targets=targets,
            deficit=deficit,
            calorie_progress=progress,
        )

    @staticmethod
    def calorie_progress(consumed: float, target: float) -> float:
        """Percent of the calorie target eaten, capped at 100."""
        if target <= 0:
            return 0.0
        return round_half_up(min(100.0, consumed / target * 100), 1)


intake_tracker = IntakeTracker()
__all__ = ["IntakeTracker", "intake_tracker"]
