# -*- coding: utf-8 -*-
"""Food — daily carbohydrate / calorie aggregation."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from .models import FoodDay, FoodEntry, FoodSummaryResponse, FoodTotals


def summarize_food_days(
    entries: List[FoodEntry],
    *,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> FoodSummaryResponse:
    per_day: Dict[str, Dict[str, Any]] = {}
    total_carbs = 0.0
    total_calories = 0

    for entry in entries:
        day = entry.consumed_at.date().isoformat()
        if day not in per_day:
            per_day[day] = {"carbs": 0.0, "calories": 0, "by_meal": {}, "entry_count": 0}
        bucket = per_day[day]
        bucket["entry_count"] += 1
        bucket["carbs"] += entry.carbohydrates
        bucket["calories"] += entry.calories or 0
        meal = entry.meal_type.value
        bucket["by_meal"][meal] = bucket["by_meal"].get(meal, 0.0) + entry.carbohydrates

        total_carbs += entry.carbohydrates
        total_calories += entry.calories or 0

    days: List[FoodDay] = []
    for day in sorted(per_day.keys()):
        bucket = per_day[day]
        days.append(
            FoodDay(
                date=day,
                totals=FoodTotals(
                    carbohydrates_g=round(bucket["carbs"], 1),
                    calories_kcal=bucket["calories"],
                ),
                carbs_by_meal={k: round(v, 1) for k, v in bucket["by_meal"].items()},
                entry_count=bucket["entry_count"],
            )
        )

    return FoodSummaryResponse(
        start=start,
        end=end,
        totals=FoodTotals(carbohydrates_g=round(total_carbs, 1), calories_kcal=total_calories),
        days=days,
    )
