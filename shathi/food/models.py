# -*- coding: utf-8 -*-
"""Food — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, Dict, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models import OwnedRecord, PartialUpdate, UtcDatetime


class MealType(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"


class FoodEntry(OwnedRecord):
    food_name: str
    portion: str
    carbohydrates: float = Field(..., description="grams")
    calories: Optional[int] = None
    meal_type: MealType
    consumed_at: UtcDatetime
    created_at: UtcDatetime


class FoodEntryCreate(BaseModel):
    food_name: str = Field(..., min_length=1, max_length=200, description="e.g. 'rice', 'roti'")
    portion: str = Field(..., min_length=1, max_length=200, description="Human-readable portion, e.g. '1 cup'")
    carbohydrates: float = Field(..., ge=0, description="grams")
    calories: Optional[int] = Field(None, ge=0)
    meal_type: MealType
    consumed_at: UtcDatetime = Field(..., description="ISO8601 timestamp")


class FoodEntryUpdate(PartialUpdate):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"calories"})

    food_name: Optional[str] = Field(None, min_length=1, max_length=200)
    portion: Optional[str] = Field(None, min_length=1, max_length=200)
    carbohydrates: Optional[float] = Field(None, ge=0)
    calories: Optional[int] = Field(None, ge=0)
    meal_type: Optional[MealType] = None
    consumed_at: Optional[UtcDatetime] = None


class FoodTotals(BaseModel):
    carbohydrates_g: float = Field(0.0, ge=0)
    calories_kcal: int = Field(0, ge=0)


class FoodDay(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD")
    totals: FoodTotals
    carbs_by_meal: Dict[str, float] = Field(default_factory=dict)
    entry_count: int = Field(0, ge=0)


class FoodSummaryResponse(BaseModel):
    start: Optional[UtcDatetime] = None
    end: Optional[UtcDatetime] = None
    totals: FoodTotals
    days: List[FoodDay]


class CatalogFood(BaseModel):
    """Reference food with typical carbohydrate and calorie content per portion."""

    model_config = ConfigDict(frozen=True)

    name: str
    category: str
    portion: str
    carbohydrates: float = Field(..., ge=0, description="grams per portion")
    calories: int = Field(..., ge=0, description="kcal per portion")
