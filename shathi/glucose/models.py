# -*- coding: utf-8 -*-
"""Glucose domain — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, Field

from ..models import OwnedRecord, PartialUpdate, UtcDatetime


class MeasurementType(str, Enum):
    before_meal = "before_meal"
    after_meal = "after_meal"
    bedtime = "bedtime"
    other = "other"


class GlucoseReading(OwnedRecord):
    level: float = Field(..., description="mmol/L")
    measured_at: UtcDatetime
    measurement_type: MeasurementType
    notes: Optional[str] = None
    created_at: UtcDatetime


class GlucoseReadingCreate(BaseModel):
    level: float = Field(..., gt=0, description="mmol/L")
    measured_at: UtcDatetime = Field(..., description="ISO8601 timestamp")
    measurement_type: MeasurementType
    notes: Optional[str] = Field(None, max_length=2000)


class GlucoseReadingUpdate(PartialUpdate):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"notes"})

    level: Optional[float] = Field(None, gt=0)
    measured_at: Optional[UtcDatetime] = None
    measurement_type: Optional[MeasurementType] = None
    notes: Optional[str] = Field(None, max_length=2000)


class GlucoseSummary(BaseModel):
    start: Optional[UtcDatetime] = None
    end: Optional[UtcDatetime] = None
    target_low: float
    target_high: float
    count: int = Field(0, ge=0)
    average: Optional[float] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    below_range: int = Field(0, ge=0)
    in_range: int = Field(0, ge=0)
    above_range: int = Field(0, ge=0)
    very_high: int = Field(0, ge=0, description="above 10 mmol/L")
    in_range_pct: Optional[float] = Field(None, ge=0, le=100)
    latest: Optional[GlucoseReading] = None
