# -*- coding: utf-8 -*-
"""Medicines — Pydantic models."""

from __future__ import annotations

import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import OwnedRecord, PartialUpdate, UtcDatetime

_TIME_SLOT = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class Frequency(str, Enum):
    daily = "daily"
    twice_daily = "twice_daily"
    three_times_daily = "three_times_daily"


def _check_time_slots(value: Optional[List[str]]) -> Optional[List[str]]:
    if value is None:
        return value
    out: List[str] = []
    for slot in value:
        s = slot.strip()
        if not _TIME_SLOT.match(s):
            raise ValueError(f"time slot must be HH:MM, got {slot!r}")
        out.append(s)
    return out


class Medicine(OwnedRecord):
    name: str
    dosage: str
    frequency: Frequency
    time_slots: List[str] = Field(default_factory=list, description="Ordered HH:MM slots")
    active: bool = True
    created_at: UtcDatetime


class MedicineCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    dosage: str = Field(..., min_length=1, max_length=200)
    frequency: Frequency
    time_slots: List[str] = Field(default_factory=list)
    active: bool = True

    @field_validator("time_slots")
    @classmethod
    def _time_slots(cls, value: List[str]) -> List[str]:
        return _check_time_slots(value) or []


class MedicineUpdate(PartialUpdate):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    dosage: Optional[str] = Field(None, min_length=1, max_length=200)
    frequency: Optional[Frequency] = None
    time_slots: Optional[List[str]] = None
    active: Optional[bool] = None

    @field_validator("time_slots")
    @classmethod
    def _time_slots(cls, value: Optional[List[str]]) -> Optional[List[str]]:
        return _check_time_slots(value)


class MedicineRecord(OwnedRecord):
    medicine_id: int
    taken_at: UtcDatetime
    on_time: bool = True
    notes: Optional[str] = None
    created_at: UtcDatetime


class MedicineRecordCreate(BaseModel):
    # Not checked against existing medicines: a record may outlive (or precede) its medicine.
    medicine_id: int = Field(..., ge=1)
    taken_at: UtcDatetime = Field(..., description="ISO8601 timestamp")
    on_time: bool = True
    notes: Optional[str] = Field(None, max_length=2000)


class MedicineAdherence(BaseModel):
    medicine_id: int
    name: Optional[str] = Field(None, description="None when the medicine id is unknown")
    taken: int = Field(0, ge=0)
    on_time: int = Field(0, ge=0)


class AdherenceSummary(BaseModel):
    start: Optional[UtcDatetime] = None
    end: Optional[UtcDatetime] = None
    total: int = Field(0, ge=0)
    on_time: int = Field(0, ge=0)
    on_time_pct: Optional[float] = Field(None, ge=0, le=100)
    medicines: List[MedicineAdherence] = Field(default_factory=list)



class CatalogMedicine(BaseModel):
    """Commonly prescribed diabetes medicine with its usual dose."""

    model_config = ConfigDict(frozen=True)

    name: str
    category: str
    kind: str = Field(..., description="drug class or action, e.g. long-acting insulin")
    common_dose: str
