# -*- coding: utf-8 -*-
"""User settings — Pydantic models."""

from __future__ import annotations

import re
from typing import Any, Dict, Optional, Tuple

from pydantic import Field, field_validator

from ..models import OwnedRecord, PartialUpdate, UtcDatetime

SETTINGS_DEFAULTS: Dict[str, Any] = {
    "theme": "light",
    "language": "bn",
    "glucose_unit": "mmol/L",
    "target_range": "4.0-7.0",
    "reminders_enabled": True,
}

_RANGE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*-\s*(\d+(?:\.\d+)?)\s*$")


def parse_target_range(value: str) -> Optional[Tuple[float, float]]:
    """Parse "4.0-7.0" into (4.0, 7.0); None when malformed or low >= high."""
    m = _RANGE.match(value or "")
    if not m:
        return None
    low, high = float(m.group(1)), float(m.group(2))
    if low >= high:
        return None
    return low, high


class UserSettings(OwnedRecord):
    theme: str
    language: str
    glucose_unit: str
    target_range: str = Field(..., description="low-high, e.g. 4.0-7.0")
    reminders_enabled: bool
    updated_at: UtcDatetime


class UserSettingsUpdate(PartialUpdate):
    theme: Optional[str] = Field(None, pattern=r"^(light|dark)$")
    language: Optional[str] = Field(None, min_length=2, max_length=16, description="e.g. bn, en")
    glucose_unit: Optional[str] = Field(None, pattern=r"^(mmol/L|mg/dL)$")
    target_range: Optional[str] = None
    reminders_enabled: Optional[bool] = None

    @field_validator("target_range")
    @classmethod
    def _target_range(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        parsed = parse_target_range(value)
        if parsed is None:
            raise ValueError("target_range must look like 'low-high' with low < high")
        return value.replace(" ", "")
