# -*- coding: utf-8 -*-
"""Glucose domain aggregation.

Summarizes an owner's readings over a window against their target range:
count, average, min/max and how many readings fell below, inside or above the
range. Bounds are inclusive, so a reading equal to the low or high end counts
as in range. Readings above 10 mmol/L are also counted as very high,
independent of the target range.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from ..preferences.models import SETTINGS_DEFAULTS, parse_target_range
from .models import GlucoseReading, GlucoseSummary

DEFAULT_TARGET_RANGE = parse_target_range(SETTINGS_DEFAULTS["target_range"])

# mmol/L
VERY_HIGH_LEVEL = 10.0


def summarize_readings(
    readings: List[GlucoseReading],
    *,
    target_range: str,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> GlucoseSummary:
    # Malformed ranges fall back to the default band.
    low, high = parse_target_range(target_range) or DEFAULT_TARGET_RANGE

    below = inside = above = very_high = 0
    for r in readings:
        if r.level < low:
            below += 1
        elif r.level > high:
            above += 1
        else:
            inside += 1
        if r.level > VERY_HIGH_LEVEL:
            very_high += 1

    count = len(readings)
    levels = [r.level for r in readings]
    latest = max(readings, key=lambda r: (r.measured_at, r.id)) if readings else None
    return GlucoseSummary(
        start=start,
        end=end,
        target_low=low,
        target_high=high,
        count=count,
        average=round(sum(levels) / count, 1) if count else None,
        minimum=min(levels) if levels else None,
        maximum=max(levels) if levels else None,
        below_range=below,
        in_range=inside,
        above_range=above,
        very_high=very_high,
        in_range_pct=round(inside * 100.0 / count, 1) if count else None,
        latest=latest,
    )
