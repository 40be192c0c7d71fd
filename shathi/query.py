# -*- coding: utf-8 -*-
"""Shared query-string dependencies for list/summary endpoints."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Tuple

from fastapi import HTTPException, Query

from .models import day_bounds, ensure_utc

Window = Tuple[Optional[datetime], Optional[datetime]]


def time_window(
    day: Optional[date] = Query(default=None, alias="date", description="YYYY-MM-DD, whole UTC day"),
    start: Optional[datetime] = Query(default=None, description="ISO8601, inclusive"),
    end: Optional[datetime] = Query(default=None, description="ISO8601, inclusive"),
) -> Window:
    if day is not None:
        if start is not None or end is not None:
            raise HTTPException(status_code=400, detail="Use either date or start/end, not both")
        return day_bounds(day)
    lo = ensure_utc(start) if start is not None else None
    hi = ensure_utc(end) if end is not None else None
    if lo is not None and hi is not None and lo > hi:
        raise HTTPException(status_code=400, detail="start must not be after end")
    return lo, hi
