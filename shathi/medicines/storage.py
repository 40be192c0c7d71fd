# -*- coding: utf-8 -*-
"""Medicines — adherence aggregation over intake records."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Dict, List, Optional

from .models import AdherenceSummary, Medicine, MedicineAdherence, MedicineRecord


def summarize_adherence(
    records: List[MedicineRecord],
    lookup_medicine: Callable[[int], Optional[Medicine]],
    *,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> AdherenceSummary:
    """Count taken / on-time doses overall and per medicine.

    ``lookup_medicine`` resolves ids directly, so soft-deleted medicines still
    get their name; ids with no medicine at all are reported with ``name=None``.
    """
    per_medicine: Dict[int, MedicineAdherence] = {}
    on_time = 0
    for record in records:
        bucket = per_medicine.get(record.medicine_id)
        if bucket is None:
            medicine = lookup_medicine(record.medicine_id)
            bucket = MedicineAdherence(
                medicine_id=record.medicine_id,
                name=medicine.name if medicine else None,
            )
            per_medicine[record.medicine_id] = bucket
        bucket.taken += 1
        if record.on_time:
            bucket.on_time += 1
            on_time += 1

    total = len(records)
    return AdherenceSummary(
        start=start,
        end=end,
        total=total,
        on_time=on_time,
        on_time_pct=round(on_time * 100.0 / total, 1) if total else None,
        medicines=[per_medicine[k] for k in sorted(per_medicine.keys())],
    )
