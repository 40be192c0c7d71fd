# -*- coding: utf-8 -*-
"""Glucose domain — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.models import User
from ..auth.security import get_current_user, get_store
from ..models import SuccessResponse
from ..preferences.models import SETTINGS_DEFAULTS
from ..query import Window, time_window
from ..store import RecordStore
from .models import GlucoseReading, GlucoseReadingCreate, GlucoseReadingUpdate, GlucoseSummary
from .storage import summarize_readings

router = APIRouter(prefix="/api/glucose-readings", tags=["Glucose"])


def _owned_or_404(store: RecordStore, reading_id: int, user: User) -> GlucoseReading:
    reading = store.get_glucose_reading(reading_id)
    if reading is None or reading.owner_id != user.id:
        raise HTTPException(status_code=404, detail="Glucose reading not found")
    return reading


@router.get("", response_model=List[GlucoseReading], summary="List glucose readings (newest first)")
def list_readings(
    limit: Optional[int] = Query(default=None, ge=1),
    window: Window = Depends(time_window),
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
):
    start, end = window
    return store.list_glucose_readings(user.id, start=start, end=end, limit=limit)


@router.get("/summary", response_model=GlucoseSummary, summary="Glucose range statistics")
def readings_summary(
    window: Window = Depends(time_window),
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
):
    start, end = window
    readings = store.list_glucose_readings(user.id, start=start, end=end)
    prefs = store.get_settings(user.id)
    target_range = prefs.target_range if prefs else SETTINGS_DEFAULTS["target_range"]
    return summarize_readings(readings, target_range=target_range, start=start, end=end)


@router.post("", response_model=GlucoseReading, summary="Create a glucose reading")
def create_reading(
    request: GlucoseReadingCreate,
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
):
    return store.create_glucose_reading(user.id, request)


@router.put("/{reading_id}", response_model=GlucoseReading, summary="Update a glucose reading")
def update_reading(
    reading_id: int,
    request: GlucoseReadingUpdate,
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
):
    _owned_or_404(store, reading_id, user)
    reading = store.update_glucose_reading(reading_id, request)
    if reading is None:
        raise HTTPException(status_code=404, detail="Glucose reading not found")
    return reading


@router.delete("/{reading_id}", response_model=SuccessResponse, summary="Delete a glucose reading")
def delete_reading(
    reading_id: int,
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
):
    _owned_or_404(store, reading_id, user)
    if not store.delete_glucose_reading(reading_id):
        raise HTTPException(status_code=404, detail="Glucose reading not found")
    return SuccessResponse()
