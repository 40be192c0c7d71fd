# -*- coding: utf-8 -*-
"""Medicines — API endpoints (schedule, intake records, reference catalog)."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.models import User
from ..auth.security import get_current_user, get_store
from ..models import CatalogCategory, SuccessResponse
from ..query import Window, time_window
from ..store import RecordStore
from .catalog import medicine_categories, search_medicines
from .models import (
    AdherenceSummary,
    CatalogMedicine,
    Medicine,
    MedicineCreate,
    MedicineRecord,
    MedicineRecordCreate,
    MedicineUpdate,
)
from .storage import summarize_adherence

router = APIRouter(prefix="/api/medicines", tags=["Medicines"])
records_router = APIRouter(prefix="/api/medicine-records", tags=["Medicines"])
catalog_router = APIRouter(prefix="/api/medicine-catalog", tags=["Medicines"])


def _owned_or_404(store: RecordStore, medicine_id: int, user: User) -> Medicine:
    medicine = store.get_medicine(medicine_id)
    if medicine is None or medicine.owner_id != user.id:
        raise HTTPException(status_code=404, detail="Medicine not found")
    return medicine


@router.get("", response_model=List[Medicine], summary="List active medicines")
def list_medicines(user: User = Depends(get_current_user), store: RecordStore = Depends(get_store)):
    return store.list_medicines(user.id)


@router.post("", response_model=Medicine, summary="Create a medicine")
def create_medicine(
    request: MedicineCreate,
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
):
    return store.create_medicine(user.id, request)


@router.put("/{medicine_id}", response_model=Medicine, summary="Update a medicine")
def update_medicine(
    medicine_id: int,
    request: MedicineUpdate,
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
):
    _owned_or_404(store, medicine_id, user)
    medicine = store.update_medicine(medicine_id, request)
    if medicine is None:
        raise HTTPException(status_code=404, detail="Medicine not found")
    return medicine


@router.delete("/{medicine_id}", response_model=SuccessResponse, summary="Deactivate a medicine (soft delete)")
def delete_medicine(
    medicine_id: int,
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
):
    _owned_or_404(store, medicine_id, user)
    if not store.delete_medicine(medicine_id):
        raise HTTPException(status_code=404, detail="Medicine not found")
    return SuccessResponse()


@records_router.get("", response_model=List[MedicineRecord], summary="List medicine intake records")
def list_records(
    limit: Optional[int] = Query(default=None, ge=1),
    window: Window = Depends(time_window),
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
):
    start, end = window
    return store.list_medicine_records(user.id, start=start, end=end, limit=limit)


@records_router.get("/summary", response_model=AdherenceSummary, summary="Medicine adherence summary")
def records_summary(
    window: Window = Depends(time_window),
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
):
    start, end = window
    records = store.list_medicine_records(user.id, start=start, end=end)
    return summarize_adherence(records, store.get_medicine, start=start, end=end)


@records_router.post("", response_model=MedicineRecord, summary="Record a medicine intake")
def create_record(
    request: MedicineRecordCreate,
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
):
    return store.create_medicine_record(user.id, request)


@catalog_router.get("", response_model=List[CatalogMedicine], summary="Search the reference medicine catalog")
def search_catalog(
    q: Optional[str] = Query(default=None, max_length=100, description="substring of the medicine name"),
    category: Optional[str] = Query(default=None, description="insulin, tablets or combinations"),
):
    return search_medicines(q, category)


@catalog_router.get("/categories", response_model=List[CatalogCategory], summary="List medicine catalog categories")
def catalog_categories():
    return medicine_categories()
