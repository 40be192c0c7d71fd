# -*- coding: utf-8 -*-
"""Food — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.models import User
from ..auth.security import get_current_user, get_store
from ..models import CatalogCategory, SuccessResponse
from ..query import Window, time_window
from ..store import RecordStore
from .catalog import food_categories, search_foods
from .models import CatalogFood, FoodEntry, FoodEntryCreate, FoodEntryUpdate, FoodSummaryResponse
from .storage import summarize_food_days

router = APIRouter(prefix="/api/food-entries", tags=["Food"])
catalog_router = APIRouter(prefix="/api/food-catalog", tags=["Food"])


def _owned_or_404(store: RecordStore, entry_id: int, user: User) -> FoodEntry:
    entry = store.get_food_entry(entry_id)
    if entry is None or entry.owner_id != user.id:
        raise HTTPException(status_code=404, detail="Food entry not found")
    return entry


@router.get("", response_model=List[FoodEntry], summary="List food entries (newest first)")
def list_entries(
    limit: Optional[int] = Query(default=None, ge=1),
    window: Window = Depends(time_window),
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
):
    start, end = window
    return store.list_food_entries(user.id, start=start, end=end, limit=limit)


@router.get("/summary", response_model=FoodSummaryResponse, summary="Daily carbohydrate summary")
def entries_summary(
    window: Window = Depends(time_window),
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
):
    start, end = window
    entries = store.list_food_entries(user.id, start=start, end=end)
    return summarize_food_days(entries, start=start, end=end)


@router.post("", response_model=FoodEntry, summary="Create a food entry")
def create_entry(
    request: FoodEntryCreate,
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
):
    return store.create_food_entry(user.id, request)


@router.put("/{entry_id}", response_model=FoodEntry, summary="Update a food entry")
def update_entry(
    entry_id: int,
    request: FoodEntryUpdate,
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
):
    _owned_or_404(store, entry_id, user)
    entry = store.update_food_entry(entry_id, request)
    if entry is None:
        raise HTTPException(status_code=404, detail="Food entry not found")
    return entry


@router.delete("/{entry_id}", response_model=SuccessResponse, summary="Delete a food entry")
def delete_entry(
    entry_id: int,
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
):
    _owned_or_404(store, entry_id, user)
    if not store.delete_food_entry(entry_id):
        raise HTTPException(status_code=404, detail="Food entry not found")
    return SuccessResponse()


@catalog_router.get("", response_model=List[CatalogFood], summary="Search the reference food catalog")
def search_catalog(
    q: Optional[str] = Query(default=None, max_length=100, description="substring of the food name"),
    category: Optional[str] = Query(default=None, description="catalog category key, e.g. 'rice'"),
):
    return search_foods(q, category)


@catalog_router.get("/categories", response_model=List[CatalogCategory], summary="List food catalog categories")
def catalog_categories():
    return food_categories()
