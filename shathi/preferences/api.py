# -*- coding: utf-8 -*-
"""User settings — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..auth.models import User
from ..auth.security import get_current_user, get_store
from ..store import RecordStore
from .models import UserSettings, UserSettingsUpdate

router = APIRouter(prefix="/api/user-settings", tags=["Settings"])


@router.get("", response_model=UserSettings, summary="Get user settings")
def get_user_settings(user: User = Depends(get_current_user), store: RecordStore = Depends(get_store)):
    prefs = store.get_settings(user.id)
    if prefs is None:
        raise HTTPException(status_code=404, detail="User settings not found")
    return prefs


@router.put("", response_model=UserSettings, summary="Update user settings (created with defaults if missing)")
def put_user_settings(
    request: UserSettingsUpdate,
    user: User = Depends(get_current_user),
    store: RecordStore = Depends(get_store),
):
    return store.put_settings(user.id, request)
