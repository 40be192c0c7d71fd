# -*- coding: utf-8 -*-
"""Auth — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from .models import User, UserPublic
from .security import get_current_user

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.get("/me", response_model=UserPublic, summary="Get current user")
def me(user: User = Depends(get_current_user)):
    return UserPublic(id=user.id, handle=user.handle, created_at=user.created_at)
