# -*- coding: utf-8 -*-
"""Auth — Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..models import StoredRecord, UtcDatetime


class User(StoredRecord):
    handle: str = Field(..., min_length=1)
    secret: str = Field(..., description="pbkdf2 hash, never the raw secret")
    created_at: UtcDatetime


class UserPublic(BaseModel):
    id: int
    handle: str
    created_at: UtcDatetime
