# -*- coding: utf-8 -*-
"""Auth — secret hashing + FastAPI helpers for the injected demo identity."""

from __future__ import annotations

import base64
import hashlib
import hmac
import os

from fastapi import Depends, HTTPException, Request

from ..store import RecordStore
from .models import User

# Secret hashing (stdlib pbkdf2_hmac).
_PBKDF2_ALG = "sha256"
_PBKDF2_ITERATIONS = 200_000


def _b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _b64url_decode(data: str) -> bytes:
    pad = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode((data + pad).encode("ascii"))


def hash_password(password: str) -> str:
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac(_PBKDF2_ALG, password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    return f"pbkdf2_{_PBKDF2_ALG}${_PBKDF2_ITERATIONS}${_b64url_encode(salt)}${_b64url_encode(dk)}"


def verify_password(password: str, password_hash: str) -> bool:
    try:
        scheme, iter_s, salt_b64, dk_b64 = password_hash.split("$", 3)
        if not scheme.startswith("pbkdf2_"):
            return False
        alg = scheme.split("_", 1)[1]
        iterations = int(iter_s)
        salt = _b64url_decode(salt_b64)
        expected = _b64url_decode(dk_b64)
        actual = hashlib.pbkdf2_hmac(alg, password.encode("utf-8"), salt, iterations)
        return hmac.compare_digest(actual, expected)
    except (ValueError, TypeError, OverflowError):
        return False


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_current_user(request: Request, store: RecordStore = Depends(get_store)) -> User:
    # Cached on the request for downstream dependencies.
    user = getattr(request.state, "user", None)
    if user:
        return user

    user = store.get_user(request.app.state.demo_user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    request.state.user = user
    return user
