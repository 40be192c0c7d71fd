# -*- coding: utf-8 -*-
"""Auth — demo identity bootstrap."""

from __future__ import annotations

import logging

from ..store import RecordStore
from .models import User
from .security import hash_password, verify_password

logger = logging.getLogger(__name__)


def ensure_demo_user(store: RecordStore, *, handle: str, secret: str) -> User:
    """Return the demo identity, creating it (and its default settings) if missing."""
    user = store.get_user_by_handle(handle)
    if user is None:
        user = store.create_user(handle, hash_password(secret))
        logger.info("Seeded demo user %r (id=%d)", handle, user.id)
    elif not verify_password(secret, user.secret):
        logger.warning("Demo user %r exists with a different secret", handle)

    if store.get_settings(user.id) is None:
        store.put_settings(user.id, {})
    return user
