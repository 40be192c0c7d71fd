# -*- coding: utf-8 -*-
"""In-memory record store.

Holds every collection of the app (users, glucose readings, medicines,
medicine intake records, food entries, user settings) for the lifetime of the
process. Nothing is persisted.

- All ids come from one counter shared by every collection, so an id is unique
  store-wide and id order is creation order across kinds.
- Records are frozen pydantic snapshots. An update swaps in a new snapshot, so a
  record handed to a caller can never change store state.
- Field contents are not validated here beyond types; payload validation lives
  in the ``*Create`` / ``*Update`` models used by the API layer.
- Every public method runs under one store-wide lock.
"""

from __future__ import annotations

import functools
import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel

from .auth.models import User
from .food.models import FoodEntry, FoodEntryCreate
from .glucose.models import GlucoseReading, GlucoseReadingCreate
from .medicines.models import Medicine, MedicineCreate, MedicineRecord, MedicineRecordCreate
from .models import OwnedRecord, PartialUpdate, StoredRecord, ensure_utc, utc_now
from .preferences.models import SETTINGS_DEFAULTS, UserSettings

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=StoredRecord)
Payload = Union[BaseModel, Mapping[str, Any]]

# Never overwritten by an update.
PROTECTED_FIELDS = frozenset({"id", "owner_id", "created_at"})


class StoreError(Exception):
    """Raised for store failures other than "not found" (which is a None/False result)."""


class DuplicateHandleError(StoreError):
    """Raised when a user handle is already registered."""


class DeletePolicy(str, Enum):
    none = "none"  # append-only
    hard = "hard"
    soft = "soft"  # active -> False, record kept


@dataclass
class _Collection(Generic[R]):
    name: str
    delete_policy: DeletePolicy = DeletePolicy.none
    time_field: Optional[str] = None
    records: Dict[int, R] = field(default_factory=dict)


def apply_overrides(snapshot: R, overrides: Mapping[str, Any]) -> R:
    """Shallow merge: keys present in ``overrides`` replace fields, the rest stay.

    Unknown and protected keys are dropped. The merged values are validated
    again, so timestamps are normalized to UTC and enums coerced. Returns a
    new snapshot.
    """
    model = type(snapshot)
    update = {k: v for k, v in overrides.items() if k in model.model_fields and k not in PROTECTED_FIELDS}
    return model.model_validate({**snapshot.model_dump(), **update})


def _fields(payload: Payload) -> Dict[str, Any]:
    if isinstance(payload, PartialUpdate):
        values = payload.overrides()
    elif isinstance(payload, BaseModel):
        values = payload.model_dump()
    else:
        values = dict(payload)
    return {k: v for k, v in values.items() if k not in PROTECTED_FIELDS}


def _synchronized(method: Callable[..., Any]) -> Callable[..., Any]:
    @functools.wraps(method)
    def wrapper(self: "RecordStore", *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


class RecordStore:
    """Explicitly constructed repository; each instance is fully isolated.

    Usage::

        store = RecordStore()
        user = store.create_user("demo", hashed_secret)
        store.create_glucose_reading(user.id, GlucoseReadingCreate(...))
        latest = store.list_glucose_readings(user.id, limit=10)
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._next_id = 1
        self._users: _Collection[User] = _Collection("users")
        self._glucose: _Collection[GlucoseReading] = _Collection(
            "glucose_readings", DeletePolicy.hard, "measured_at"
        )
        self._medicines: _Collection[Medicine] = _Collection("medicines", DeletePolicy.soft)
        self._medicine_records: _Collection[MedicineRecord] = _Collection(
            "medicine_records", DeletePolicy.none, "taken_at"
        )
        self._food: _Collection[FoodEntry] = _Collection(
            "food_entries", DeletePolicy.hard, "consumed_at"
        )
        self._settings: _Collection[UserSettings] = _Collection("user_settings")
        self._settings_by_owner: Dict[int, int] = {}

    # ------------------------------------------------------------------
    # Generic collection operations (caller holds the lock)
    # ------------------------------------------------------------------

    def _issue_id(self) -> int:
        issued = self._next_id
        self._next_id += 1
        return issued

    def _insert(self, collection: _Collection[R], build: Callable[[int], R]) -> R:
        record = build(self._issue_id())
        collection.records[record.id] = record
        logger.debug("Created %s id=%d", collection.name, record.id)
        return record

    def _list(
        self,
        collection: _Collection[R],
        owner_id: int,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: Optional[int] = None,
        include: Optional[Callable[[R], bool]] = None,
    ) -> List[R]:
        items = [
            r
            for r in collection.records.values()
            if isinstance(r, OwnedRecord) and r.owner_id == owner_id and (include is None or include(r))
        ]
        time_field = collection.time_field
        if time_field is None:
            items.sort(key=lambda r: r.id)
        else:
            # Window bounds are inclusive on both ends.
            if start is not None:
                lo = ensure_utc(start)
                items = [r for r in items if getattr(r, time_field) >= lo]
            if end is not None:
                hi = ensure_utc(end)
                items = [r for r in items if getattr(r, time_field) <= hi]
            items.sort(key=lambda r: (getattr(r, time_field), r.id), reverse=True)
        if limit is not None:
            items = items[: max(limit, 0)]
        return items

    def _update(self, collection: _Collection[R], record_id: int, overrides: Payload) -> Optional[R]:
        current = collection.records.get(record_id)
        if current is None:
            return None
        updated = apply_overrides(current, _fields(overrides))
        collection.records[record_id] = updated
        return updated

    def _delete(self, collection: _Collection[R], record_id: int) -> bool:
        policy = collection.delete_policy
        if policy is DeletePolicy.none:
            raise StoreError(f"{collection.name} does not support delete")
        current = collection.records.get(record_id)
        if current is None:
            return False
        if policy is DeletePolicy.hard:
            del collection.records[record_id]
        else:
            collection.records[record_id] = current.model_copy(update={"active": False})
        logger.debug("Deleted %s id=%d (%s)", collection.name, record_id, policy.value)
        return True

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    @_synchronized
    def create_user(self, handle: str, secret: str) -> User:
        if self.get_user_by_handle(handle) is not None:
            raise DuplicateHandleError(f"Handle already registered: {handle}")
        return self._insert(
            self._users,
            lambda new_id: User(id=new_id, handle=handle, secret=secret, created_at=utc_now()),
        )

    @_synchronized
    def get_user(self, user_id: int) -> Optional[User]:
        return self._users.records.get(user_id)

    @_synchronized
    def get_user_by_handle(self, handle: str) -> Optional[User]:
        for user in self._users.records.values():
            if user.handle == handle:
                return user
        return None

    # ------------------------------------------------------------------
    # Glucose readings
    # ------------------------------------------------------------------

    @_synchronized
    def list_glucose_readings(
        self,
        owner_id: int,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[GlucoseReading]:
        return self._list(self._glucose, owner_id, start=start, end=end, limit=limit)

    @_synchronized
    def get_glucose_reading(self, reading_id: int) -> Optional[GlucoseReading]:
        return self._glucose.records.get(reading_id)

    @_synchronized
    def create_glucose_reading(self, owner_id: int, data: Union[GlucoseReadingCreate, Mapping[str, Any]]) -> GlucoseReading:
        values = _fields(data)
        return self._insert(
            self._glucose,
            lambda new_id: GlucoseReading(id=new_id, owner_id=owner_id, created_at=utc_now(), **values),
        )

    @_synchronized
    def update_glucose_reading(self, reading_id: int, overrides: Payload) -> Optional[GlucoseReading]:
        return self._update(self._glucose, reading_id, overrides)

    @_synchronized
    def delete_glucose_reading(self, reading_id: int) -> bool:
        return self._delete(self._glucose, reading_id)

    # ------------------------------------------------------------------
    # Medicines
    # ------------------------------------------------------------------

    @_synchronized
    def list_medicines(self, owner_id: int) -> List[Medicine]:
        """Active medicines only; soft-deleted ones stay reachable by id."""
        return self._list(self._medicines, owner_id, include=lambda m: m.active)

    @_synchronized
    def get_medicine(self, medicine_id: int) -> Optional[Medicine]:
        return self._medicines.records.get(medicine_id)

    @_synchronized
    def create_medicine(self, owner_id: int, data: Union[MedicineCreate, Mapping[str, Any]]) -> Medicine:
        values = _fields(data)
        return self._insert(
            self._medicines,
            lambda new_id: Medicine(id=new_id, owner_id=owner_id, created_at=utc_now(), **values),
        )

    @_synchronized
    def update_medicine(self, medicine_id: int, overrides: Payload) -> Optional[Medicine]:
        return self._update(self._medicines, medicine_id, overrides)

    @_synchronized
    def delete_medicine(self, medicine_id: int) -> bool:
        return self._delete(self._medicines, medicine_id)

    # ------------------------------------------------------------------
    # Medicine records (append-only)
    # ------------------------------------------------------------------

    @_synchronized
    def list_medicine_records(
        self,
        owner_id: int,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[MedicineRecord]:
        return self._list(self._medicine_records, owner_id, start=start, end=end, limit=limit)

    @_synchronized
    def create_medicine_record(
        self, owner_id: int, data: Union[MedicineRecordCreate, Mapping[str, Any]]
    ) -> MedicineRecord:
        values = _fields(data)
        return self._insert(
            self._medicine_records,
            lambda new_id: MedicineRecord(id=new_id, owner_id=owner_id, created_at=utc_now(), **values),
        )

    # ------------------------------------------------------------------
    # Food entries
    # ------------------------------------------------------------------

    @_synchronized
    def list_food_entries(
        self,
        owner_id: int,
        *,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[FoodEntry]:
        return self._list(self._food, owner_id, start=start, end=end, limit=limit)

    @_synchronized
    def get_food_entry(self, entry_id: int) -> Optional[FoodEntry]:
        return self._food.records.get(entry_id)

    @_synchronized
    def create_food_entry(self, owner_id: int, data: Union[FoodEntryCreate, Mapping[str, Any]]) -> FoodEntry:
        values = _fields(data)
        return self._insert(
            self._food,
            lambda new_id: FoodEntry(id=new_id, owner_id=owner_id, created_at=utc_now(), **values),
        )

    @_synchronized
    def update_food_entry(self, entry_id: int, overrides: Payload) -> Optional[FoodEntry]:
        return self._update(self._food, entry_id, overrides)

    @_synchronized
    def delete_food_entry(self, entry_id: int) -> bool:
        return self._delete(self._food, entry_id)

    # ------------------------------------------------------------------
    # User settings (one per owner, created on first write)
    # ------------------------------------------------------------------

    @_synchronized
    def get_settings(self, owner_id: int) -> Optional[UserSettings]:
        settings_id = self._settings_by_owner.get(owner_id)
        if settings_id is None:
            return None
        return self._settings.records[settings_id]

    @_synchronized
    def put_settings(self, owner_id: int, overrides: Payload) -> UserSettings:
        now = utc_now()
        current = self.get_settings(owner_id)
        if current is None:
            current = self._insert(
                self._settings,
                lambda new_id: UserSettings(id=new_id, owner_id=owner_id, updated_at=now, **SETTINGS_DEFAULTS),
            )
            self._settings_by_owner[owner_id] = current.id
        updated = apply_overrides(current, _fields(overrides)).model_copy(update={"updated_at": now})
        self._settings.records[current.id] = updated
        return updated

    # ------------------------------------------------------------------

    @_synchronized
    def counts(self) -> Dict[str, int]:
        return {
            c.name: len(c.records)
            for c in (
                self._users,
                self._glucose,
                self._medicines,
                self._medicine_records,
                self._food,
                self._settings,
            )
        }
