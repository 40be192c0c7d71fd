# -*- coding: utf-8 -*-
"""Shared record bases and timestamp helpers."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Annotated, Any, ClassVar, Dict, FrozenSet, Tuple

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Naive timestamps are taken as UTC; aware ones are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """First and last instant of a UTC calendar day (both inclusive)."""
    return (
        datetime.combine(day, time.min, tzinfo=timezone.utc),
        datetime.combine(day, time.max, tzinfo=timezone.utc),
    )


UtcDatetime = Annotated[datetime, AfterValidator(ensure_utc)]


class StoredRecord(BaseModel):
    """Immutable snapshot held by the record store."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=1)


class OwnedRecord(StoredRecord):
    owner_id: int = Field(..., ge=1)


class PartialUpdate(BaseModel):
    """PUT payload: only the fields the caller sent become overrides.

    Explicit ``null`` is accepted only for fields listed in ``nullable_fields``;
    everything else would wipe a required attribute.
    """

    model_config = ConfigDict(extra="forbid")

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_null_required(self) -> "PartialUpdate":
        for name in sorted(self.model_fields_set):
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"{name} may not be null")
        return self

    def overrides(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class SuccessResponse(BaseModel):
    success: bool = True


class CatalogCategory(BaseModel):
    """A group of a read-only reference catalog (foods, medicines)."""

    key: str
    label: str
    item_count: int = Field(0, ge=0)
