from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Optional, TypeVar


@dataclass(frozen=True)
class ReservationRecord:
    id: Optional[str] = None
    reservation_number: Optional[str] = None
    guest_name: Optional[str] = None
    address: Optional[str] = None
    contact_number: Optional[str] = None
    room_type: Optional[str] = None
    check_in_date: Optional[str] = None
    check_out_date: Optional[str] = None
    total_bill: Optional[float] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class UserRecord:
    id: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


RecordT = TypeVar("RecordT", ReservationRecord, UserRecord)


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


def merge_patch(existing: RecordT, patch: RecordT) -> RecordT:
    """
    Return a copy of `existing` with every present field of `patch` applied.
    A field is present when it is neither None nor the empty string; `id` always comes from `existing`.
    """
    changes = {
        f.name: getattr(patch, f.name)
        for f in fields(patch)
        if f.name != "id" and _is_present(getattr(patch, f.name))
    }
    return replace(existing, **changes)
