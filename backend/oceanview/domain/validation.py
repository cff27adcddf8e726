"""Business-rule checks for user and reservation records.

Every check runs; callers get the full, ordered list of violations rather than the first one.
"""

import re
from datetime import date
from typing import Optional

from ..models import ReservationStatus, RoomType, UserRole
from .records import ReservationRecord, UserRecord

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_EMAIL = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+", re.ASCII)
_CONTACT_NUMBER = re.compile(r"[+]?[0-9\s\-]{7,15}", re.ASCII)

# Trimming drops ASCII control characters and space only; U+00A0 and friends count as text.
_TRIMMED = "".join(chr(c) for c in range(0x21))

_ROOM_TYPES = frozenset(r.value for r in RoomType)
_STATUSES = frozenset(s.value for s in ReservationStatus)
_ROLES = frozenset(r.value for r in UserRole)


def _trim(value: str) -> str:
    return value.strip(_TRIMMED)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not _trim(value)


def parse_iso_date(value: str) -> date:
    """Parse a strict "YYYY-MM-DD" string. Raises ValueError otherwise."""
    if not _ISO_DATE.fullmatch(value):
        raise ValueError(f"not a YYYY-MM-DD date: {value!r}")
    return date.fromisoformat(value)


def validate_reservation(record: ReservationRecord) -> list[str]:
    errors: list[str] = []

    if _is_blank(record.reservation_number):
        errors.append("Reservation number is required")

    if _is_blank(record.guest_name):
        errors.append("Guest name is required")
    # Gated on presence only: a missing name reports "required" alone.
    if record.guest_name is not None and len(_trim(record.guest_name)) < 2:
        errors.append("Guest name must be at least 2 characters")

    if record.room_type not in _ROOM_TYPES:
        errors.append("Room type must be Standard, Deluxe, or Suite")

    if _is_blank(record.check_in_date):
        errors.append("Check-in date is required")

    if _is_blank(record.check_out_date):
        errors.append("Check-out date is required")

    if record.check_in_date is not None and record.check_out_date is not None:
        try:
            check_in = parse_iso_date(record.check_in_date)
            check_out = parse_iso_date(record.check_out_date)
        except ValueError:
            errors.append("Dates must be in YYYY-MM-DD format")
        else:
            if check_out <= check_in:
                errors.append("Check-out date must be after check-in date")

    if record.total_bill is not None and record.total_bill < 0:
        errors.append("Total bill cannot be negative")

    if record.contact_number and not _CONTACT_NUMBER.fullmatch(record.contact_number):
        errors.append("Contact number format is invalid")

    return errors


def validate_user(record: UserRecord, *, is_update: bool) -> list[str]:
    """
    Create mode checks username, email and password. Update mode only checks a username that is
    actually being changed; an omitted or blank password on update means "keep the existing one".
    """
    errors: list[str] = []

    if not is_update:
        if record.username is None or len(_trim(record.username)) < 3:
            errors.append("Username must be at least 3 characters")
        if record.email is None or not _EMAIL.fullmatch(record.email):
            errors.append("Valid email address is required")
        if record.password is None or len(record.password) < 4:
            errors.append("Password must be at least 4 characters")
    else:
        username = _trim(record.username or "")
        if username and len(username) < 3:
            errors.append("Username must be at least 3 characters")

    if record.role is not None and record.role not in _ROLES:
        errors.append("Role must be USER or ADMIN")

    return errors


def is_valid_status(value: Optional[str]) -> bool:
    return value in _STATUSES
