"""Aggregate views over the reservation collection.

All functions take the full list supplied by the store and recompute from scratch. Money is summed
with `math.fsum` and left unrounded.
"""

from __future__ import annotations

import math
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Sequence

from ..models import ReservationStatus
from .records import ReservationRecord

ALL = "All"

_OCCUPYING = frozenset({ReservationStatus.CHECKED_IN.value, ReservationStatus.CONFIRMED.value})


@dataclass(frozen=True)
class ReservationSummary:
    total: int
    pending: int
    confirmed: int
    checked_in: int
    checked_out: int
    cancelled: int
    total_income: float
    avg_bill: float
    income_by_room: dict[str, float] = field(default_factory=dict)
    bookings_by_room: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class IncomeRow:
    reservation_number: Optional[str]
    guest_name: Optional[str]
    room_type: Optional[str]
    check_in_date: Optional[str]
    check_out_date: Optional[str]
    status: Optional[str]
    total_bill: Optional[float]


@dataclass(frozen=True)
class IncomeReport:
    records: list[IncomeRow]
    count: int
    total_income: float


@dataclass(frozen=True)
class OccupancyReport:
    by_room_type: dict[str, int]
    by_status: dict[str, int]
    total: int


def _bill(record: ReservationRecord) -> float:
    return record.total_bill if record.total_bill is not None else 0.0


def _is_cancelled(record: ReservationRecord) -> bool:
    return record.status == ReservationStatus.CANCELLED.value


def _count_by(records: Iterable[ReservationRecord], key: Callable[[ReservationRecord], Optional[str]]) -> dict[str, int]:
    counts = Counter(key(r) for r in records)
    return {k: v for k, v in counts.items() if k is not None}


def _check_in_between(
    records: Iterable[ReservationRecord],
    date_from: Optional[str],
    date_to: Optional[str],
) -> list[ReservationRecord]:
    # Plain string comparison: ISO dates sort chronologically.
    selected = list(records)
    if date_from:
        selected = [r for r in selected if r.check_in_date is not None and r.check_in_date >= date_from]
    if date_to:
        selected = [r for r in selected if r.check_in_date is not None and r.check_in_date <= date_to]
    return selected


def summarize(records: Sequence[ReservationRecord]) -> ReservationSummary:
    status_counts = Counter(r.status for r in records)
    billable = [r for r in records if not _is_cancelled(r)]
    with_bill = [r.total_bill for r in billable if r.total_bill is not None]

    income_by_room: dict[str, list[float]] = defaultdict(list)
    for r in billable:
        if r.room_type is not None:
            income_by_room[r.room_type].append(_bill(r))

    return ReservationSummary(
        total=len(records),
        pending=status_counts[ReservationStatus.PENDING.value],
        confirmed=status_counts[ReservationStatus.CONFIRMED.value],
        checked_in=status_counts[ReservationStatus.CHECKED_IN.value],
        checked_out=status_counts[ReservationStatus.CHECKED_OUT.value],
        cancelled=status_counts[ReservationStatus.CANCELLED.value],
        total_income=math.fsum(_bill(r) for r in billable),
        avg_bill=math.fsum(with_bill) / len(with_bill) if with_bill else 0.0,
        income_by_room={room: math.fsum(bills) for room, bills in income_by_room.items()},
        bookings_by_room=_count_by(records, lambda r: r.room_type),
    )


def income_report(
    records: Sequence[ReservationRecord],
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
) -> IncomeReport:
    rows = [
        IncomeRow(
            reservation_number=r.reservation_number,
            guest_name=r.guest_name,
            room_type=r.room_type,
            check_in_date=r.check_in_date,
            check_out_date=r.check_out_date,
            status=r.status,
            total_bill=r.total_bill,
        )
        for r in _check_in_between(records, date_from, date_to)
        if not _is_cancelled(r)
    ]
    total = math.fsum(row.total_bill for row in rows if row.total_bill is not None)
    return IncomeReport(records=rows, count=len(rows), total_income=total)


def occupancy_report(records: Sequence[ReservationRecord]) -> OccupancyReport:
    occupying = [r for r in records if r.status in _OCCUPYING]
    return OccupancyReport(
        by_room_type=_count_by(occupying, lambda r: r.room_type),
        by_status=_count_by(records, lambda r: r.status),
        total=len(records),
    )


def filter_reservations(
    records: Sequence[ReservationRecord],
    *,
    status: Optional[str] = None,
    room_type: Optional[str] = None,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
) -> list[ReservationRecord]:
    """Return the records matching every given criterion, in their original order."""
    selected = list(records)
    if status and status != ALL:
        selected = [r for r in selected if r.status == status]
    if room_type and room_type != ALL:
        selected = [r for r in selected if r.room_type == room_type]
    return _check_in_between(selected, date_from, date_to)
