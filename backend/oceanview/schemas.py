from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .domain.billing import BillQuote
from .domain.records import ReservationRecord, UserRecord
from .domain.reports import IncomeReport, IncomeRow, OccupancyReport, ReservationSummary


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    message: str


# ── Reservations ──────────────────────────────────────────────────────────────


class ReservationPayload(CamelModel):
    """Create/update body. Every field is optional here; business rules are checked in the domain."""

    reservation_number: Optional[str] = None
    guest_name: Optional[str] = None
    address: Optional[str] = None
    contact_number: Optional[str] = None
    room_type: Optional[str] = None
    check_in_date: Optional[str] = None
    check_out_date: Optional[str] = None
    total_bill: Optional[float] = None
    status: Optional[str] = None

    def to_record(self) -> ReservationRecord:
        return ReservationRecord(**self.model_dump())


class ReservationRead(ReservationPayload):
    id: str

    @classmethod
    def from_record(cls, record: ReservationRecord) -> "ReservationRead":
        return cls(
            id=record.id,
            reservation_number=record.reservation_number,
            guest_name=record.guest_name,
            address=record.address,
            contact_number=record.contact_number,
            room_type=record.room_type,
            check_in_date=record.check_in_date,
            check_out_date=record.check_out_date,
            total_bill=record.total_bill,
            status=record.status,
        )


class BillQuoteRead(CamelModel):
    room_type: str
    nights: int
    nightly_rate: float
    total_bill: float

    @classmethod
    def from_quote(cls, quote: BillQuote) -> "BillQuoteRead":
        return cls(
            room_type=quote.room_type.value,
            nights=quote.nights,
            nightly_rate=quote.nightly_rate,
            total_bill=quote.total_bill,
        )


# ── Users ─────────────────────────────────────────────────────────────────────


class UserPayload(CamelModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None

    def to_record(self) -> UserRecord:
        return UserRecord(**self.model_dump())


class LoginRequest(CamelModel):
    username: Optional[str] = None
    password: Optional[str] = None


class ChangePasswordRequest(CamelModel):
    old_password: Optional[str] = None
    new_password: Optional[str] = None


class UserRead(CamelModel):
    """A user as exposed over HTTP: never carries the password."""

    id: str
    username: Optional[str]
    email: Optional[str]
    role: Optional[str]

    @classmethod
    def from_record(cls, record: UserRecord) -> "UserRead":
        return cls(id=record.id, username=record.username, email=record.email, role=record.role)


class RegisterResponse(CamelModel):
    message: str
    username: Optional[str]
    role: Optional[str]


# ── Reports ───────────────────────────────────────────────────────────────────


class ReservationSummaryRead(CamelModel):
    total: int
    pending: int
    confirmed: int
    checked_in: int
    checked_out: int
    cancelled: int
    total_income: float
    avg_bill: float
    income_by_room: dict[str, float]
    bookings_by_room: dict[str, int]

    @classmethod
    def from_summary(cls, summary: ReservationSummary) -> "ReservationSummaryRead":
        return cls(
            total=summary.total,
            pending=summary.pending,
            confirmed=summary.confirmed,
            checked_in=summary.checked_in,
            checked_out=summary.checked_out,
            cancelled=summary.cancelled,
            total_income=summary.total_income,
            avg_bill=summary.avg_bill,
            income_by_room=summary.income_by_room,
            bookings_by_room=summary.bookings_by_room,
        )


class IncomeRowRead(CamelModel):
    reservation_number: Optional[str]
    guest_name: Optional[str]
    room_type: Optional[str]
    check_in_date: Optional[str]
    check_out_date: Optional[str]
    status: Optional[str]
    total_bill: Optional[float]

    @classmethod
    def from_row(cls, row: IncomeRow) -> "IncomeRowRead":
        return cls(
            reservation_number=row.reservation_number,
            guest_name=row.guest_name,
            room_type=row.room_type,
            check_in_date=row.check_in_date,
            check_out_date=row.check_out_date,
            status=row.status,
            total_bill=row.total_bill,
        )


class IncomeReportRead(CamelModel):
    records: list[IncomeRowRead]
    total_income: float
    count: int

    @classmethod
    def from_report(cls, report: IncomeReport) -> "IncomeReportRead":
        return cls(
            records=[IncomeRowRead.from_row(row) for row in report.records],
            total_income=report.total_income,
            count=report.count,
        )


class OccupancyReportRead(CamelModel):
    by_room_type: dict[str, int]
    by_status: dict[str, int]
    total: int

    @classmethod
    def from_report(cls, report: OccupancyReport) -> "OccupancyReportRead":
        return cls(by_room_type=report.by_room_type, by_status=report.by_status, total=report.total)
