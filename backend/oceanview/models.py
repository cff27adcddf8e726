from __future__ import annotations

from enum import StrEnum
from typing import Optional

from sqlalchemy import Index, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql.sqltypes import Float, String, Text


class Base(DeclarativeBase):
    pass


class RoomType(StrEnum):
    STANDARD = "Standard"
    DELUXE = "Deluxe"
    SUITE = "Suite"


class ReservationStatus(StrEnum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CHECKED_IN = "Checked-In"
    CHECKED_OUT = "Checked-Out"
    CANCELLED = "Cancelled"


class UserRole(StrEnum):
    USER = "USER"
    ADMIN = "ADMIN"


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
        Index("idx_users_email", "email"),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    username: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    # Stored verbatim; see DESIGN.md on plaintext passwords.
    password: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    role: Mapped[str] = mapped_column(String(16), nullable=False, default=UserRole.USER.value)


class Reservation(Base):
    __tablename__ = "reservations"
    __table_args__ = (
        Index("idx_res_number", "reservation_number", mysql_length=64),
        Index("idx_res_check_in", "check_in_date", mysql_length=10),
    )

    # Updates skip full validation, so no reservation field carries a length cap.
    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    reservation_number: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    guest_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    contact_number: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    room_type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # ISO "YYYY-MM-DD" strings; lexicographic order equals date order.
    check_in_date: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    check_out_date: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    total_bill: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    status: Mapped[str] = mapped_column(Text, nullable=False, default=ReservationStatus.PENDING.value)
