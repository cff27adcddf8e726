from __future__ import annotations

import uuid
from dataclasses import asdict, replace
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..domain.records import ReservationRecord, UserRecord
from ..domain.repositories import ReservationRepository, UserRepository
from ..models import Reservation, User


def _new_id() -> str:
    return uuid.uuid4().hex


def _reservation_to_record(row: Reservation) -> ReservationRecord:
    return ReservationRecord(
        id=row.id,
        reservation_number=row.reservation_number,
        guest_name=row.guest_name,
        address=row.address,
        contact_number=row.contact_number,
        room_type=row.room_type,
        check_in_date=row.check_in_date,
        check_out_date=row.check_out_date,
        total_bill=row.total_bill,
        status=row.status,
    )


def _user_to_record(row: User) -> UserRecord:
    return UserRecord(
        id=row.id,
        username=row.username,
        email=row.email,
        password=row.password,
        role=row.role,
    )


class SqlAlchemyReservationRepository(ReservationRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self) -> List[ReservationRecord]:
        rows = await self.session.scalars(select(Reservation))
        return [_reservation_to_record(row) for row in rows.all()]

    async def find_by_id(self, reservation_id: str) -> Optional[ReservationRecord]:
        row = await self.session.get(Reservation, reservation_id)
        return _reservation_to_record(row) if row is not None else None

    async def save(self, record: ReservationRecord) -> ReservationRecord:
        if record.id is None:
            record = replace(record, id=_new_id())
        row = await self.session.merge(Reservation(**asdict(record)))
        await self.session.flush()
        return _reservation_to_record(row)

    async def exists_by_id(self, reservation_id: str) -> bool:
        stmt = select(Reservation.id).where(Reservation.id == reservation_id)
        return await self.session.scalar(stmt) is not None

    async def delete_by_id(self, reservation_id: str) -> None:
        await self.session.execute(delete(Reservation).where(Reservation.id == reservation_id))


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self) -> List[UserRecord]:
        rows = await self.session.scalars(select(User))
        return [_user_to_record(row) for row in rows.all()]

    async def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        row = await self.session.get(User, user_id)
        return _user_to_record(row) if row is not None else None

    async def find_by_username(self, username: str) -> Optional[UserRecord]:
        row = await self.session.scalar(select(User).where(User.username == username).limit(1))
        return _user_to_record(row) if isinstance(row, User) else None

    async def find_by_email(self, email: str) -> Optional[UserRecord]:
        row = await self.session.scalar(select(User).where(User.email == email).limit(1))
        return _user_to_record(row) if isinstance(row, User) else None

    async def save(self, record: UserRecord) -> UserRecord:
        if record.id is None:
            record = replace(record, id=_new_id())
        row = await self.session.merge(User(**asdict(record)))
        await self.session.flush()
        return _user_to_record(row)

    async def exists_by_id(self, user_id: str) -> bool:
        stmt = select(User.id).where(User.id == user_id)
        return await self.session.scalar(stmt) is not None

    async def delete_by_id(self, user_id: str) -> None:
        await self.session.execute(delete(User).where(User.id == user_id))
