from contextlib import asynccontextmanager
from dataclasses import replace
from pathlib import Path
from typing import AsyncIterator

import pytest
from oceanview.domain.records import ReservationRecord, UserRecord
from oceanview.infrastructure.repositories import SqlAlchemyReservationRepository, SqlAlchemyUserRepository
from oceanview.models import Base, Reservation
from sqlalchemy import String
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine


@asynccontextmanager
async def _sessions(tmp_path: Path) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield async_sessionmaker(engine, expire_on_commit=False)
    finally:
        await engine.dispose()


def _reservation(**overrides: object) -> ReservationRecord:
    base = ReservationRecord(
        reservation_number="OCV-200",
        guest_name="Carol White",
        address="12 Beach Road",
        contact_number="0771234567",
        room_type="Deluxe",
        check_in_date="2026-06-01",
        check_out_date="2026-06-03",
        total_bill=16000.0,
        status="Pending",
    )
    return replace(base, **overrides)


def test_reservation_columns_have_no_length_cap() -> None:
    for column in Reservation.__table__.columns:
        if column.name == "id" or not isinstance(column.type, String):
            continue
        assert column.type.length is None, column.name


@pytest.mark.asyncio
async def test_reservation_store_round_trip(tmp_path: Path) -> None:
    async with _sessions(tmp_path) as make_session:
        async with make_session() as session, session.begin():
            repo = SqlAlchemyReservationRepository(session)
            saved = await repo.save(_reservation())

        assert saved.id is not None
        assert len(saved.id) == 32
        assert saved == _reservation(id=saved.id)

        async with make_session() as session, session.begin():
            repo = SqlAlchemyReservationRepository(session)
            assert await repo.find_by_id(saved.id) == saved
            assert await repo.exists_by_id(saved.id)
            updated = await repo.save(replace(saved, status="Confirmed", check_in_date="2026-06-01T10:00"))

        assert updated.id == saved.id

        async with make_session() as session, session.begin():
            repo = SqlAlchemyReservationRepository(session)
            rows = await repo.find_all()
            assert [r.status for r in rows] == ["Confirmed"]
            assert rows[0].check_in_date == "2026-06-01T10:00"
            await repo.delete_by_id(saved.id)

        async with make_session() as session:
            repo = SqlAlchemyReservationRepository(session)
            assert await repo.find_by_id(saved.id) is None
            assert not await repo.exists_by_id(saved.id)
            assert await repo.find_all() == []


@pytest.mark.asyncio
async def test_reservation_store_keeps_long_values(tmp_path: Path) -> None:
    number = "R" * 300
    async with _sessions(tmp_path) as make_session:
        async with make_session() as session, session.begin():
            saved = await SqlAlchemyReservationRepository(session).save(_reservation(reservation_number=number))

        async with make_session() as session:
            found = await SqlAlchemyReservationRepository(session).find_by_id(saved.id)
    assert found is not None
    assert found.reservation_number == number


@pytest.mark.asyncio
async def test_user_store_lookups(tmp_path: Path) -> None:
    async with _sessions(tmp_path) as make_session:
        async with make_session() as session, session.begin():
            repo = SqlAlchemyUserRepository(session)
            saved = await repo.save(
                UserRecord(username="front_desk", email="desk@oceanview.com", password="pass1234", role="USER")
            )

        async with make_session() as session:
            repo = SqlAlchemyUserRepository(session)
            assert await repo.find_by_username("front_desk") == saved
            assert await repo.find_by_email("desk@oceanview.com") == saved
            assert await repo.find_by_username("nobody") is None
            assert await repo.find_by_email("nobody@oceanview.com") is None
            assert [u.id for u in await repo.find_all()] == [saved.id]
