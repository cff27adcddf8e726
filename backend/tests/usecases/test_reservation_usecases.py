from dataclasses import replace
from typing import Dict, List, Optional

import pytest
from oceanview.domain.errors import InvalidStatusError, ReservationNotFoundError, ValidationFailedError
from oceanview.domain.records import ReservationRecord
from oceanview.usecases import reservations as uc


class FakeResRepo:
    def __init__(self, *records: ReservationRecord) -> None:
        self.rows: Dict[str, ReservationRecord] = {r.id: r for r in records if r.id is not None}
        self.saved: List[ReservationRecord] = []
        self.deleted: List[str] = []

    async def find_all(self) -> List[ReservationRecord]:
        return list(self.rows.values())

    async def find_by_id(self, reservation_id: str) -> Optional[ReservationRecord]:
        return self.rows.get(reservation_id)

    async def save(self, record: ReservationRecord) -> ReservationRecord:
        if record.id is None:
            record = replace(record, id=f"gen-{len(self.rows) + 1}")
        self.rows[record.id] = record
        self.saved.append(record)
        return record

    async def exists_by_id(self, reservation_id: str) -> bool:
        return reservation_id in self.rows

    async def delete_by_id(self, reservation_id: str) -> None:
        self.deleted.append(reservation_id)
        self.rows.pop(reservation_id, None)


def _draft(**overrides: object) -> ReservationRecord:
    base = ReservationRecord(
        reservation_number="OCV-NEW-01",
        guest_name="Bob Smith",
        room_type="Suite",
        check_in_date="2026-05-01",
        check_out_date="2026-05-04",
        total_bill=36000.0,
    )
    return replace(base, **overrides)


@pytest.mark.asyncio
async def test_create_defaults_status_to_pending() -> None:
    repo = FakeResRepo()
    created = await uc.create_reservation(repo, draft=_draft())
    assert created.status == "Pending"
    assert created.id is not None
    assert repo.saved == [created]


@pytest.mark.asyncio
async def test_create_keeps_explicit_status() -> None:
    repo = FakeResRepo()
    created = await uc.create_reservation(repo, draft=_draft(status="Confirmed"))
    assert created.status == "Confirmed"


@pytest.mark.asyncio
async def test_create_rejects_status_outside_lifecycle() -> None:
    repo = FakeResRepo()
    with pytest.raises(InvalidStatusError):
        await uc.create_reservation(repo, draft=_draft(status="Active"))
    assert repo.saved == []


@pytest.mark.asyncio
async def test_create_ignores_client_supplied_id() -> None:
    repo = FakeResRepo(_draft(id="taken", status="Pending"))
    created = await uc.create_reservation(repo, draft=_draft(id="taken"))
    assert created.id != "taken"


@pytest.mark.asyncio
async def test_create_rejects_invalid_record_without_saving() -> None:
    repo = FakeResRepo()
    with pytest.raises(ValidationFailedError) as excinfo:
        await uc.create_reservation(repo, draft=_draft(check_in_date="2026-05-10", check_out_date="2026-05-04"))
    assert excinfo.value.errors == ["Check-out date must be after check-in date"]
    assert repo.saved == []


@pytest.mark.asyncio
async def test_update_merges_present_fields() -> None:
    existing = _draft(id="r1", status="Pending", address="Old address")
    repo = FakeResRepo(existing)
    before, after = await uc.update_reservation(
        repo,
        reservation_id="r1",
        patch=ReservationRecord(guest_name="Bob Smith Jr", status="Checked-In"),
    )
    assert before is existing
    assert after.guest_name == "Bob Smith Jr"
    assert after.status == "Checked-In"
    assert after.address == "Old address"
    assert repo.rows["r1"] == after


@pytest.mark.asyncio
async def test_update_rejects_unknown_status_before_lookup() -> None:
    repo = FakeResRepo()
    with pytest.raises(InvalidStatusError):
        await uc.update_reservation(repo, reservation_id="missing", patch=ReservationRecord(status="Active"))


@pytest.mark.asyncio
async def test_update_missing_reservation() -> None:
    repo = FakeResRepo()
    with pytest.raises(ReservationNotFoundError):
        await uc.update_reservation(repo, reservation_id="missing", patch=ReservationRecord(guest_name="Xavier"))


@pytest.mark.asyncio
async def test_get_missing_reservation() -> None:
    with pytest.raises(ReservationNotFoundError):
        await uc.get_reservation(FakeResRepo(), reservation_id="nope")


@pytest.mark.asyncio
async def test_delete_existing() -> None:
    repo = FakeResRepo(_draft(id="r1", status="Pending"))
    await uc.delete_reservation(repo, reservation_id="r1")
    assert repo.deleted == ["r1"]
    assert await repo.find_by_id("r1") is None


@pytest.mark.asyncio
async def test_delete_missing_does_not_call_store() -> None:
    repo = FakeResRepo()
    with pytest.raises(ReservationNotFoundError):
        await uc.delete_reservation(repo, reservation_id="nope")
    assert repo.deleted == []
