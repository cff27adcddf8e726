from typing import List

import pytest
from oceanview.domain.records import ReservationRecord
from oceanview.usecases import reports as uc


class FakeResRepo:
    def __init__(self, records: List[ReservationRecord]) -> None:
        self.records = records
        self.find_all_calls = 0

    async def find_all(self) -> List[ReservationRecord]:
        self.find_all_calls += 1
        return list(self.records)


def _records() -> List[ReservationRecord]:
    return [
        ReservationRecord(id="1", reservation_number="A", room_type="Standard", check_in_date="2026-01-15",
                          total_bill=5000.0, status="Confirmed"),
        ReservationRecord(id="2", reservation_number="B", room_type="Suite", check_in_date="2026-03-01",
                          total_bill=12000.0, status="Checked-In"),
        ReservationRecord(id="3", reservation_number="C", room_type="Suite", check_in_date="2026-03-05",
                          total_bill=24000.0, status="Cancelled"),
    ]


@pytest.mark.asyncio
async def test_reports_are_recomputed_on_every_call() -> None:
    repo = FakeResRepo(_records())
    first = await uc.get_summary(repo)
    repo.records.append(ReservationRecord(id="4", room_type="Deluxe", total_bill=8000.0, status="Pending"))
    second = await uc.get_summary(repo)
    assert (first.total, second.total) == (3, 4)
    assert second.total_income == 25000.0
    assert repo.find_all_calls == 2


@pytest.mark.asyncio
async def test_income_report_from_bound() -> None:
    report = await uc.get_income_report(FakeResRepo(_records()), date_from="2026-02-01", date_to=None)
    assert [row.reservation_number for row in report.records] == ["B"]
    assert report.total_income == 12000.0


@pytest.mark.asyncio
async def test_occupancy_report() -> None:
    report = await uc.get_occupancy_report(FakeResRepo(_records()))
    assert report.by_room_type == {"Standard": 1, "Suite": 1}
    assert report.total == 3


@pytest.mark.asyncio
async def test_filter_reservations() -> None:
    result = await uc.filter_reservations(
        FakeResRepo(_records()), status="All", room_type="Suite", date_from=None, date_to="2026-03-01"
    )
    assert [r.id for r in result] == ["2"]
