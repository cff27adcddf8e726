from typing import Optional

from ..domain import reports
from ..domain.records import ReservationRecord
from ..domain.repositories import ReservationRepository


async def get_summary(res_repo: ReservationRepository) -> reports.ReservationSummary:
    return reports.summarize(await res_repo.find_all())


async def get_income_report(
    res_repo: ReservationRepository,
    *,
    date_from: Optional[str],
    date_to: Optional[str],
) -> reports.IncomeReport:
    return reports.income_report(await res_repo.find_all(), date_from, date_to)


async def get_occupancy_report(res_repo: ReservationRepository) -> reports.OccupancyReport:
    return reports.occupancy_report(await res_repo.find_all())


async def filter_reservations(
    res_repo: ReservationRepository,
    *,
    status: Optional[str],
    room_type: Optional[str],
    date_from: Optional[str],
    date_to: Optional[str],
) -> list[ReservationRecord]:
    return reports.filter_reservations(
        await res_repo.find_all(),
        status=status,
        room_type=room_type,
        date_from=date_from,
        date_to=date_to,
    )
