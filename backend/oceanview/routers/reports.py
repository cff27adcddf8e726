from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..deps import get_reservation_repo
from ..domain.repositories import ReservationRepository
from ..schemas import IncomeReportRead, OccupancyReportRead, ReservationRead, ReservationSummaryRead
from ..usecases import reports as report_usecase

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/summary", response_model=ReservationSummaryRead)
async def get_summary(res_repo: ReservationRepository = Depends(get_reservation_repo)) -> ReservationSummaryRead:
    return ReservationSummaryRead.from_summary(await report_usecase.get_summary(res_repo))


@router.get("/income", response_model=IncomeReportRead)
async def get_income_report(
    date_from: Optional[str] = Query(default=None, alias="from"),
    date_to: Optional[str] = Query(default=None, alias="to"),
    res_repo: ReservationRepository = Depends(get_reservation_repo),
) -> IncomeReportRead:
    report = await report_usecase.get_income_report(res_repo, date_from=date_from, date_to=date_to)
    return IncomeReportRead.from_report(report)


@router.get("/occupancy", response_model=OccupancyReportRead)
async def get_occupancy_report(
    res_repo: ReservationRepository = Depends(get_reservation_repo),
) -> OccupancyReportRead:
    return OccupancyReportRead.from_report(await report_usecase.get_occupancy_report(res_repo))


@router.get("/filter", response_model=List[ReservationRead])
async def filter_reservations(
    status: Optional[str] = Query(default=None),
    room_type: Optional[str] = Query(default=None, alias="roomType"),
    date_from: Optional[str] = Query(default=None, alias="from"),
    date_to: Optional[str] = Query(default=None, alias="to"),
    res_repo: ReservationRepository = Depends(get_reservation_repo),
) -> list[ReservationRead]:
    records = await report_usecase.filter_reservations(
        res_repo,
        status=status,
        room_type=room_type,
        date_from=date_from,
        date_to=date_to,
    )
    return [ReservationRead.from_record(r) for r in records]
