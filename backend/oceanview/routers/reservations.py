from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..deps import get_session
from ..domain.billing import quote_bill
from ..domain.errors import InvalidStatusError, ReservationNotFoundError, ValidationFailedError
from ..infrastructure.repositories import SqlAlchemyReservationRepository
from ..schemas import BillQuoteRead, MessageResponse, ReservationPayload, ReservationRead
from ..usecases import reservations as reservation_usecase
from ..utils.audit_log import emit_audit_log

router = APIRouter(prefix="/api", tags=["reservations"])


def _audit(**kwargs: Any) -> None:
    try:
        emit_audit_log(entity="reservation", **kwargs)
    except RuntimeError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="audit log unavailable")


@router.get("/reservations", response_model=List[ReservationRead])
async def list_reservations(session: AsyncSession = Depends(get_session)) -> list[ReservationRead]:
    res_repo = SqlAlchemyReservationRepository(session)
    records = await reservation_usecase.list_reservations(res_repo)
    return [ReservationRead.from_record(r) for r in records]


@router.get("/reservations/quote", response_model=BillQuoteRead)
async def quote_reservation(
    room_type: str = Query(..., alias="roomType"),
    check_in_date: str = Query(..., alias="checkInDate"),
    check_out_date: str = Query(..., alias="checkOutDate"),
) -> BillQuoteRead:
    try:
        quote = quote_bill(room_type, check_in_date, check_out_date)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return BillQuoteRead.from_quote(quote)


@router.get("/reservations/{reservation_id}", response_model=ReservationRead)
async def get_reservation(
    reservation_id: str,
    session: AsyncSession = Depends(get_session),
) -> ReservationRead:
    res_repo = SqlAlchemyReservationRepository(session)
    try:
        record = await reservation_usecase.get_reservation(res_repo, reservation_id=reservation_id)
    except ReservationNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reservation not found")
    return ReservationRead.from_record(record)


@router.post("/reservations", response_model=ReservationRead, status_code=status.HTTP_201_CREATED)
async def create_reservation(
    payload: ReservationPayload,
    session: AsyncSession = Depends(get_session),
) -> ReservationRead:
    res_repo = SqlAlchemyReservationRepository(session)
    async with session.begin():
        try:
            created = await reservation_usecase.create_reservation(res_repo, draft=payload.to_record())
        except ValidationFailedError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.errors)
        except InvalidStatusError:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid status value")
        _audit(
            action="reservation.created",
            entity_id=created.id,
            status_to=created.status,
            extra={"reservation_number": created.reservation_number},
        )
    return ReservationRead.from_record(created)


@router.put("/reservations/{reservation_id}", response_model=ReservationRead)
async def update_reservation(
    reservation_id: str,
    payload: ReservationPayload,
    session: AsyncSession = Depends(get_session),
) -> ReservationRead:
    res_repo = SqlAlchemyReservationRepository(session)
    async with session.begin():
        try:
            before, updated = await reservation_usecase.update_reservation(
                res_repo,
                reservation_id=reservation_id,
                patch=payload.to_record(),
            )
        except InvalidStatusError:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid status value")
        except ReservationNotFoundError:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reservation not found")
        _audit(
            action="reservation.updated",
            entity_id=updated.id,
            status_from=before.status,
            status_to=updated.status,
        )
    return ReservationRead.from_record(updated)


@router.delete("/reservations/{reservation_id}", response_model=MessageResponse)
async def delete_reservation(
    reservation_id: str,
    session: AsyncSession = Depends(get_session),
) -> MessageResponse:
    res_repo = SqlAlchemyReservationRepository(session)
    async with session.begin():
        try:
            await reservation_usecase.delete_reservation(res_repo, reservation_id=reservation_id)
        except ReservationNotFoundError:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reservation not found")
        _audit(action="reservation.deleted", entity_id=reservation_id)
    return MessageResponse(message="Deleted successfully")
