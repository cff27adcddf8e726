from dataclasses import replace

from ..domain.errors import InvalidStatusError, ReservationNotFoundError, ValidationFailedError
from ..domain.records import ReservationRecord, merge_patch
from ..domain.repositories import ReservationRepository
from ..domain.validation import is_valid_status, validate_reservation
from ..models import ReservationStatus


async def list_reservations(res_repo: ReservationRepository) -> list[ReservationRecord]:
    return await res_repo.find_all()


async def get_reservation(res_repo: ReservationRepository, *, reservation_id: str) -> ReservationRecord:
    record = await res_repo.find_by_id(reservation_id)
    if record is None:
        raise ReservationNotFoundError("Reservation not found")
    return record


async def create_reservation(
    res_repo: ReservationRepository,
    *,
    draft: ReservationRecord,
) -> ReservationRecord:
    errors = validate_reservation(draft)
    if errors:
        raise ValidationFailedError(errors)
    if draft.status and not is_valid_status(draft.status):
        raise InvalidStatusError("Invalid status value")

    # The store assigns ids; never trust one from the client.
    draft = replace(draft, id=None)
    if not draft.status:
        draft = replace(draft, status=ReservationStatus.PENDING.value)
    return await res_repo.save(draft)


async def update_reservation(
    res_repo: ReservationRepository,
    *,
    reservation_id: str,
    patch: ReservationRecord,
) -> tuple[ReservationRecord, ReservationRecord]:
    """Apply `patch` field-by-field. Returns (before, after)."""
    if patch.status is not None and not is_valid_status(patch.status):
        raise InvalidStatusError("Invalid status value")

    existing = await res_repo.find_by_id(reservation_id)
    if existing is None:
        raise ReservationNotFoundError("Reservation not found")

    updated = await res_repo.save(merge_patch(existing, patch))
    return existing, updated


async def delete_reservation(res_repo: ReservationRepository, *, reservation_id: str) -> None:
    if not await res_repo.exists_by_id(reservation_id):
        raise ReservationNotFoundError("Reservation not found")
    await res_repo.delete_by_id(reservation_id)
