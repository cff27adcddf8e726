from dataclasses import dataclass

from ..models import RoomType
from .validation import parse_iso_date

NIGHTLY_RATES: dict[RoomType, float] = {
    RoomType.STANDARD: 5000.0,
    RoomType.DELUXE: 8000.0,
    RoomType.SUITE: 12000.0,
}


@dataclass(frozen=True)
class BillQuote:
    room_type: RoomType
    nights: int
    nightly_rate: float
    total_bill: float


def count_nights(check_in: str, check_out: str) -> int:
    """Whole nights between two YYYY-MM-DD dates, never negative."""
    return max((parse_iso_date(check_out) - parse_iso_date(check_in)).days, 0)


def quote_bill(room_type: str, check_in: str, check_out: str) -> BillQuote:
    """
    Pure pricing: nights times the nightly rate of the room type.
    Raises ValueError for an unknown room type or malformed dates.
    """
    try:
        room = RoomType(room_type)
    except ValueError as exc:
        raise ValueError(f"Invalid room type: {room_type}") from exc
    try:
        nights = count_nights(check_in, check_out)
    except ValueError as exc:
        raise ValueError("Dates must be in YYYY-MM-DD format") from exc
    rate = NIGHTLY_RATES[room]
    return BillQuote(room_type=room, nights=nights, nightly_rate=rate, total_bill=nights * rate)
