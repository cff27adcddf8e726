from __future__ import annotations

from typing import Protocol

from .records import ReservationRecord, UserRecord


class ReservationRepository(Protocol):
    async def find_all(self) -> list[ReservationRecord]: ...

    async def find_by_id(self, reservation_id: str) -> ReservationRecord | None: ...

    async def save(self, record: ReservationRecord) -> ReservationRecord: ...

    async def exists_by_id(self, reservation_id: str) -> bool: ...

    async def delete_by_id(self, reservation_id: str) -> None: ...


class UserRepository(Protocol):
    async def find_all(self) -> list[UserRecord]: ...

    async def find_by_id(self, user_id: str) -> UserRecord | None: ...

    async def find_by_username(self, username: str) -> UserRecord | None: ...

    async def find_by_email(self, email: str) -> UserRecord | None: ...

    async def save(self, record: UserRecord) -> UserRecord: ...

    async def exists_by_id(self, user_id: str) -> bool: ...

    async def delete_by_id(self, user_id: str) -> None: ...
