from typing import Any, List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..deps import get_session
from ..domain.errors import (
    ConflictError,
    InvalidCredentialsError,
    PasswordMismatchError,
    UserNotFoundError,
    ValidationFailedError,
)
from ..infrastructure.repositories import SqlAlchemyUserRepository
from ..schemas import (
    ChangePasswordRequest,
    LoginRequest,
    MessageResponse,
    RegisterResponse,
    UserPayload,
    UserRead,
)
from ..usecases import users as user_usecase
from ..utils.audit_log import emit_audit_log

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _audit(**kwargs: Any) -> None:
    try:
        emit_audit_log(entity="user", **kwargs)
    except RuntimeError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="audit log unavailable")


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: UserPayload,
    session: AsyncSession = Depends(get_session),
) -> RegisterResponse:
    user_repo = SqlAlchemyUserRepository(session)
    async with session.begin():
        try:
            saved = await user_usecase.register_user(user_repo, draft=payload.to_record())
        except ConflictError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
        except ValidationFailedError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.errors)
        _audit(action="user.registered", entity_id=saved.id, extra={"role": saved.role})
    return RegisterResponse(message="Registration successful", username=saved.username, role=saved.role)


@router.post("/login", response_model=UserRead)
async def login(
    payload: LoginRequest,
    session: AsyncSession = Depends(get_session),
) -> UserRead:
    user_repo = SqlAlchemyUserRepository(session)
    try:
        user = await user_usecase.login(user_repo, username=payload.username, password=payload.password)
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    except InvalidCredentialsError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid password")
    return UserRead.from_record(user)


@router.get("/users", response_model=List[UserRead])
async def list_users(session: AsyncSession = Depends(get_session)) -> list[UserRead]:
    user_repo = SqlAlchemyUserRepository(session)
    return [UserRead.from_record(u) for u in await user_usecase.list_users(user_repo)]


@router.get("/users/{user_id}", response_model=UserRead)
async def get_user(user_id: str, session: AsyncSession = Depends(get_session)) -> UserRead:
    user_repo = SqlAlchemyUserRepository(session)
    try:
        user = await user_usecase.get_user(user_repo, user_id=user_id)
    except UserNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserRead.from_record(user)


@router.put("/users/{user_id}", response_model=UserRead)
async def update_user(
    user_id: str,
    payload: UserPayload,
    session: AsyncSession = Depends(get_session),
) -> UserRead:
    user_repo = SqlAlchemyUserRepository(session)
    async with session.begin():
        try:
            updated = await user_usecase.update_user(user_repo, user_id=user_id, patch=payload.to_record())
        except UserNotFoundError:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        except ValidationFailedError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.errors)
        _audit(action="user.updated", entity_id=updated.id, extra={"role": updated.role})
    return UserRead.from_record(updated)


@router.delete("/users/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: str, session: AsyncSession = Depends(get_session)) -> MessageResponse:
    user_repo = SqlAlchemyUserRepository(session)
    async with session.begin():
        try:
            await user_usecase.delete_user(user_repo, user_id=user_id)
        except UserNotFoundError:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        _audit(action="user.deleted", entity_id=user_id)
    return MessageResponse(message="User deleted successfully")


@router.put("/users/{user_id}/change-password", response_model=MessageResponse)
async def change_password(
    user_id: str,
    payload: ChangePasswordRequest,
    session: AsyncSession = Depends(get_session),
) -> MessageResponse:
    user_repo = SqlAlchemyUserRepository(session)
    async with session.begin():
        try:
            await user_usecase.change_password(
                user_repo,
                user_id=user_id,
                old_password=payload.old_password,
                new_password=payload.new_password,
            )
        except UserNotFoundError:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        except PasswordMismatchError:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Old password is incorrect")
        except ValidationFailedError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.errors[0])
        _audit(action="user.password_changed", entity_id=user_id)
    return MessageResponse(message="Password changed successfully")


@router.get("/test", response_model=MessageResponse)
async def auth_test() -> MessageResponse:
    return MessageResponse(message="Auth API working!")
