from dataclasses import replace

from ..domain.errors import (
    ConflictError,
    InvalidCredentialsError,
    PasswordMismatchError,
    UserNotFoundError,
    ValidationFailedError,
)
from ..domain.records import UserRecord, merge_patch
from ..domain.repositories import UserRepository
from ..domain.validation import validate_user
from ..models import UserRole


async def register_user(user_repo: UserRepository, *, draft: UserRecord) -> UserRecord:
    # Conflicts are reported before any structural validation.
    if draft.username is not None and await user_repo.find_by_username(draft.username) is not None:
        raise ConflictError("Username already exists")
    if draft.email is not None and await user_repo.find_by_email(draft.email) is not None:
        raise ConflictError("Email already exists")

    errors = validate_user(draft, is_update=False)
    if errors:
        raise ValidationFailedError(errors)

    draft = replace(draft, id=None)
    if not draft.role:
        draft = replace(draft, role=UserRole.USER.value)
    return await user_repo.save(draft)


async def login(user_repo: UserRepository, *, username: str | None, password: str | None) -> UserRecord:
    user = await user_repo.find_by_username(username) if username is not None else None
    if user is None:
        raise UserNotFoundError("User not found")
    # Plaintext comparison, matching how passwords are stored.
    if user.password != password:
        raise InvalidCredentialsError("Invalid password")
    return user


async def list_users(user_repo: UserRepository) -> list[UserRecord]:
    return await user_repo.find_all()


async def get_user(user_repo: UserRepository, *, user_id: str) -> UserRecord:
    user = await user_repo.find_by_id(user_id)
    if user is None:
        raise UserNotFoundError("User not found")
    return user


async def update_user(user_repo: UserRepository, *, user_id: str, patch: UserRecord) -> UserRecord:
    existing = await user_repo.find_by_id(user_id)
    if existing is None:
        raise UserNotFoundError("User not found")

    errors = validate_user(patch, is_update=True)
    if errors:
        raise ValidationFailedError(errors)

    return await user_repo.save(merge_patch(existing, patch))


async def delete_user(user_repo: UserRepository, *, user_id: str) -> None:
    if not await user_repo.exists_by_id(user_id):
        raise UserNotFoundError("User not found")
    await user_repo.delete_by_id(user_id)


async def change_password(
    user_repo: UserRepository,
    *,
    user_id: str,
    old_password: str | None,
    new_password: str | None,
) -> UserRecord:
    user = await user_repo.find_by_id(user_id)
    if user is None:
        raise UserNotFoundError("User not found")
    if user.password != old_password:
        raise PasswordMismatchError("Old password is incorrect")
    if new_password is None or len(new_password) < 4:
        raise ValidationFailedError(["New password must be at least 4 characters"])
    return await user_repo.save(replace(user, password=new_password))
