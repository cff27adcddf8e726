class DomainError(Exception):
    pass


class ValidationFailedError(DomainError):
    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors


class NotFoundError(DomainError):
    pass


class ReservationNotFoundError(NotFoundError):
    pass


class UserNotFoundError(NotFoundError):
    pass


class ConflictError(DomainError):
    pass


class InvalidStatusError(DomainError):
    pass


class InvalidCredentialsError(DomainError):
    pass


class PasswordMismatchError(DomainError):
    pass
