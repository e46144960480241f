from enum import StrEnum


class ErrorKind(StrEnum):
    VALIDATION_ERROR = "ValidationError"
    USERNAME_CONFLICT = "UsernameAlreadyTaken"
    EMAIL_CONFLICT = "EmailAlreadyInUse"
    USER_NOT_FOUND = "UserNotFound"
    SERVER_ERROR = "ServerError"


STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION_ERROR: 400,
    ErrorKind.USERNAME_CONFLICT: 409,
    ErrorKind.EMAIL_CONFLICT: 409,
    ErrorKind.USER_NOT_FOUND: 404,
    ErrorKind.SERVER_ERROR: 500,
}


class AppError(Exception):
    """Base exception for application errors."""

    kinds: tuple[ErrorKind, ...] = ()

    def __init__(self, kind: ErrorKind = ErrorKind.SERVER_ERROR):
        self.kind = kind
        self.message = kind.value
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]

    @classmethod
    def from_kind(cls, kind: ErrorKind) -> "AppError":
        for error_cls in (ValidationError, ConflictError, NotFoundError):
            if kind in error_cls.kinds:
                return error_cls(kind)
        return cls(kind)


class ValidationError(AppError):
    """Raised when a request is missing fields or is malformed."""

    kinds = (ErrorKind.VALIDATION_ERROR,)

    def __init__(self, kind: ErrorKind = ErrorKind.VALIDATION_ERROR):
        super().__init__(kind)


class ConflictError(AppError):
    """Raised when an email or username is already taken."""

    kinds = (ErrorKind.EMAIL_CONFLICT, ErrorKind.USERNAME_CONFLICT)

    def __init__(self, kind: ErrorKind = ErrorKind.EMAIL_CONFLICT):
        super().__init__(kind)


class NotFoundError(AppError):
    """Raised when a requested user does not exist."""

    kinds = (ErrorKind.USER_NOT_FOUND,)

    def __init__(self, kind: ErrorKind = ErrorKind.USER_NOT_FOUND):
        super().__init__(kind)
