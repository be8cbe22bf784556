from app.common.exceptions import (
    AppException,
    ConstraintViolationException,
    EmailTakenException,
    InvalidCredentialsException,
    InvalidEmailException,
    NotFoundException,
    StorageException,
    UnauthorizedException,
    UsernameTakenException,
    UserNotFoundException,
    ValidationException,
)

__all__ = [
    "AppException",
    "ValidationException",
    "InvalidEmailException",
    "ConstraintViolationException",
    "UsernameTakenException",
    "EmailTakenException",
    "InvalidCredentialsException",
    "UnauthorizedException",
    "NotFoundException",
    "UserNotFoundException",
    "StorageException",
]
