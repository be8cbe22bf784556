from fastapi import HTTPException, status


class AppException(HTTPException):
    pass


class ValidationException(AppException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class InvalidEmailException(ValidationException):
    def __init__(self):
        super().__init__(detail="Invalid email format")


class ConstraintViolationException(AppException):
    """A uniqueness rule was breached; `reason` names which one."""

    reason: str = "conflict"

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class UsernameTakenException(ConstraintViolationException):
    reason = "username_taken"

    def __init__(self):
        super().__init__(detail="Username already exists")


class EmailTakenException(ConstraintViolationException):
    reason = "email_taken"

    def __init__(self):
        super().__init__(detail="Email already exists")


class InvalidCredentialsException(AppException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )


class UnauthorizedException(AppException):
    def __init__(self, detail: str = "Authentication required"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class NotFoundException(AppException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class UserNotFoundException(NotFoundException):
    def __init__(self):
        super().__init__(detail="User not found")


class StorageException(AppException):
    def __init__(self):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
