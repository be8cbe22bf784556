from fastapi import APIRouter, Response, status

from app.auth.dependencies import AuthServiceDep, SessionToken, ViewerId
from app.auth.schemas import (
    LoginRequest,
    MeResponse,
    MessageResponse,
    RegisterRequest,
    UserResponse,
    UserSummary,
)
from app.config import get_settings

settings = get_settings()

router = APIRouter()


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age_hours * 3600,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


@router.post("/register", response_model=UserSummary, status_code=status.HTTP_201_CREATED)
def register(
    data: RegisterRequest,
    response: Response,
    auth_service: AuthServiceDep,
):
    """Register a new user and start a session."""
    user = auth_service.register(data.username, data.password, data.email)
    _set_session_cookie(response, auth_service.start_session(user.id))
    return UserSummary(id=user.id, username=user.username)


@router.post("/login", response_model=UserSummary)
def login(
    data: LoginRequest,
    response: Response,
    auth_service: AuthServiceDep,
):
    """Login with username and password."""
    user = auth_service.login(data.username, data.password)
    _set_session_cookie(response, auth_service.start_session(user.id))
    return UserSummary(id=user.id, username=user.username)


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    token: SessionToken,
    auth_service: AuthServiceDep,
):
    """Revoke the current session and clear its cookie."""
    auth_service.logout(token)
    response.delete_cookie(settings.session_cookie_name)
    return MessageResponse(message="Successfully logged out.")


@router.get("/me", response_model=MeResponse)
def get_me(
    viewer_id: ViewerId,
    auth_service: AuthServiceDep,
):
    """Get the current user, if any."""
    if viewer_id is None:
        return MeResponse(authenticated=False)

    user = auth_service.get_me(viewer_id)
    return MeResponse(authenticated=True, user=UserResponse.model_validate(user))
