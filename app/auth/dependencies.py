from typing import Annotated

from fastapi import Depends, Request

from app.achievements.service import AchievementService
from app.auth.service import AuthService
from app.config import get_settings
from app.store.base import Store

settings = get_settings()


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_achievement_service(store: Store = Depends(get_store)) -> AchievementService:
    return AchievementService(store)


def get_auth_service(
    store: Store = Depends(get_store),
    achievement_service: AchievementService = Depends(get_achievement_service),
) -> AuthService:
    return AuthService(store, achievement_service, settings.session_max_age_hours)


def get_session_token(request: Request) -> str | None:
    return request.cookies.get(settings.session_cookie_name)


def get_viewer_id(
    token: str | None = Depends(get_session_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> int | None:
    """Current user id from the session cookie, or None for anonymous."""
    return auth_service.resolve_session(token)


# Type aliases for cleaner route signatures
StoreDep = Annotated[Store, Depends(get_store)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
AchievementServiceDep = Annotated[AchievementService, Depends(get_achievement_service)]
SessionToken = Annotated[str | None, Depends(get_session_token)]
ViewerId = Annotated[int | None, Depends(get_viewer_id)]
