"""API endpoints for achievements."""

from fastapi import APIRouter

from app.achievements.schemas import (
    AchievementListResponse,
    AchievementResponse,
    DatabaseStatusResponse,
    UnlockRequest,
    UnlockResponse,
)
from app.auth.dependencies import (
    AchievementServiceDep,
    AuthServiceDep,
    StoreDep,
    ViewerId,
)
from app.auth.schemas import UserResponse
from app.store.base import AchievementStatus

router = APIRouter()


def _status_to_response(item: AchievementStatus) -> AchievementResponse:
    achievement = item.achievement
    return AchievementResponse(
        id=achievement.id,
        name=achievement.name,
        description=achievement.description,
        icon_path=achievement.icon_path,
        category=achievement.category,
        unlocked=item.unlocked,
        unlocked_at=item.unlocked_at,
    )


@router.get("/achievements", response_model=AchievementListResponse)
def list_achievements(
    viewer_id: ViewerId,
    achievement_service: AchievementServiceDep,
    auth_service: AuthServiceDep,
):
    """All achievements, flagged with the viewer's unlocks when logged in."""
    items = achievement_service.list_for_viewer(viewer_id)

    user = None
    if viewer_id is not None:
        user = UserResponse.model_validate(auth_service.get_me(viewer_id))

    return AchievementListResponse(
        achievements=[_status_to_response(item) for item in items],
        count=len(items),
        user=user,
    )


@router.post("/unlock-achievement", response_model=UnlockResponse)
def unlock_achievement(
    data: UnlockRequest,
    viewer_id: ViewerId,
    achievement_service: AchievementServiceDep,
):
    """
    Unlock an achievement for the current user.

    `unlocked` is False when the achievement is unknown or was already
    unlocked; both are successful responses.
    """
    unlocked = achievement_service.unlock(viewer_id, data.achievement_name)
    return UnlockResponse(
        unlocked=unlocked,
        message=(
            "Achievement unlocked"
            if unlocked
            else "Achievement already unlocked or not found"
        ),
    )


@router.get("/db-status", response_model=DatabaseStatusResponse)
def database_status(store: StoreDep):
    """Row counts, for diagnostics."""
    db_status = store.database_status()
    return DatabaseStatusResponse(
        users=db_status.users,
        achievements=db_status.achievements,
        user_achievements=db_status.user_achievements,
    )
