"""Pydantic schemas for achievements."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.auth.schemas import UserResponse


class AchievementResponse(BaseModel):
    """Achievement details with the viewer's unlock flag."""

    id: int
    name: str
    description: str
    icon_path: str | None = None
    category: str | None = None
    unlocked: bool
    unlocked_at: datetime | None = None


class AchievementListResponse(BaseModel):
    """Full catalog as seen by the current viewer."""

    achievements: list[AchievementResponse]
    count: int
    user: UserResponse | None = None


class UnlockRequest(BaseModel):
    achievement_name: str = Field(..., min_length=1)


class UnlockResponse(BaseModel):
    unlocked: bool = Field(..., description="True only when newly unlocked")
    message: str


class DatabaseStatusResponse(BaseModel):
    users: int
    achievements: int
    user_achievements: int
