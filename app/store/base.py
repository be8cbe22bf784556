"""
Persistence interface shared by the SQLite and Postgres stores.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol


@dataclass(frozen=True)
class UserRecord:
    id: int
    username: str
    email: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class AchievementRecord:
    id: int
    name: str
    description: str
    icon_path: Optional[str]
    category: Optional[str]


@dataclass(frozen=True)
class AchievementStatus:
    achievement: AchievementRecord
    unlocked: bool
    unlocked_at: Optional[datetime] = None


@dataclass(frozen=True)
class DatabaseStatus:
    users: int
    achievements: int
    user_achievements: int


class Store(Protocol):
    """Interface for database access.

    The store is the only component that mutates users, achievements,
    unlocks and sessions. Every call acquires and releases its own
    connection.
    """

    def init_db(self) -> None:
        """Create missing tables and seed the catalog into an empty database."""
        ...

    def dispose(self) -> None:
        ...

    # Users

    def create_user(
        self, username: str, password: str, email: str | None = None
    ) -> int:
        """Hash the password and insert the user.

        Raises UsernameTakenException / EmailTakenException on conflict.
        """
        ...

    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        ...

    def get_user_by_id(self, user_id: int) -> Optional[UserRecord]:
        ...

    def verify_credentials(self, username: str, password: str) -> bool:
        ...

    # Achievements

    def list_achievements(self) -> list[AchievementRecord]:
        ...

    def list_user_achievements(self, user_id: int) -> list[AchievementStatus]:
        ...

    def unlock_achievement(self, user_id: int, achievement_name: str) -> bool:
        """Return True only when a new unlock row was written."""
        ...

    # Sessions

    def create_session(
        self, user_id: int, token_hash: str, expires_at: datetime
    ) -> None:
        ...

    def get_session_user_id(self, token_hash: str) -> Optional[int]:
        ...

    def revoke_session(self, token_hash: str) -> bool:
        ...

    # Diagnostics

    def database_status(self) -> DatabaseStatus:
        ...
