"""Business logic for achievements."""

import logging

from app.common.exceptions import UnauthorizedException
from app.store.base import AchievementStatus, Store

logger = logging.getLogger(__name__)


class AchievementService:
    def __init__(self, store: Store):
        self.store = store

    def list_for_viewer(self, user_id: int | None) -> list[AchievementStatus]:
        """Catalog in (category, id) order with the viewer's unlock flags.

        Anonymous viewers see everything locked; the unlock table is not read.
        """
        if user_id is None:
            return [
                AchievementStatus(achievement=achievement, unlocked=False)
                for achievement in self.store.list_achievements()
            ]
        return self.store.list_user_achievements(user_id)

    def unlock(self, user_id: int | None, achievement_name: str) -> bool:
        """Unlock by name. False means unknown name or already unlocked."""
        if user_id is None:
            raise UnauthorizedException()
        return self.store.unlock_achievement(user_id, achievement_name)
