import logging
import re

from app.achievements.catalog import REGISTRATION_ACHIEVEMENT
from app.achievements.service import AchievementService
from app.auth.security import create_session_token, hash_token
from app.common.exceptions import (
    InvalidCredentialsException,
    InvalidEmailException,
    UserNotFoundException,
    ValidationException,
)
from app.config import get_settings
from app.store.base import Store, UserRecord

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


def normalize_email(email: str | None) -> str | None:
    """Blank or missing email means no email; anything else must look valid."""
    if email is None or not email.strip():
        return None
    email = email.strip()
    if not EMAIL_RE.match(email):
        raise InvalidEmailException()
    return email


class AuthService:
    def __init__(
        self,
        store: Store,
        achievements: AchievementService,
        session_max_age_hours: int | None = None,
    ):
        self.store = store
        self.achievements = achievements
        if session_max_age_hours is None:
            session_max_age_hours = get_settings().session_max_age_hours
        self.session_max_age_hours = session_max_age_hours

    def _validate_registration(
        self, username: str | None, password: str | None, email: str | None
    ) -> str | None:
        # Presence of both fields is checked before either length, as the site always has
        if not username or not password:
            raise ValidationException("Username and password are required")
        if len(username) < MIN_USERNAME_LENGTH:
            raise ValidationException(
                f"Username must be at least {MIN_USERNAME_LENGTH} characters"
            )
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationException(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        return normalize_email(email)

    def register(
        self, username: str | None, password: str | None, email: str | None = None
    ) -> UserRecord:
        email = self._validate_registration(username, password, email)

        user_id = self.store.create_user(username, password, email)

        try:
            self.achievements.unlock(user_id, REGISTRATION_ACHIEVEMENT)
        except Exception:
            logger.exception(f"Registration achievement unlock failed for user {user_id}")

        user = self.store.get_user_by_id(user_id)
        if not user:
            raise UserNotFoundException()
        return user

    def login(self, username: str | None, password: str | None) -> UserRecord:
        if not username or not password:
            raise ValidationException("Username and password are required")

        if not self.store.verify_credentials(username, password):
            raise InvalidCredentialsException()

        user = self.store.get_user_by_username(username)
        if not user:
            raise InvalidCredentialsException()
        return user

    # ========== Sessions ==========

    def start_session(self, user_id: int) -> str:
        raw_token, hashed_token, expires_at = create_session_token(
            self.session_max_age_hours
        )
        self.store.create_session(user_id, hashed_token, expires_at)
        return raw_token

    def resolve_session(self, token: str | None) -> int | None:
        if not token:
            return None
        return self.store.get_session_user_id(hash_token(token))

    def logout(self, token: str | None) -> None:
        if not token:
            return
        self.store.revoke_session(hash_token(token))

    def get_me(self, user_id: int) -> UserRecord:
        user = self.store.get_user_by_id(user_id)
        if not user:
            raise UserNotFoundException()
        return user
