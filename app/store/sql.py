"""
SQLAlchemy-backed stores. SQLite and Postgres share every query except the
conflict-tolerant INSERT, which comes from the dialect's own insert construct.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import and_, func, select, update
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from app.achievements.catalog import ACHIEVEMENT_CATALOG
from app.achievements.models import Achievement, UserAchievement
from app.auth.models import User, UserSession
from app.auth.security import burn_verify, hash_password, verify_password
from app.common.exceptions import (
    EmailTakenException,
    UsernameTakenException,
    UserNotFoundException,
)
from app.database import Base, is_sqlite_url, make_engine
from app.store.base import (
    AchievementRecord,
    AchievementStatus,
    DatabaseStatus,
    Store,
    UserRecord,
)

logger = logging.getLogger(__name__)


class SqlStore:
    """Shared implementation; subclasses pick the dialect insert."""

    dialect_insert = None

    def __init__(self, database_url: str):
        if not database_url:
            raise ValueError("DATABASE_URL is required")
        self.engine = make_engine(database_url)
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False
        )

    def _insert(self, model):
        if self.dialect_insert is None:
            raise NotImplementedError(
                f"{type(self).__name__} has no dialect insert; use SqliteStore or PostgresStore"
            )
        return self.dialect_insert(model)

    def seed_statement(self):
        return (
            self._insert(Achievement)
            .values(ACHIEVEMENT_CATALOG)
            .on_conflict_do_nothing(index_elements=["name"])
        )

    def unlock_statement(self, user_id: int, achievement_id: int):
        return (
            self._insert(UserAchievement)
            .values(user_id=user_id, achievement_id=achievement_id)
            .on_conflict_do_nothing(index_elements=["user_id", "achievement_id"])
        )

    @staticmethod
    def _to_user_record(user: User) -> UserRecord:
        return UserRecord(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
        )

    @staticmethod
    def _to_achievement_record(achievement: Achievement) -> AchievementRecord:
        return AchievementRecord(
            id=achievement.id,
            name=achievement.name,
            description=achievement.description,
            icon_path=achievement.icon_path,
            category=achievement.category,
        )

    # ========== Lifecycle ==========

    def init_db(self) -> None:
        Base.metadata.create_all(self.engine)

        with self.Session() as session, session.begin():
            count = session.scalar(select(func.count()).select_from(Achievement))
            if count:
                logger.info(f"Achievement catalog already has {count} entries")
                return

            session.connection().execute(self.seed_statement())

        logger.info(f"Seeded {len(ACHIEVEMENT_CATALOG)} achievements")

    def dispose(self) -> None:
        self.engine.dispose()

    # ========== Users ==========

    def _find_user(self, session: Session, username: str) -> User | None:
        stmt = select(User).where(User.username == username)
        return session.execute(stmt).scalar_one_or_none()

    def _find_user_by_email(self, session: Session, email: str) -> User | None:
        stmt = select(User).where(User.email == email)
        return session.execute(stmt).scalar_one_or_none()

    def _conflict(self, username: str) -> Exception:
        if self.get_user_by_username(username) is not None:
            return UsernameTakenException()
        return EmailTakenException()

    def create_user(
        self, username: str, password: str, email: str | None = None
    ) -> int:
        with self.Session() as session:
            if self._find_user(session, username):
                raise UsernameTakenException()
            if email is not None and self._find_user_by_email(session, email):
                raise EmailTakenException()

        password_hash = hash_password(password)

        try:
            with self.Session() as session, session.begin():
                user = User(username=username, password_hash=password_hash, email=email)
                session.add(user)
                session.flush()  # Get user.id
                user_id = user.id
        except IntegrityError:
            # Lost a race against a concurrent registration
            raise self._conflict(username) from None

        logger.info(f"Created user {user_id} ({username})")
        return user_id

    def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        with self.Session() as session:
            user = self._find_user(session, username)
            if not user:
                return None
            return self._to_user_record(user)

    def get_user_by_id(self, user_id: int) -> Optional[UserRecord]:
        with self.Session() as session:
            user = session.get(User, user_id)
            if not user:
                return None
            return self._to_user_record(user)

    def verify_credentials(self, username: str, password: str) -> bool:
        with self.Session() as session:
            stmt = select(User.password_hash).where(User.username == username)
            password_hash = session.execute(stmt).scalar_one_or_none()

        if password_hash is None:
            return burn_verify(password)
        return verify_password(password, password_hash)

    # ========== Achievements ==========

    def list_achievements(self) -> list[AchievementRecord]:
        with self.Session() as session:
            result = session.execute(
                select(Achievement).order_by(Achievement.category, Achievement.id)
            )
            return [self._to_achievement_record(a) for a in result.scalars().all()]

    def list_user_achievements(self, user_id: int) -> list[AchievementStatus]:
        with self.Session() as session:
            stmt = (
                select(Achievement, UserAchievement.unlocked_at)
                .outerjoin(
                    UserAchievement,
                    and_(
                        UserAchievement.achievement_id == Achievement.id,
                        UserAchievement.user_id == user_id,
                    ),
                )
                .order_by(Achievement.category, Achievement.id)
            )
            return [
                AchievementStatus(
                    achievement=self._to_achievement_record(achievement),
                    unlocked=unlocked_at is not None,
                    unlocked_at=unlocked_at,
                )
                for achievement, unlocked_at in session.execute(stmt).all()
            ]

    def unlock_achievement(self, user_id: int, achievement_name: str) -> bool:
        try:
            with self.Session() as session, session.begin():
                achievement_id = session.execute(
                    select(Achievement.id).where(Achievement.name == achievement_name)
                ).scalar_one_or_none()

                if achievement_id is None:
                    return False

                stmt = self.unlock_statement(user_id, achievement_id)
                inserted = session.connection().execute(stmt).rowcount == 1
        except IntegrityError:
            # Conflicts on the key are absorbed above, so this is the user FK
            raise UserNotFoundException() from None

        if inserted:
            logger.info(f"Achievement unlocked: {achievement_name} for user {user_id}")
        return inserted

    # ========== Sessions ==========

    def create_session(
        self, user_id: int, token_hash: str, expires_at: datetime
    ) -> None:
        with self.Session() as session, session.begin():
            session.add(
                UserSession(user_id=user_id, token_hash=token_hash, expires_at=expires_at)
            )

    def get_session_user_id(self, token_hash: str) -> Optional[int]:
        with self.Session() as session:
            stmt = select(UserSession.user_id).where(
                UserSession.token_hash == token_hash,
                UserSession.revoked_at.is_(None),
                UserSession.expires_at > datetime.now(timezone.utc),
            )
            return session.execute(stmt).scalar_one_or_none()

    def revoke_session(self, token_hash: str) -> bool:
        with self.Session() as session, session.begin():
            stmt = (
                update(UserSession)
                .where(
                    UserSession.token_hash == token_hash,
                    UserSession.revoked_at.is_(None),
                )
                .values(revoked_at=datetime.now(timezone.utc))
            )
            return session.connection().execute(stmt).rowcount > 0

    # ========== Diagnostics ==========

    def database_status(self) -> DatabaseStatus:
        with self.Session() as session:
            return DatabaseStatus(
                users=session.scalar(select(func.count()).select_from(User)),
                achievements=session.scalar(
                    select(func.count()).select_from(Achievement)
                ),
                user_achievements=session.scalar(
                    select(func.count()).select_from(UserAchievement)
                ),
            )


class SqliteStore(SqlStore):
    """Embedded file-backed store."""

    dialect_insert = staticmethod(sqlite_insert)


class PostgresStore(SqlStore):
    """Networked Postgres store."""

    dialect_insert = staticmethod(postgresql_insert)


def create_store(database_url: str) -> Store:
    if is_sqlite_url(database_url):
        return SqliteStore(database_url)
    if database_url.startswith("postgresql"):
        return PostgresStore(database_url)
    raise ValueError(f"Unsupported database URL: {database_url.split(':', 1)[0]}")
