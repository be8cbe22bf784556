from app.store.base import (
    AchievementRecord,
    AchievementStatus,
    DatabaseStatus,
    Store,
    UserRecord,
)
from app.store.sql import PostgresStore, SqliteStore, SqlStore, create_store

__all__ = [
    "Store",
    "SqlStore",
    "SqliteStore",
    "PostgresStore",
    "create_store",
    "UserRecord",
    "AchievementRecord",
    "AchievementStatus",
    "DatabaseStatus",
]
