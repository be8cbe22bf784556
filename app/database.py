from sqlalchemy import Engine, create_engine, event, make_url
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def is_sqlite_url(database_url: str) -> bool:
    return database_url.startswith("sqlite")


def make_engine(database_url: str) -> Engine:
    if is_sqlite_url(database_url):
        # Pooled connections are handed across FastAPI worker threads
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
        )

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    url = make_url(database_url)
    if url.drivername == "postgresql":
        # Pin the bare scheme to psycopg2; newer SQLAlchemy defaults it to psycopg 3
        url = url.set(drivername="postgresql+psycopg2")
    return create_engine(url, pool_pre_ping=True, pool_recycle=1800)
