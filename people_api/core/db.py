from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from people_api.core.config import settings
from people_api.domain.shared.exceptions import ReadOnlySessionError

# make sure all SQLModel models are imported before creating tables,
# otherwise SQLModel might fail to initialize relationships properly
from people_api.infrastructure.database.models import Address, Person  # noqa: F401


def build_engine(database_uri: str) -> Engine:
    engine_kwargs: dict[str, Any] = {"pool_pre_ping": settings.DATABASE_POOL_PRE_PING}

    if database_uri.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        # One shared connection, otherwise every connection gets its own empty database
        if database_uri in ("sqlite://", "sqlite:///:memory:"):
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs.update(
            pool_size=settings.DATABASE_POOL_SIZE,
            pool_recycle=settings.DATABASE_POOL_RECYCLE,
            max_overflow=settings.DATABASE_POOL_SIZE * 2,
        )

    new_engine = create_engine(database_uri, **engine_kwargs)

    if new_engine.dialect.name == "sqlite":
        # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on
        @event.listens_for(new_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


engine = build_engine(settings.SQLALCHEMY_DATABASE_URI)


def create_tables() -> None:
    SQLModel.metadata.create_all(engine)


def drop_tables() -> None:
    SQLModel.metadata.drop_all(engine)


def _reject_flush(session, flush_context, instances):
    raise ReadOnlySessionError("flush")


@contextmanager
def read_only_session() -> Generator[Session, None, None]:
    """
    Open a session that can read but never writes.

    Autoflush is off so queries do not push pending objects, and any explicit
    flush or commit with pending changes raises ReadOnlySessionError. Whatever
    the transaction saw is rolled back on close.
    """
    with Session(engine, autoflush=False) as session:
        event.listen(session, "before_flush", _reject_flush)
        yield session


def init_db() -> None:
    # Tables should be created with Alembic migrations outside local runs
    if settings.CREATE_TABLES_ON_STARTUP:
        create_tables()

    if settings.SEED_DEMO_DATA:
        from people_api.core.seed import seed_demo_data

        seed_demo_data()
