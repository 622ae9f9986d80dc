import os

# Point the app at an in-memory store before any people_api module reads settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["LOG_FORMAT"] = "console"

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session  # noqa: E402

from people_api.core.db import create_tables, drop_tables, engine  # noqa: E402
from people_api.main import app  # noqa: E402


@pytest.fixture(autouse=True)
def tables() -> Generator[None, None, None]:
    """Give every test freshly created tables."""
    create_tables()
    yield
    drop_tables()


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session
        session.rollback()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
