import pytest
from sqlmodel import Session, select

from people_api.api.deps import get_read_only_db
from people_api.core.db import engine
from people_api.domain.shared.exceptions import ReadOnlySessionError
from people_api.infrastructure.database.models import Person


@pytest.fixture
def read_only_db():
    provider = get_read_only_db()
    session = next(provider)
    yield session
    provider.close()


def test_read_only_session_reads_stored_people(
    db_session: Session, read_only_db: Session
) -> None:
    db_session.add(Person.create("Ahmet"))
    db_session.commit()

    names = [p.name for p in read_only_db.exec(select(Person)).all()]

    assert names == ["Ahmet"]


def test_read_only_session_rejects_flush(read_only_db: Session) -> None:
    read_only_db.add(Person.create("Ahmet"))

    with pytest.raises(ReadOnlySessionError):
        read_only_db.flush()


def test_read_only_session_does_not_autoflush_on_query(read_only_db: Session) -> None:
    read_only_db.add(Person.create("Ahmet"))

    assert read_only_db.exec(select(Person)).all() == []


def test_read_only_session_never_writes_to_the_store(read_only_db: Session) -> None:
    read_only_db.add(Person.create("Ahmet"))

    with pytest.raises(ReadOnlySessionError):
        read_only_db.commit()

    with Session(engine) as session:
        assert session.exec(select(Person)).all() == []
