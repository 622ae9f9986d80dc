"""
API Dependencies

Session and service providers for FastAPI routes.
"""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from people_api.application.services.person_service import PersonService
from people_api.core.db import read_only_session


def get_read_only_db() -> Generator[Session, None, None]:
    with read_only_session() as session:
        yield session


ReadOnlySessionDep = Annotated[Session, Depends(get_read_only_db)]


def get_person_service(session: ReadOnlySessionDep) -> PersonService:
    return PersonService(session)


PersonServiceDep = Annotated[PersonService, Depends(get_person_service)]
