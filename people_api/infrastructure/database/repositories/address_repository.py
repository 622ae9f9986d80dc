"""Address repository implementation."""

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from people_api.domain.shared.exceptions import DatabaseError
from people_api.infrastructure.database.models import Address

from .base import BaseRepository


class AddressRepository(BaseRepository[Address]):
    """Repository implementation for Address entities."""

    @property
    def entity_class(self) -> type[Address]:
        return Address

    def find_by_person_id(self, person_id: int) -> list[Address]:
        """Find the addresses owned by a person."""
        try:
            statement = select(Address).where(Address.person_id == person_id)
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            raise DatabaseError("find_by_person_id", str(e)) from e
