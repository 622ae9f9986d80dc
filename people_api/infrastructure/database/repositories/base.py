"""
Base repository implementation providing generic persistence operations.

This module provides a generic base repository class that implements common
database operations using SQLModel and SQLAlchemy. Concrete repositories
extend it with entity-specific queries.

Repositories never commit: they flush so generated identifiers are available,
and leave commit/rollback to the caller's transaction boundary.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from people_api.core.observability import get_logger
from people_api.domain.shared.exceptions import (
    ConstraintViolationError,
    DatabaseError,
)

logger = get_logger(__name__)

EntityType = TypeVar("EntityType", bound=SQLModel)


class BaseRepository(Generic[EntityType], ABC):
    """
    Base repository class providing save, lookup, listing and deletion.

    Concrete repositories must provide the entity_class property.
    """

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    @property
    @abstractmethod
    def entity_class(self) -> type[EntityType]:
        """Return the SQLModel entity class managed by this repository."""
        pass

    @property
    def entity_name(self) -> str:
        return self.entity_class.__name__

    def save(self, entity: EntityType) -> EntityType:
        """
        Insert or update an entity and flush it to the store.

        Args:
            entity: Entity to persist

        Returns:
            The persisted entity with its identifier populated

        Raises:
            ConstraintViolationError: If a unique or foreign key constraint fails
            DatabaseError: If the database operation fails
        """
        try:
            self.session.add(entity)
            self.session.flush()
            logger.debug("Entity saved", entity=self.entity_name, id=entity.id)
            return entity
        except IntegrityError as e:
            logger.warning(
                "Constraint violation on save",
                entity=self.entity_name,
                error=str(e.orig),
            )
            raise ConstraintViolationError(self.entity_name, str(e.orig)) from e
        except SQLAlchemyError as e:
            raise DatabaseError("save", str(e)) from e

    def find_by_id(self, entity_id: int) -> EntityType | None:
        """
        Get entity by ID.

        Returns:
            Entity if found, None otherwise

        Raises:
            DatabaseError: If database operation fails
        """
        try:
            return self.session.get(self.entity_class, entity_id)
        except SQLAlchemyError as e:
            raise DatabaseError("find_by_id", str(e)) from e

    def find_all(self) -> list[EntityType]:
        """
        Get all entities in the store's natural order.

        Raises:
            DatabaseError: If database operation fails
        """
        try:
            statement = select(self.entity_class)
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            raise DatabaseError("find_all", str(e)) from e

    def delete(self, entity: EntityType) -> None:
        """
        Delete an entity, cascading to whatever it owns.

        Raises:
            DatabaseError: If database operation fails
        """
        try:
            self.session.delete(entity)
            self.session.flush()
            logger.debug("Entity deleted", entity=self.entity_name, id=entity.id)
        except SQLAlchemyError as e:
            raise DatabaseError("delete", str(e)) from e

    def delete_by_id(self, entity_id: int) -> bool:
        """
        Delete entity by ID.

        Returns:
            True if an entity was deleted, False if none had that ID
        """
        entity = self.find_by_id(entity_id)
        if entity is None:
            return False
        self.delete(entity)
        return True
