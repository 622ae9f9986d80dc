"""
Unit of Work pattern implementation for transaction management.

One session, one transaction: everything done through the unit of work is
committed together on a clean exit and rolled back as a whole on error.
"""

from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from people_api.core.db import engine
from people_api.core.observability import get_logger
from people_api.domain.shared.exceptions import ConstraintViolationError
from people_api.infrastructure.database.repositories import (
    AddressRepository,
    PersonRepository,
)

logger = get_logger(__name__)


class UnitOfWork:
    """
    Unit of Work for managing a single database transaction.

    Usage:
        with UnitOfWork() as uow:
            uow.people.save(person)
    """

    def __init__(self, engine_override: Engine | None = None):
        self.session: Session | None = None
        self._engine = engine_override or engine
        self.people: PersonRepository | None = None
        self.addresses: AddressRepository | None = None

    def __enter__(self) -> "UnitOfWork":
        if self.session is not None:
            raise RuntimeError("UnitOfWork is already active")

        self.session = Session(self._engine)
        self.people = PersonRepository(self.session)
        self.addresses = AddressRepository(self.session)
        logger.debug("Transaction started", transaction_id=id(self.session))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.session is None:
            return

        try:
            if exc_type:
                self.rollback()
                logger.error(
                    "Transaction rolled back",
                    transaction_id=id(self.session),
                    error=str(exc_val),
                    error_type=exc_type.__name__,
                )
            else:
                try:
                    self.commit()
                except Exception:
                    self.rollback()
                    raise
        finally:
            self.close()

    def commit(self) -> None:
        """
        Commit the current transaction.

        Raises:
            ConstraintViolationError: If the store rejects the commit on a constraint
        """
        if not self.session:
            raise RuntimeError("No active session to commit")

        try:
            self.session.commit()
            logger.debug("Transaction committed", transaction_id=id(self.session))
        except IntegrityError as e:
            logger.error(
                "Commit rejected by a constraint",
                transaction_id=id(self.session),
                error=str(e.orig),
            )
            raise ConstraintViolationError("transaction", str(e.orig)) from e
        except SQLAlchemyError as e:
            logger.error(
                "Commit failed", transaction_id=id(self.session), error=str(e)
            )
            raise

    def rollback(self) -> None:
        """Rollback the current transaction."""
        if not self.session:
            raise RuntimeError("No active session to rollback")

        self.session.rollback()

    def close(self) -> None:
        if self.session:
            self.session.close()
        self.session = None
        self.people = None
        self.addresses = None
