"""
Person repository implementation.

Provides the generic persistence operations for Person entities plus the
criteria-style filtered listing.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.sql.expression import SelectOfScalar

from people_api.domain.shared.exceptions import DatabaseError
from people_api.domain.shared.text import has_text
from people_api.infrastructure.database.models import Person

from .base import BaseRepository


def build_people_query(name: str | None = None) -> SelectOfScalar[Person]:
    """
    Build a query over all people, optionally restricted by exact name.

    A blank or missing name adds no predicate. A non-blank name is compared
    as given: case-sensitive, untrimmed, exact.
    """
    predicates = []

    if has_text(name):
        predicates.append(Person.name == name)

    statement = select(Person)
    if predicates:
        statement = statement.where(*predicates)
    return statement


class PersonRepository(BaseRepository[Person]):
    """Repository implementation for Person entities."""

    @property
    def entity_class(self) -> type[Person]:
        return Person

    def find_all_people(self, name: str | None = None) -> list[Person]:
        """
        Find people, filtered by exact name when one is given.

        Args:
            name: Exact name to match; None or blank returns everyone

        Raises:
            DatabaseError: If database operation fails
        """
        try:
            return list(self.session.exec(build_people_query(name)).all())
        except SQLAlchemyError as e:
            raise DatabaseError("find_all_people", str(e)) from e
