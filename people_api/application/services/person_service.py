"""
Person application service.

Orchestrates repository reads and writes with the entity-to-DTO mapping.
Transactions are owned by the caller: the request session for reads, a
UnitOfWork for writes.
"""

from sqlmodel import Session

from people_api.application.dtos.person_dtos import PersonDto
from people_api.core.observability import get_logger
from people_api.infrastructure.database.models import Person
from people_api.infrastructure.database.repositories import PersonRepository
from people_api.infrastructure.database.repositories.mappers import PersonMapper

logger = get_logger(__name__)


class PersonService:
    """Application service for listing and registering people."""

    def __init__(self, session: Session):
        self.session = session
        self.person_repository = PersonRepository(session)

    def find_all_people(self) -> list[PersonDto]:
        """
        List every person with their addresses.

        The order is whatever the store returns.
        """
        people = self.person_repository.find_all()
        logger.debug("People loaded", count=len(people))
        return PersonMapper.people_to_dtos(people)

    def register_person(self, name: str, streets: list[str | None]) -> Person:
        """
        Build a person with one address per street and save them together.

        Raises:
            ValidationError: If the name is blank
            ConstraintViolationError: If a person with that name already exists
        """
        person = Person.create(name)
        for street in streets:
            person.add_address(street)

        saved = self.person_repository.save(person)
        logger.info(
            "Person registered",
            person_id=saved.id,
            address_count=len(saved.addresses),
        )
        return saved
