"""
Demo data seeding.

Each demo person is inserted in its own transaction so that a worker losing a
race to another worker only skips that person instead of failing startup.
"""

from sqlalchemy.engine import Engine

from people_api.application.services.person_service import PersonService
from people_api.core.observability import get_logger
from people_api.core.unit_of_work import UnitOfWork
from people_api.domain.shared.exceptions import ConstraintViolationError

logger = get_logger(__name__)

DEMO_PEOPLE: dict[str, list[str]] = {
    "Ahmet": ["ahmetFirstStreet"],
    "Burak": ["firstStreet", "scStreet"],
}


def seed_demo_data(engine_override: Engine | None = None) -> list[str]:
    """
    Insert the demo people that are not stored yet.

    Args:
        engine_override: Engine to seed instead of the application engine

    Returns:
        Names of the people this call inserted, in insertion order
    """
    created: list[str] = []
    for name, streets in DEMO_PEOPLE.items():
        try:
            with UnitOfWork(engine_override) as uow:
                if uow.people.find_all_people(name):
                    logger.debug("Demo person already present", name=name)
                    continue
                PersonService(uow.session).register_person(name, streets)
        except ConstraintViolationError:
            logger.info("Demo person inserted concurrently, skipping", name=name)
            continue
        created.append(name)

    logger.info("Demo data seeded", created=len(created))
    return created
