"""
People API Routes.

Read-only listing of people and their addresses.
"""

from fastapi import APIRouter

from people_api.api.deps import PersonServiceDep
from people_api.application.dtos.person_dtos import PersonDto
from people_api.core.observability import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/people", tags=["people"])


@router.get(
    "",
    summary="List people",
    description="Get every person with the addresses they own.",
    response_model=list[PersonDto],
)
async def get_all_people(person_service: PersonServiceDep) -> list[PersonDto]:
    people = person_service.find_all_people()
    logger.info("People listed", count=len(people))
    return people
