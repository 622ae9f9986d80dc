"""
Mapper for converting Person and Address entities into transport DTOs.

Mapping is a plain structural copy. DTOs are built with model_construct so no
validation runs here; validation only applies to inbound data.
"""

from collections.abc import Iterable

from people_api.application.dtos.person_dtos import AddressDto, PersonDto
from people_api.infrastructure.database.models import Address, Person


class PersonMapper:
    """
    Mapper class for converting Person entities into response DTOs.

    Surrogate identifiers and the address back reference are dropped.
    """

    @staticmethod
    def address_to_dto(address: Address) -> AddressDto:
        """
        Convert an Address entity to an AddressDto.

        Args:
            address: Address entity to convert

        Returns:
            Address DTO carrying only the street
        """
        return AddressDto.model_construct(street=address.street)

    @staticmethod
    def person_to_dto(person: Person) -> PersonDto:
        """
        Convert a Person entity and its addresses to a PersonDto.

        Args:
            person: Person entity to convert; its addresses may load lazily

        Returns:
            Person DTO with one AddressDto per owned address
        """
        return PersonDto.model_construct(
            name=person.name,
            addresses=[PersonMapper.address_to_dto(a) for a in person.addresses],
        )

    @staticmethod
    def people_to_dtos(people: Iterable[Person]) -> list[PersonDto]:
        """
        Convert a sequence of Person entities, keeping their order.

        Args:
            people: Person entities in store order

        Returns:
            One PersonDto per person, in the same order
        """
        return [PersonMapper.person_to_dto(person) for person in people]
