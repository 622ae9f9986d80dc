"""
SQLModel table definitions for people and their addresses.

A Person owns its Address rows: the relationship cascades saves and deletes,
and the foreign key also cascades at the database level.
"""

from sqlmodel import Field, Relationship, SQLModel

from people_api.domain.shared.exceptions import ValidationError
from people_api.domain.shared.text import has_text


class PersonBase(SQLModel):
    """Base Person model with shared fields."""

    name: str = Field(max_length=255, unique=True, index=True, nullable=False)


class Person(PersonBase, table=True):
    """Person table definition."""

    __tablename__ = "person"

    id: int | None = Field(default=None, primary_key=True)

    # Relationships
    addresses: list["Address"] = Relationship(
        back_populates="person", cascade_delete=True
    )

    @classmethod
    def create(cls, name: str) -> "Person":
        """Build a new person with an empty address set."""
        if not has_text(name):
            raise ValidationError("name", name, "name is required")
        return cls(name=name)

    def add_address(self, street: str | None) -> "Address":
        """Attach a new address owned by this person."""
        return Address.create(street=street, person=self)


class AddressBase(SQLModel):
    """Base Address model with shared fields."""

    street: str | None = Field(default=None, max_length=255)


class Address(AddressBase, table=True):
    """Address table definition."""

    __tablename__ = "address"

    id: int | None = Field(default=None, primary_key=True)
    person_id: int | None = Field(
        default=None, foreign_key="person.id", ondelete="CASCADE", index=True
    )

    # Relationships
    person: Person | None = Relationship(back_populates="addresses")

    @classmethod
    def create(cls, street: str | None, person: Person) -> "Address":
        """Build an address already linked to its owning person."""
        address = cls(street=street)
        # back_populates sets address.person on append
        person.addresses.append(address)
        return address
