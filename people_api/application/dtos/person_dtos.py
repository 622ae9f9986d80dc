"""
Person-related Data Transfer Objects.

These DTOs provide a stable API shape independent of the table models.
Surrogate identifiers are never exposed.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from people_api.domain.shared.text import has_text


class AddressDto(BaseModel):
    """DTO for an address in person responses."""

    street: str | None = Field(None, max_length=255, description="Street line")


class PersonDto(BaseModel):
    """DTO for a person and the addresses they own."""

    name: str = Field(..., min_length=1, max_length=255, description="Unique name")
    addresses: list[AddressDto] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name_not_blank(cls, v: str) -> str:
        """Reject names made only of whitespace."""
        if not has_text(v):
            raise ValueError("name must not be blank")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ahmet",
                "addresses": [{"street": "ahmetFirstStreet"}],
            }
        }
    )
