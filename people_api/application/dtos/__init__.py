"""
Data Transfer Objects

Request/response shapes used by the API layer.
"""

from .person_dtos import AddressDto, PersonDto

__all__ = ["AddressDto", "PersonDto"]
