"""
Repository implementations for the people store.

Concrete repositories built on SQLModel sessions. Every repository shares
the save/find/delete operations of BaseRepository.
"""

from .address_repository import AddressRepository
from .base import BaseRepository
from .person_repository import PersonRepository, build_people_query

__all__ = [
    "AddressRepository",
    "BaseRepository",
    "PersonRepository",
    "build_people_query",
]
