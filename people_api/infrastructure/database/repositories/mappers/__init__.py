"""
Entity Mappers

Mappers converting table entities to API DTOs.
"""

from .person_mapper import PersonMapper

__all__ = ["PersonMapper"]
