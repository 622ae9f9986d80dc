"""
Domain Exceptions

Custom exceptions for persistence and domain errors, discriminated by
error type so the API layer can render them consistently.
"""

from enum import Enum


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    VALIDATION = "validation"
    CONSTRAINT_VIOLATION = "constraint_violation"
    REPOSITORY = "repository"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, str | dict[str, str | int | bool | None]]:
        """Convert error to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainError):
    """Raised when an entity is built with invalid field values."""

    def __init__(self, field_name: str, value: str | None, message: str) -> None:
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"Validation failed for field '{field_name}': {message}",
            ErrorType.VALIDATION,
            {"field": field_name, "value": value},
        )


class RepositoryError(DomainError):
    """Base exception for repository layer errors."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.REPOSITORY,
        details: dict[str, str | int | bool | None] | None = None,
    ) -> None:
        super().__init__(message, error_type, details)


class ConstraintViolationError(RepositoryError):
    """Raised when a write breaks a store constraint, e.g. a duplicate name."""

    def __init__(
        self, entity: str, message: str, constraint: str | None = None
    ) -> None:
        self.entity = entity
        self.constraint = constraint
        super().__init__(
            f"{entity} violates a store constraint: {message}",
            ErrorType.CONSTRAINT_VIOLATION,
            {"entity": entity, "constraint": constraint},
        )


class DatabaseError(RepositoryError):
    """Raised when a database operation fails (connectivity included)."""

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        super().__init__(
            f"Database error during {operation}: {message}",
            details={"operation": operation},
        )


class ReadOnlySessionError(RepositoryError):
    """Raised when a write is flushed through a session opened for reads only."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"Cannot {operation} in a read-only session",
            details={"operation": operation},
        )
