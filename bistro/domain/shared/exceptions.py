"""
Domain exceptions.

``DuplicateEntityError`` and ``EntityNotFoundError`` are recoverable: they
are raised before any mutation happens, so the caller can report them and
carry on with the store intact. ``NullArgumentError`` signals a programming
error in the caller.
"""

from enum import Enum

Details = dict[str, str | int | bool | None]


class ErrorType(str, Enum):
    """Error type enumeration for discriminated handling."""

    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    NULL_ARGUMENT = "null_argument"
    INVALID_COMMAND = "invalid_command"
    STORAGE = "storage"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: Details | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, str | Details]:
        """Convert error to dictionary for reporting."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class DuplicateEntityError(DomainError):
    """Raised when an operation would put two identity-equal entities in one collection."""

    def __init__(self, entity_kind: str, message: str | None = None) -> None:
        self.entity_kind = entity_kind
        super().__init__(
            message or f"Operation would result in duplicate {entity_kind}s",
            ErrorType.DUPLICATE,
            {"entity_kind": entity_kind},
        )


class EntityNotFoundError(DomainError):
    """Raised when an edit or removal targets an entity that is not in the collection."""

    def __init__(self, entity_kind: str, message: str | None = None) -> None:
        self.entity_kind = entity_kind
        super().__init__(
            message or f"The {entity_kind} could not be found",
            ErrorType.NOT_FOUND,
            {"entity_kind": entity_kind},
        )


class NullArgumentError(DomainError, ValueError):
    """Raised when a required entity, list or snapshot argument is None."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(
            f"Argument '{argument}' must not be None",
            ErrorType.NULL_ARGUMENT,
            {"argument": argument},
        )


class CommandError(DomainError):
    """Raised when a command cannot be applied, e.g. it refers to a missing index."""

    def __init__(self, message: str, details: Details | None = None) -> None:
        super().__init__(message, ErrorType.INVALID_COMMAND, details)


class StorageError(DomainError):
    """Base class for persistence failures."""

    def __init__(self, message: str, details: Details | None = None) -> None:
        super().__init__(message, ErrorType.STORAGE, details)


class DataLoadingError(StorageError):
    """Raised when stored data cannot be read or converted back into entities."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(
            f"Could not load data from {source}: {reason}",
            {"source": source},
        )


def require_not_none(value, argument: str):
    """Return ``value`` unchanged, raising ``NullArgumentError`` if it is None."""
    if value is None:
        raise NullArgumentError(argument)
    return value
