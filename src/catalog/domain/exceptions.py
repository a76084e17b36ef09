"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Malformed or out-of-range input, or a business rule was violated."""


class InvalidStateError(DomainException):
    """The operation is not permitted in the aggregate's current state."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PreconditionError(DomainException):
    """A required value or collaborator was ``None``."""


def require(value: T | None, message: str) -> T:
    """Return *value* unchanged, or raise PreconditionError if it is None."""
    if value is None:
        raise PreconditionError(message)
    return value
