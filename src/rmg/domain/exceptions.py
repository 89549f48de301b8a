"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidStatusTransitionError(ValidationError):
    """An order was asked to move to a status its lifecycle does not allow."""

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(
            f"Cannot change order status from {current} to {requested}"
        )
        self.current = current
        self.requested = requested


class DuplicateGarmentError(ValidationError):
    """A garment id is already registered in a unique-id inventory."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
