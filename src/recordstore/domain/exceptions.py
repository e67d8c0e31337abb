"""Domain-level exceptions.

All rule violations are expressed as subclasses of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
Every one of them is raised before the store writes anything.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An input value is malformed (negative amount, non-positive quantity)."""


class EntityNotFoundError(DomainException):
    """A referenced user, product or order does not exist."""


class InvalidStateError(DomainException):
    """The referenced entity cannot accept the operation in its current state."""
