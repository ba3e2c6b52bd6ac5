"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Storage failures are not wrapped; they reach the caller as raised by the
driver.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An argument or invariant check failed before touching the store."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
