"""Domain-level exceptions.

Everything the user should see as a message is a subclass of
DomainException, so the CLI layer can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """User input or a record field failed validation."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(DomainException):
    """A backing file could not be read or written."""
