"""Domain-level exceptions.

Every rule violation raised by the core is a subclass of DomainException,
so the console layer can catch them uniformly, print the message and carry
on with its menu loop.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An argument or invariant was violated (blank text, bad amount...)."""


class EntityNotFoundError(DomainException):
    """A lookup by id found no match."""


class PreconditionFailedError(DomainException):
    """An operation was attempted without what it requires."""
